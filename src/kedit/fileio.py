from __future__ import annotations

import errno
import logging
import os

logger = logging.getLogger(__name__)


def load_lines(path: str) -> list[str]:
    """Read ``path`` as one string per line, line terminators stripped.

    Bytes are decoded as latin-1 so every byte survives a load/save round trip.
    """
    lines: list[str] = []
    with open(path, "rb") as f:
        for line in f:
            lines.append(line.rstrip(b"\r\n").decode("latin-1"))
    logger.info("loaded %d lines from %s", len(lines), path)
    return lines


def write_all(path: str, data: bytes) -> int:
    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
    try:
        os.ftruncate(fd, len(data))
        written = 0
        while written < len(data):
            n = os.write(fd, data[written:])
            if n <= 0:
                raise OSError(errno.EIO, "short write")
            written += n
    finally:
        os.close(fd)
    logger.info("wrote %d bytes to %s", written, path)
    return written

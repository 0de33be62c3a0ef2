from __future__ import annotations

import logging
import os
from collections.abc import Mapping

LOG_ENV = "KEDIT_LOG"
LOG_LEVEL_ENV = "KEDIT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(environ: Mapping[str, str] | None = None) -> logging.Logger:
    """Send the ``kedit`` logger to the file named by ``KEDIT_LOG``, if any.

    The editor owns the terminal, so nothing ever goes to stderr.
    """
    environ = os.environ if environ is None else environ
    root = logging.getLogger("kedit")
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    path = environ.get(LOG_ENV)
    if not path:
        root.addHandler(logging.NullHandler())
        return root

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    level = environ.get(LOG_LEVEL_ENV, "DEBUG").upper()
    root.setLevel(getattr(logging, level, logging.DEBUG))
    return root

"""Row store: the ordered rows of the open file plus its dirty flag and syntax profile."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .coords import render_chars
from .models import Row, Syntax
from .syntax import highlight_row, match_syntax, update_syntax

logger = logging.getLogger(__name__)


class Document:
    def __init__(self, filename: str | None = None) -> None:
        self.rows: list[Row] = []
        self.dirty = False
        self.filename = filename
        self.syntax: Syntax | None = None

    @property
    def numrows(self) -> int:
        return len(self.rows)

    def load(self, lines: Iterable[str]) -> None:
        self.rows = []
        for line in lines:
            self.insert_row(self.numrows, line)
        self.dirty = False

    def select_syntax(self, filename: str | None) -> None:
        self.syntax = match_syntax(filename)
        logger.debug(
            "syntax for %r: %s", filename, self.syntax.filetype if self.syntax else None
        )
        in_comment = False
        for row in self.rows:
            in_comment = highlight_row(row, self.syntax, in_comment)
            row.hl_open_comment = in_comment

    def update_row(self, row: Row) -> None:
        row.render = render_chars(row.chars)
        update_syntax(self, row.idx)

    def _renumber(self, start: int) -> None:
        for j in range(start, self.numrows):
            self.rows[j].idx = j

    def insert_row(self, at: int, s: str) -> None:
        if at < 0 or at > self.numrows:
            return
        # A new row starts with the comment state the next row used to inherit.
        inherited = at > 0 and self.rows[at - 1].hl_open_comment
        self.rows.insert(at, Row(idx=at, chars=s, hl_open_comment=inherited))
        self._renumber(at + 1)
        self.update_row(self.rows[at])
        self.dirty = True

    def del_row(self, at: int) -> None:
        if at < 0 or at >= self.numrows:
            return
        del self.rows[at]
        self._renumber(at)
        if at < self.numrows:
            update_syntax(self, at)
        self.dirty = True

    def row_insert_char(self, at: int, col: int, c: str) -> None:
        if at < 0 or at >= self.numrows:
            return
        row = self.rows[at]
        col = max(0, min(col, row.size))
        row.chars = row.chars[:col] + c + row.chars[col:]
        self.update_row(row)
        self.dirty = True

    def row_del_char(self, at: int, col: int) -> None:
        """Delete the character before ``col``."""
        if at < 0 or at >= self.numrows:
            return
        row = self.rows[at]
        col = min(col, row.size)
        if col <= 0:
            return
        row.chars = row.chars[: col - 1] + row.chars[col:]
        self.update_row(row)
        self.dirty = True

    def row_append_string(self, at: int, s: str) -> None:
        if at < 0 or at >= self.numrows:
            return
        row = self.rows[at]
        row.chars += s
        self.update_row(row)
        self.dirty = True

    def row_truncate(self, at: int, col: int) -> None:
        if at < 0 or at >= self.numrows:
            return
        row = self.rows[at]
        row.chars = row.chars[: max(0, col)]
        self.update_row(row)
        self.dirty = True

    def rows_to_string(self) -> str:
        return "".join(f"{row.chars}\n" for row in self.rows)

    def to_save_buffer(self) -> bytes:
        # Rows hold latin-1 decoded bytes, so this round-trips the file exactly.
        return self.rows_to_string().encode("latin-1", errors="replace")

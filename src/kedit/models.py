from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .constants import HL_KEYWORD1, HL_KEYWORD2, QUIT_CONFIRM_PRESSES, STATUS_MESSAGE_SECONDS

if TYPE_CHECKING:
    from .document import Document


class KeywordClass(enum.IntEnum):
    """Keyword tag; the value is the highlight class painted for a match."""

    PRIMARY = HL_KEYWORD1
    SECONDARY = HL_KEYWORD2


@dataclass(frozen=True, slots=True)
class Keyword:
    text: str
    kind: KeywordClass = KeywordClass.PRIMARY


@dataclass(frozen=True, slots=True)
class Syntax:
    filetype: str
    filematch: tuple[str, ...]
    keywords: tuple[Keyword, ...]
    singleline_comment_start: str
    multiline_comment_start: str
    multiline_comment_end: str
    flags: int


@dataclass(slots=True)
class Row:
    idx: int
    chars: str
    render: str = ""
    hl: list[int] = field(default_factory=list)
    hl_open_comment: bool = False

    @property
    def size(self) -> int:
        return len(self.chars)

    @property
    def rsize(self) -> int:
        return len(self.render)


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
    created: float = 0.0

    def visible(self, now: float | None = None) -> bool:
        now = time.time() if now is None else now
        return bool(self.text) and now - self.created < STATUS_MESSAGE_SECONDS


@dataclass(slots=True)
class SearchSnapshot:
    cx: int
    cy: int
    coloff: int
    rowoff: int


@dataclass(slots=True)
class EditorState:
    doc: Document
    cx: int = 0
    cy: int = 0
    rx: int = 0
    rowoff: int = 0
    coloff: int = 0
    screenrows: int = 0
    screencols: int = 0
    status: StatusMessage = field(default_factory=StatusMessage)
    quit_times: int = QUIT_CONFIRM_PRESSES

    @property
    def numrows(self) -> int:
        return self.doc.numrows

    def current_row(self) -> Row | None:
        if 0 <= self.cy < self.doc.numrows:
            return self.doc.rows[self.cy]
        return None

    def set_status_message(self, fmt: str, *args: object) -> None:
        self.status = StatusMessage(fmt % args if args else fmt, time.time())

    def snapshot(self) -> SearchSnapshot:
        return SearchSnapshot(self.cx, self.cy, self.coloff, self.rowoff)

    def restore(self, saved: SearchSnapshot) -> None:
        self.cx = saved.cx
        self.cy = saved.cy
        self.coloff = saved.coloff
        self.rowoff = saved.rowoff

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT, ARROW_UP, ENTER, ESC, HL_MATCH
from .coords import rx_to_cx
from .models import EditorState
from .prompt import prompt

if TYPE_CHECKING:
    from .editor import Editor


class IncrementalSearch:
    """Prompt observer that moves the cursor to the next match as the query changes.

    The row carrying the match overlay keeps a copy of its real highlight, which
    is put back before the next overlay and when the search ends.
    """

    def __init__(self, state: EditorState) -> None:
        self.state = state
        self.last_match = -1
        self.direction = 1
        self.saved_hl_line = -1
        self.saved_hl: list[int] | None = None

    def restore_highlight(self) -> None:
        rows = self.state.doc.rows
        if self.saved_hl is not None and 0 <= self.saved_hl_line < len(rows):
            rows[self.saved_hl_line].hl = self.saved_hl
        self.saved_hl = None
        self.saved_hl_line = -1

    def __call__(self, query: str, key: int) -> None:
        self.restore_highlight()

        if key in (ENTER, ESC):
            self.last_match = -1
            self.direction = 1
            return
        if key in (ARROW_RIGHT, ARROW_DOWN):
            self.direction = 1
        elif key in (ARROW_LEFT, ARROW_UP):
            self.direction = -1
        else:
            self.last_match = -1
            self.direction = 1

        if self.last_match == -1:
            self.direction = 1
        if not query:
            return
        match = self.next_match(query)
        if match is not None:
            self.jump_to(*match, len(query))

    def next_match(self, query: str) -> tuple[int, int] | None:
        rows = self.state.doc.rows
        current = self.last_match
        for _ in range(len(rows)):
            current += self.direction
            if current == -1:
                current = len(rows) - 1
            elif current == len(rows):
                current = 0
            pos = rows[current].render.find(query)
            if pos != -1:
                return current, pos
        return None

    def jump_to(self, row_idx: int, offset: int, length: int) -> None:
        state = self.state
        row = state.doc.rows[row_idx]
        self.last_match = row_idx
        state.cy = row_idx
        state.cx = rx_to_cx(row, offset)
        # Past the end, so the next scroll puts the match on the top line.
        state.rowoff = state.numrows

        self.saved_hl_line = row_idx
        self.saved_hl = row.hl.copy()
        end = min(offset + length, row.rsize)
        row.hl[offset:end] = [HL_MATCH] * (end - offset)


def find(editor: Editor) -> None:
    state = editor.state
    saved = state.snapshot()
    query = prompt(editor, "Search: %s (Use ESC/Arrows/Enter)", IncrementalSearch(state))
    if query is None:
        state.restore(saved)

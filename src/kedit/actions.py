from __future__ import annotations

from .models import EditorState


def row_len(state: EditorState, y: int | None = None) -> int:
    y = state.cy if y is None else y
    if 0 <= y < state.numrows:
        return state.doc.rows[y].size
    return 0


def clamp_cursor_x(state: EditorState) -> None:
    state.cx = max(0, min(state.cx, row_len(state)))


def move_left(state: EditorState) -> None:
    if state.cx > 0:
        state.cx -= 1
    elif state.cy > 0:
        state.cy -= 1
        state.cx = row_len(state)
    clamp_cursor_x(state)


def move_right(state: EditorState) -> None:
    row = state.current_row()
    if row is not None and state.cx < row.size:
        state.cx += 1
    elif row is not None and state.cx == row.size:
        state.cy += 1
        state.cx = 0
    clamp_cursor_x(state)


def move_up(state: EditorState) -> None:
    if state.cy > 0:
        state.cy -= 1
    clamp_cursor_x(state)


def move_down(state: EditorState) -> None:
    if state.cy < state.numrows:
        state.cy += 1
    clamp_cursor_x(state)


def move_home(state: EditorState) -> None:
    state.cx = 0


def move_end(state: EditorState) -> None:
    state.cx = row_len(state)


def move_to_eof(state: EditorState) -> None:
    state.cy = state.numrows
    clamp_cursor_x(state)


def page_up(state: EditorState) -> None:
    state.cy = state.rowoff
    for _ in range(state.screenrows):
        move_up(state)


def page_down(state: EditorState) -> None:
    state.cy = min(state.rowoff + state.screenrows - 1, state.numrows)
    for _ in range(state.screenrows):
        move_down(state)


def insert_char(state: EditorState, c: str) -> None:
    doc = state.doc
    if state.cy == doc.numrows:
        doc.insert_row(doc.numrows, "")
    doc.row_insert_char(state.cy, state.cx, c)
    state.cx += 1


def insert_newline(state: EditorState) -> None:
    doc = state.doc
    if state.cx == 0:
        doc.insert_row(state.cy, "")
    else:
        row = doc.rows[state.cy]
        doc.insert_row(state.cy + 1, row.chars[state.cx :])
        doc.row_truncate(state.cy, state.cx)
    state.cy += 1
    state.cx = 0


def delete_char(state: EditorState) -> None:
    doc = state.doc
    if state.cy == doc.numrows:
        return
    if state.cx == 0 and state.cy == 0:
        return
    if state.cx > 0:
        doc.row_del_char(state.cy, state.cx)
        state.cx -= 1
    else:
        state.cx = doc.rows[state.cy - 1].size
        doc.row_append_string(state.cy - 1, doc.rows[state.cy].chars)
        doc.del_row(state.cy)
        state.cy -= 1


def forward_delete(state: EditorState) -> None:
    move_right(state)
    delete_char(state)

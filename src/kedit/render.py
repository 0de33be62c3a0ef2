from __future__ import annotations

import time
from typing import TYPE_CHECKING

from .constants import (
    ANSI_CLEAR_LINE,
    ANSI_CURSOR_HOME,
    ANSI_DEFAULT_FG,
    ANSI_HIDE_CURSOR,
    ANSI_INVERT_OFF,
    ANSI_INVERT_ON,
    ANSI_SHOW_CURSOR,
    HL_NORMAL,
    KEDIT_VERSION,
)
from .coords import cx_to_rx
from .models import EditorState, Row
from .syntax import syntax_to_color

if TYPE_CHECKING:
    from .editor import Editor


def scroll(state: EditorState) -> None:
    state.rx = 0
    row = state.current_row()
    if row is not None:
        state.rx = cx_to_rx(row, state.cx)

    if state.cy < state.rowoff:
        state.rowoff = state.cy
    if state.cy >= state.rowoff + state.screenrows:
        state.rowoff = state.cy - state.screenrows + 1
    if state.rx < state.coloff:
        state.coloff = state.rx
    if state.rx >= state.coloff + state.screencols:
        state.coloff = state.rx - state.screencols + 1


def build_frame(state: EditorState, now: float | None = None) -> str:
    scroll(state)
    out: list[str] = [ANSI_HIDE_CURSOR, ANSI_CURSOR_HOME]
    draw_rows(state, out)
    draw_status_bar(state, out)
    draw_message_bar(state, out, now)
    out.append(cursor_escape(state))
    out.append(ANSI_SHOW_CURSOR)
    return "".join(out)


def refresh_screen(editor: Editor) -> None:
    frame = build_frame(editor.state)
    editor.terminal.write(frame.encode("latin-1", errors="replace"))


def draw_rows(state: EditorState, out: list[str]) -> None:
    for y in range(state.screenrows):
        filerow = state.rowoff + y
        if filerow < state.numrows:
            draw_row(state.doc.rows[filerow], state.coloff, state.screencols, out)
            out.append(ANSI_DEFAULT_FG)
        elif state.numrows == 0 and y == state.screenrows // 3:
            draw_welcome(state, out)
        else:
            out.append("~")
        out.append(ANSI_CLEAR_LINE)
        out.append("\r\n")


def draw_row(row: Row, coloff: int, screencols: int, out: list[str]) -> None:
    chars = row.render[coloff : coloff + screencols]
    hl = row.hl[coloff : coloff + screencols]
    current_color = -1
    for ch, h in zip(chars, hl):
        code = ord(ch)
        if code <= 31:
            sym = chr(ord("@") + code) if code <= 26 else "?"
            out.append(ANSI_INVERT_ON)
            out.append(sym)
            out.append(ANSI_INVERT_OFF)
            if current_color != -1:
                out.append(f"\x1b[{current_color}m")
        elif h == HL_NORMAL:
            if current_color != -1:
                out.append(ANSI_DEFAULT_FG)
                current_color = -1
            out.append(ch)
        else:
            color = syntax_to_color(h)
            if color != current_color:
                out.append(f"\x1b[{color}m")
                current_color = color
            out.append(ch)


def draw_welcome(state: EditorState, out: list[str]) -> None:
    welcome = f"Kedit editor -- version {KEDIT_VERSION}"
    if len(welcome) > state.screencols:
        welcome = welcome[: state.screencols]
    pad = (state.screencols - len(welcome)) // 2
    if pad:
        out.append("~")
        pad -= 1
    if pad > 0:
        out.append(" " * pad)
    out.append(welcome)


def status_line(state: EditorState) -> str:
    doc = state.doc
    name = doc.filename or "[No Name]"
    mod = " (modified)" if doc.dirty else ""
    status = f"{name:.20} - {doc.numrows} lines{mod}"[: state.screencols]
    filetype = doc.syntax.filetype if doc.syntax is not None else "no ft"
    rstatus = f"{filetype} | {state.cy + 1}/{doc.numrows}"

    line = [status]
    fill = len(status)
    while fill < state.screencols:
        if state.screencols - fill == len(rstatus):
            line.append(rstatus)
            break
        line.append(" ")
        fill += 1
    return "".join(line)


def draw_status_bar(state: EditorState, out: list[str]) -> None:
    out.append(ANSI_INVERT_ON)
    out.append(status_line(state))
    out.append(ANSI_INVERT_OFF)
    out.append("\r\n")


def draw_message_bar(state: EditorState, out: list[str], now: float | None = None) -> None:
    out.append(ANSI_CLEAR_LINE)
    now = time.time() if now is None else now
    if state.status.visible(now):
        out.append(state.status.text[: state.screencols])


def cursor_escape(state: EditorState) -> str:
    screen_cy = (state.cy - state.rowoff) + 1
    screen_cx = (state.rx - state.coloff) + 1
    return f"\x1b[{screen_cy};{screen_cx}H"

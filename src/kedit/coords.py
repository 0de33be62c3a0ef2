"""Mapping between logical (raw) columns and rendered (tab-expanded) columns."""

from __future__ import annotations

from .constants import KEDIT_TAB_STOP
from .models import Row


def cx_to_rx(row: Row, cx: int) -> int:
    rx = 0
    for ch in row.chars[:cx]:
        if ch == "\t":
            rx += (KEDIT_TAB_STOP - 1) - (rx % KEDIT_TAB_STOP)
        rx += 1
    return rx


def rx_to_cx(row: Row, rx: int) -> int:
    """Return the logical column holding rendered column ``rx``.

    A rendered column inside an expanded tab maps to the tab itself. Columns
    past the end of the rendered text clamp to the row length.
    """
    cur_rx = 0
    for cx, ch in enumerate(row.chars):
        if ch == "\t":
            cur_rx += (KEDIT_TAB_STOP - 1) - (cur_rx % KEDIT_TAB_STOP)
        cur_rx += 1
        if cur_rx > rx:
            return cx
    return row.size


def render_chars(chars: str) -> str:
    out: list[str] = []
    idx = 0
    for ch in chars:
        if ch == "\t":
            out.append(" ")
            idx += 1
            while idx % KEDIT_TAB_STOP != 0:
                out.append(" ")
                idx += 1
        else:
            out.append(ch)
            idx += 1
    return "".join(out)

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from .constants import BACKSPACE, CTRL_H, DEL_KEY, ENTER, ESC, KEDIT_QUERY_LEN

if TYPE_CHECKING:
    from .editor import Editor


class SearchObserver(Protocol):
    def __call__(self, query: str, key: int) -> None: ...


def prompt(editor: Editor, template: str, observer: SearchObserver | None = None) -> str | None:
    """Read a line of input in the message bar.

    ``template`` contains one ``%s`` for the text typed so far. ``observer`` is
    called after every key, including the Enter or Escape that ends the prompt.
    Returns ``None`` when the prompt is cancelled.
    """
    buf = ""
    while True:
        editor.state.set_status_message(template, buf)
        editor.refresh_screen()

        c = editor.terminal.read_key()
        if c in (DEL_KEY, CTRL_H, BACKSPACE):
            buf = buf[:-1]
        elif c == ESC:
            editor.state.set_status_message("")
            if observer is not None:
                observer(buf, c)
            return None
        elif c == ENTER:
            if buf:
                editor.state.set_status_message("")
                if observer is not None:
                    observer(buf, c)
                return buf
        elif 32 <= c <= 126 and len(buf) < KEDIT_QUERY_LEN:
            buf += chr(c)

        if observer is not None:
            observer(buf, c)

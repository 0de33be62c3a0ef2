from __future__ import annotations

import errno
import logging
import os
import signal
import sys
from typing import Callable

from . import actions
from .constants import (
    ANSI_CLEAR_SCREEN,
    ANSI_CURSOR_HOME,
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    BACKSPACE,
    CTRL_F,
    CTRL_G,
    CTRL_H,
    CTRL_L,
    CTRL_Q,
    CTRL_S,
    DEL_KEY,
    END_KEY,
    ENTER,
    ESC,
    HOME_KEY,
    KEY_NULL,
    PAGE_DOWN,
    PAGE_UP,
    QUIT_CONFIRM_PRESSES,
    TAB,
)
from .document import Document
from .fileio import load_lines, write_all
from .log import configure_logging
from .models import EditorState
from .prompt import prompt
from .render import refresh_screen
from .search import find
from .terminal import Terminal

logger = logging.getLogger(__name__)

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"


class Editor:
    def __init__(self, terminal: Terminal, quit_times: int = QUIT_CONFIRM_PRESSES) -> None:
        self.terminal = terminal
        self.quit_presses = quit_times
        self.resize_pending = False
        self.state = EditorState(doc=Document(), quit_times=quit_times)
        self.update_window_size()

    @property
    def doc(self) -> Document:
        return self.state.doc

    def update_window_size(self) -> None:
        try:
            rows, cols = self.terminal.get_window_size()
        except OSError as exc:
            raise OSError(exc.errno, "Unable to query screen size") from exc
        self.state.screenrows = max(1, rows - 2)
        self.state.screencols = max(1, cols)

    def handle_sigwinch(self, _signum: int, _frame) -> None:
        self.resize_pending = True

    def apply_resize(self) -> None:
        """Pick up a pending window resize and redraw between keys."""
        if not self.resize_pending:
            return
        self.resize_pending = False
        self.update_window_size()
        self.refresh_screen()

    def set_status_message(self, fmt: str, *args: object) -> None:
        self.state.set_status_message(fmt, *args)

    def open_file(self, filename: str) -> None:
        self.doc.filename = filename
        self.doc.select_syntax(filename)
        try:
            lines = load_lines(filename)
        except OSError as exc:
            raise OSError(exc.errno, f"Opening file failed: {filename}") from exc
        self.doc.load(lines)

    def save(self) -> None:
        doc = self.doc
        if not doc.filename:
            filename = prompt(self, "Save as: %s (ESC to cancel)")
            if filename is None:
                self.set_status_message("Save aborted")
                return
            doc.filename = filename
            doc.select_syntax(filename)

        data = doc.to_save_buffer()
        try:
            written = write_all(doc.filename, data)
        except OSError as exc:
            logger.warning("save to %s failed: %s", doc.filename, exc)
            self.set_status_message(
                "Can't save! I/O error: %s", os.strerror(exc.errno or errno.EIO)
            )
            return
        doc.dirty = False
        self.set_status_message("%d bytes written to disk", written)

    def refresh_screen(self) -> None:
        refresh_screen(self)

    def find(self) -> None:
        find(self)

    def quit(self) -> None:
        self.state.quit_times -= 1
        if self.doc.dirty and self.state.quit_times > 0:
            self.set_status_message(
                "WARNING!!! File has unsaved changes. Press Ctrl-Q %d more times to quit.",
                self.state.quit_times,
            )
            return
        self.terminal.write((ANSI_CLEAR_SCREEN + ANSI_CURSOR_HOME).encode())
        raise SystemExit(0)

    def process_keypress(self) -> None:
        c = self.terminal.read_key()
        if c == CTRL_Q:
            self.quit()
            return

        if c == CTRL_S:
            self.save()
        elif c == CTRL_F:
            self.find()
        elif c in KEY_HANDLERS:
            KEY_HANDLERS[c](self.state)
        elif c in IGNORED_KEYS:
            pass
        elif 32 <= c <= 126 or c == TAB:
            actions.insert_char(self.state, chr(c))

        self.state.quit_times = self.quit_presses


KEY_HANDLERS: dict[int, Callable[[EditorState], None]] = {
    CTRL_G: actions.move_to_eof,
    CTRL_H: actions.delete_char,
    BACKSPACE: actions.delete_char,
    DEL_KEY: actions.forward_delete,
    ENTER: actions.insert_newline,
    HOME_KEY: actions.move_home,
    END_KEY: actions.move_end,
    PAGE_UP: actions.page_up,
    PAGE_DOWN: actions.page_down,
    ARROW_UP: actions.move_up,
    ARROW_DOWN: actions.move_down,
    ARROW_LEFT: actions.move_left,
    ARROW_RIGHT: actions.move_right,
}


IGNORED_KEYS = {KEY_NULL, CTRL_L, ESC}


def run(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print("Usage: kedit [filename]", file=sys.stderr)
        return 1

    configure_logging()
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = Terminal(stdin_fd, stdout_fd)

    try:
        with terminal.raw_mode():
            editor = Editor(terminal)
            if args:
                editor.open_file(args[0])
            signal.signal(signal.SIGWINCH, editor.handle_sigwinch)
            terminal.on_idle = editor.apply_resize
            editor.set_status_message(HELP_MESSAGE)
            while True:
                editor.refresh_screen()
                editor.process_keypress()
    except OSError as exc:
        logger.exception("fatal error")
        os.write(stdout_fd, (ANSI_CLEAR_SCREEN + ANSI_CURSOR_HOME).encode())
        if exc.errno == errno.ENOTTY:
            print("kedit: stdin is not a tty", file=sys.stderr)
        else:
            print(f"kedit: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except SystemExit as exc:
        if isinstance(exc.code, int):
            return exc.code
        return 0


def main() -> None:
    raise SystemExit(run())

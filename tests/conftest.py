from __future__ import annotations

from collections import deque

import pytest

from kedit.document import Document
from kedit.editor import Editor
from kedit.models import EditorState


class FakeTerminal:
    def __init__(self, size: tuple[int, int] = (24, 80)) -> None:
        self.size = size
        self.keys: deque[int] = deque()
        self.output = bytearray()

    def feed(self, *keys: int | str) -> None:
        for key in keys:
            if isinstance(key, str):
                self.keys.extend(ord(ch) for ch in key)
            else:
                self.keys.append(key)

    def read_key(self) -> int:
        if not self.keys:
            raise AssertionError("editor asked for more keys than were scripted")
        return self.keys.popleft()

    def get_window_size(self) -> tuple[int, int]:
        return self.size

    def write(self, data: bytes) -> None:
        self.output += data


def make_doc(lines: list[str], filename: str | None = None) -> Document:
    doc = Document(filename)
    doc.select_syntax(filename)
    doc.load(lines)
    return doc


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def editor(terminal: FakeTerminal) -> Editor:
    return Editor(terminal)


@pytest.fixture
def state() -> EditorState:
    return EditorState(doc=Document(), screenrows=5, screencols=20)

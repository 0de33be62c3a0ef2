from __future__ import annotations

from kedit.models import EditorState, StatusMessage
from kedit.render import build_frame, draw_row, scroll, status_line

from conftest import make_doc


def rendered(text: str, filename: str | None = None, coloff: int = 0, cols: int = 80) -> str:
    row = make_doc([text], filename).rows[0]
    out: list[str] = []
    draw_row(row, coloff, cols, out)
    return "".join(out)


def test_vertical_scroll_is_minimal() -> None:
    state = EditorState(doc=make_doc(["x"] * 20), screenrows=5, screencols=20)
    state.cy = 10
    scroll(state)
    assert state.rowoff == 6
    state.cy = 7
    scroll(state)
    assert state.rowoff == 6
    state.cy = 3
    scroll(state)
    assert state.rowoff == 3


def test_horizontal_scroll_uses_rendered_column() -> None:
    state = EditorState(doc=make_doc(["\tx"]), screenrows=5, screencols=5)
    state.cx = 1
    scroll(state)
    assert state.rx == 8
    assert state.coloff == 4
    state.cx = 0
    scroll(state)
    assert state.coloff == 0


def test_virtual_row_has_zero_rendered_column() -> None:
    state = EditorState(doc=make_doc(["abc"]), screenrows=5, screencols=20)
    state.cy = 1
    scroll(state)
    assert state.rx == 0


def test_color_escapes_only_on_class_change() -> None:
    assert rendered("int x", "a.c") == "\x1b[32mint\x1b[39m x"
    out = rendered("42 17", "a.c")
    assert out == "\x1b[31m42\x1b[39m \x1b[31m17"


def test_plain_rows_emit_no_escapes() -> None:
    assert rendered("int x", "a.txt") == "int x"


def test_control_characters_render_inverted() -> None:
    assert rendered("a\x01b") == "a\x1b[7mA\x1b[mb"
    assert rendered("\x1b") == "\x1b[7m?\x1b[m"


def test_control_character_restores_active_color() -> None:
    out = rendered('"\x01"', "a.c")
    assert out == '\x1b[35m"\x1b[7mA\x1b[m\x1b[35m"'


def test_rows_are_clipped_to_the_viewport() -> None:
    assert rendered("abcdef", coloff=2, cols=3) == "cde"
    assert rendered("abc", coloff=5, cols=3) == ""


def test_welcome_banner_only_for_empty_document(state: EditorState) -> None:
    state.screencols = 80
    frame = build_frame(state, now=0.0)
    assert "Kedit editor -- version" in frame
    assert frame.count("~") == state.screenrows

    state.doc.insert_row(0, "hello")
    frame = build_frame(state, now=0.0)
    assert "Kedit editor" not in frame
    assert "hello" in frame


def test_frame_layout(state: EditorState) -> None:
    state.doc.insert_row(0, "abc")
    state.cx = 2
    frame = build_frame(state, now=0.0)
    assert frame.startswith("\x1b[?25l\x1b[H")
    assert frame.endswith("\x1b[1;3H\x1b[?25h")
    assert "abc\x1b[39m\x1b[K\r\n" in frame


def test_status_bar() -> None:
    state = EditorState(doc=make_doc(["a", "b", "c"], "a.c"), screenrows=5, screencols=40)
    state.doc.dirty = True
    line = status_line(state)
    assert len(line) == 40
    assert line.startswith("a.c - 3 lines (modified)")
    assert line.endswith("c | 1/3")


def test_status_bar_truncates_filename_and_uses_placeholder() -> None:
    name = "abcdefghijklmnopqrstuvwxyz.txt"
    state = EditorState(doc=make_doc(["x"], name), screenrows=5, screencols=60)
    state.cy = 1
    line = status_line(state)
    assert line.startswith("abcdefghijklmnopqrst - 1 lines")
    assert line.endswith("no ft | 2/1")


def test_status_bar_clipped_to_width() -> None:
    state = EditorState(doc=make_doc(["x"], "file.c"), screenrows=5, screencols=10)
    assert status_line(state) == "file.c - 1"


def test_message_expires(state: EditorState) -> None:
    state.status = StatusMessage("hello", created=100.0)
    assert "hello" in build_frame(state, now=104.0)
    assert "hello" not in build_frame(state, now=105.0)


def test_message_clipped_to_width(state: EditorState) -> None:
    state.status = StatusMessage("x" * 50, created=100.0)
    frame = build_frame(state, now=100.0)
    assert "x" * 20 in frame
    assert "x" * 21 not in frame

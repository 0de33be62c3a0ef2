from __future__ import annotations

from kedit.constants import ARROW_DOWN, ARROW_LEFT, ARROW_UP, BACKSPACE, ENTER, ESC, HL_MATCH
from kedit.editor import Editor
from kedit.models import EditorState
from kedit.prompt import prompt
from kedit.render import scroll
from kedit.search import IncrementalSearch, find

from conftest import FakeTerminal, make_doc


def search_state(lines: list[str], filename: str | None = None) -> EditorState:
    return EditorState(doc=make_doc(lines, filename), screenrows=10, screencols=40)


def test_forward_search_wraps_to_first_row() -> None:
    state = search_state(["abc", "x", "abc"])
    search = IncrementalSearch(state)
    search("abc", ord("c"))
    assert (state.cy, state.cx) == (0, 0)
    search("abc", ARROW_DOWN)
    assert state.cy == 2
    search("abc", ARROW_DOWN)
    assert state.cy == 0


def test_backward_search_wraps_to_last_row() -> None:
    state = search_state(["abc", "x", "abc", "y"])
    search = IncrementalSearch(state)
    search("abc", ord("c"))
    search("abc", ARROW_UP)
    assert state.cy == 2
    search("abc", ARROW_LEFT)
    assert state.cy == 0


def test_typing_restarts_from_the_top() -> None:
    state = search_state(["ab", "abc", "abcd"])
    search = IncrementalSearch(state)
    search("ab", ord("b"))
    search("ab", ARROW_DOWN)
    assert state.cy == 1
    search("abc", ord("c"))
    assert state.cy == 1
    search("abcd", ord("d"))
    assert state.cy == 2


def test_match_is_overlaid_then_restored() -> None:
    state = search_state(["int foo;", "foo = 1;"], "a.c")
    original = [list(row.hl) for row in state.doc.rows]
    search = IncrementalSearch(state)

    search("foo", ord("o"))
    assert state.doc.rows[0].hl[4:7] == [HL_MATCH] * 3
    search("foo", ARROW_DOWN)
    assert state.doc.rows[0].hl == original[0]
    assert state.doc.rows[1].hl[0:3] == [HL_MATCH] * 3

    search("foo", ENTER)
    assert [row.hl for row in state.doc.rows] == original


def test_match_after_tab_maps_to_logical_column() -> None:
    state = search_state(["\tfoo"])
    IncrementalSearch(state)("foo", ord("o"))
    assert state.cx == 1
    scroll(state)
    assert state.rx == 8


def test_match_is_scrolled_to_top() -> None:
    state = search_state([f"line {n}" for n in range(50)])
    IncrementalSearch(state)("line 30", ord("0"))
    assert state.cy == 30
    scroll(state)
    assert state.rowoff == 30


def test_no_match_leaves_cursor_alone() -> None:
    state = search_state(["abc"])
    state.cx = 2
    IncrementalSearch(state)("zzz", ord("z"))
    assert (state.cy, state.cx) == (0, 2)


def make_editor(lines: list[str], *keys: int | str) -> Editor:
    terminal = FakeTerminal(size=(12, 40))
    editor = Editor(terminal)
    editor.doc.load(lines)
    terminal.feed(*keys)
    return editor


def test_cancelled_search_restores_view() -> None:
    editor = make_editor(["abc", "def"], "zz", ESC)
    state = editor.state
    state.cy, state.cx = 1, 2
    find(editor)
    assert (state.cy, state.cx, state.rowoff, state.coloff) == (1, 2, 0, 0)
    assert state.status.text == ""


def test_cancel_after_match_restores_position_and_highlight() -> None:
    editor = make_editor(["x", "y", "target"], "tar", ESC)
    state = editor.state
    before = [list(row.hl) for row in editor.doc.rows]
    find(editor)
    assert (state.cy, state.cx) == (0, 0)
    assert [row.hl for row in editor.doc.rows] == before


def test_accepted_search_keeps_match_position() -> None:
    editor = make_editor(["x", "y", "say hello"], "hel", ENTER)
    find(editor)
    assert (editor.state.cy, editor.state.cx) == (2, 4)
    assert HL_MATCH not in editor.doc.rows[2].hl


def test_backspace_edits_the_query() -> None:
    editor = make_editor(["ab", "ax"], "ax", BACKSPACE, ARROW_DOWN, ENTER)
    find(editor)
    assert editor.state.cy == 1


def test_observer_sees_every_key() -> None:
    editor = make_editor(["abc"], "ab", ENTER)
    seen: list[tuple[str, int]] = []

    result = prompt(editor, "Find: %s", lambda query, key: seen.append((query, key)))
    assert result == "ab"
    assert seen == [("a", ord("a")), ("ab", ord("b")), ("ab", ENTER)]

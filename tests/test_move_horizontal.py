from __future__ import annotations

import pytest

from move_text import EditSession, MoveBoundaryError
from move_text.actions import move_text_down, move_text_left, move_text_right


def make_session(
    text: str,
    *,
    cursor: tuple[int, int] | None = None,
    select: tuple[int, int] | None = None,
) -> EditSession:
    session = EditSession.from_text(text)
    if cursor is not None:
        session.buffer.state.set_cursor(*cursor)
    if select is not None:
        session.buffer.select(*select)
    return session


def test_selection_shifts_one_character_right() -> None:
    session = make_session("axyb", select=(1, 3))

    view = move_text_right(session)

    assert view.text == "abxy"
    assert view.selection == ((0, 2), (0, 4))


def test_backward_selection_shifts_left_and_stays_backward() -> None:
    session = make_session("axyb", select=(3, 1))

    view = move_text_left(session)

    assert view.text == "xyab"
    assert view.selection == ((0, 2), (0, 0))


def test_selection_shift_crosses_line_break() -> None:
    session = make_session("ab\ncd", select=(1, 2))

    view = move_text_right(session)

    assert view.text == "a\nbcd"
    assert view.selection == ((1, 0), (1, 1))


def test_selection_shift_right_then_left_round_trips() -> None:
    session = make_session("hello world", select=(0, 5))

    move_text_right(session, 3)
    view = move_text_left(session, 3)

    assert view.text == "hello world"
    assert view.selection == ((0, 0), (0, 5))


@pytest.mark.parametrize(
    ("text", "select", "command"),
    [
        ("axy", (1, 3), move_text_right),
        ("xy", (0, 1), move_text_left),
    ],
)
def test_selection_shift_past_buffer_edge_is_rejected(text, select, command) -> None:
    session = make_session(text, select=select)
    before = session.buffer.snapshot()

    with pytest.raises(MoveBoundaryError) as excinfo:
        command(session)

    assert session.buffer.snapshot() == before
    assert excinfo.value.axis.value == "horizontal"


def test_blank_line_grows_and_shrinks_at_cursor() -> None:
    session = make_session("x\n\ny", cursor=(1, 0))

    grown = move_text_right(session, 3)
    assert grown.text == "x\n   \ny"
    assert grown.cursor == (1, 3)

    shrunk = move_text_left(session, 3)
    assert shrunk.text == "x\n\ny"
    assert shrunk.cursor == (1, 0)


def test_blank_line_left_stops_at_line_start() -> None:
    session = make_session("x\n  \n", cursor=(1, 1))

    view = move_text_left(session, 5)

    assert view.text == "x\n \n"
    assert view.cursor == (1, 0)


def test_line_with_text_is_indented_rigidly() -> None:
    session = make_session("foo\n  bar\n", cursor=(1, 3))

    view = move_text_right(session, 2)

    assert view.text == "foo\n    bar\n"
    assert view.cursor == (1, 5)


def test_line_indent_clamps_at_column_zero() -> None:
    session = make_session("  bar", cursor=(0, 4))

    view = move_text_left(session, 4)

    assert view.text == "bar"
    assert view.cursor == (0, 2)


def test_multi_line_selection_is_indented_rigidly() -> None:
    session = make_session("a\n b\nc\n", select=(0, 4))

    view = move_text_right(session, 2)

    assert view.text == "  a\n   b\nc\n"
    assert view.selection == ((0, 0), (1, 4))


def test_multi_line_shift_includes_line_touched_by_end() -> None:
    session = make_session("a\nb\nc\n", select=(0, 2))

    view = move_text_right(session)

    assert view.text == " a\n b\nc\n"
    assert view.selection == ((0, 0), (1, 0))


def test_multi_line_shift_empties_blank_lines() -> None:
    session = make_session("  a\n  \n  b", select=(0, 10))

    view = move_text_left(session, 2)

    assert view.text == "a\n\nb"


def test_horizontal_move_breaks_vertical_chain() -> None:
    session = make_session("abcdef\nx\nabcdef\n", select=(2, 4))

    move_text_down(session)
    move_text_right(session)
    move_text_left(session)
    view = move_text_down(session)

    assert view.text == "abef\nx\nacdbcdef\n"

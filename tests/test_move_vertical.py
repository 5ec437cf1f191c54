from __future__ import annotations

import pytest

from move_text import EditSession, MoveBoundaryError, MoveTextConfig
from move_text.actions import move_text_down, move_text_up


def make_session(
    text: str,
    *,
    cursor: tuple[int, int] | None = None,
    select: tuple[int, int] | None = None,
    **config_options: object,
) -> EditSession:
    session = EditSession.from_text(text, config=MoveTextConfig(**config_options))
    if cursor is not None:
        session.buffer.state.set_cursor(*cursor)
    if select is not None:
        session.buffer.select(*select)
    return session


def test_line_moves_down_and_keeps_cursor_on_it() -> None:
    session = make_session("a\nb\nc\n", cursor=(1, 0))

    view = move_text_down(session)

    assert view.text == "a\nc\nb\n"
    assert view.cursor == (2, 0)


def test_line_move_preserves_column_and_length() -> None:
    session = make_session("abc\nde\n", cursor=(0, 2))

    view = move_text_down(session)

    assert view.text == "de\nabc\n"
    assert view.cursor == (1, 2)
    assert len(view.text) == len("abc\nde\n")


def test_line_move_up_without_trailing_newline() -> None:
    session = make_session("a\nb", cursor=(1, 1))

    view = move_text_up(session)

    assert view.text == "b\na"
    assert view.cursor == (0, 1)


def test_line_moves_by_count() -> None:
    session = make_session("a\nb\nc\nd", cursor=(0, 0))

    view = move_text_down(session, 2)

    assert view.text == "b\nc\na\nd"
    assert view.cursor == (2, 0)


@pytest.mark.parametrize(
    ("text", "cursor", "command", "arg"),
    [
        ("a\nb\n", (0, 0), move_text_up, 1),
        ("a\nb\n", (1, 1), move_text_down, 1),
        ("a\nb\n", (2, 0), move_text_up, 1),
        ("a\nb\nc", (0, 0), move_text_down, 5),
        ("", (0, 0), move_text_down, 1),
    ],
)
def test_line_move_past_buffer_edge_is_rejected(text, cursor, command, arg) -> None:
    session = make_session(text, cursor=cursor)

    with pytest.raises(MoveBoundaryError) as excinfo:
        command(session, arg)

    assert session.buffer.text == text
    assert session.buffer.state.cursor == cursor
    assert len(session.buffer.history) == 0
    assert excinfo.value.axis.value == "vertical"


@pytest.mark.parametrize(
    ("text", "select", "command", "options"),
    [
        ("ab\ncd\n", (0, 1), move_text_up, {}),
        ("ab\ncd\n", (3, 4), move_text_down, {}),
        ("a\nbb\ncc\n", (0, 4), move_text_up, {}),
        ("a\nbb\ncc\n", (2, 8), move_text_down, {}),
        ("ab\ncd\n", (1, 4), move_text_down, {"region_whole_line": False}),
        ("ab\ncd\n", (1, 4), move_text_up, {"region_whole_line": False}),
    ],
)
def test_selection_move_past_buffer_edge_is_rejected(
    text, select, command, options
) -> None:
    session = make_session(text, select=select, **options)
    before = session.buffer.snapshot()

    with pytest.raises(MoveBoundaryError) as excinfo:
        command(session)

    assert session.buffer.snapshot() == before
    assert len(session.buffer.history) == 0
    assert excinfo.value.axis.value == "vertical"


def test_whole_line_selection_moves_up_as_block() -> None:
    session = make_session("a\nbb\ncc\nd\n", select=(2, 7))

    view = move_text_up(session)

    assert view.text == "bb\ncc\na\nd\n"
    assert view.selection == ((0, 0), (1, 2))


def test_full_line_selection_moves_only_its_lines() -> None:
    session = make_session("a\nbb\ncc\nd\n", select=(2, 8))

    view = move_text_up(session)

    assert view.text == "bb\ncc\na\nd\n"
    assert view.selection == ((0, 0), (2, 0))
    assert session.buffer.get_text(*session.buffer.region()) == "bb\ncc\n"


def test_full_line_selection_moves_down_as_block() -> None:
    session = make_session("a\nbb\ncc\nd\n", select=(2, 8))

    view = move_text_down(session)

    assert view.text == "a\nd\nbb\ncc\n"
    assert view.selection == ((2, 0), (4, 0))


def test_whole_line_move_down_then_up_restores_everything() -> None:
    text = "one\ntwo\nthree\nfour\n"
    session = make_session(text)
    buffer = session.buffer
    buffer.select(buffer.offset_of((1, 1)), buffer.offset_of((2, 3)))
    original = session.buffer.snapshot()

    moved = move_text_down(session)
    assert moved.text == "one\nfour\ntwo\nthree\n"
    assert moved.selection == ((2, 1), (3, 3))

    restored = move_text_up(session)
    assert restored.text == original.text
    assert restored.selection == original.selection


def test_whole_line_move_keeps_backward_selection() -> None:
    session = make_session("a\nbb\ncc\nd\n", select=(7, 2))

    view = move_text_up(session)

    assert view.selection == ((1, 2), (0, 0))
    assert session.buffer.point_before_anchor()


def test_selection_ending_after_final_newline_moves_its_lines() -> None:
    session = make_session("a\nb\nc\n", select=(2, 6))

    view = move_text_up(session)

    assert view.text == "b\nc\na\n"
    assert session.buffer.get_text(*session.buffer.region()) == "b\nc\n"


def test_whole_line_block_at_bottom_is_rejected() -> None:
    session = make_session("a\nbb\ncc\n", select=(2, 7))

    with pytest.raises(MoveBoundaryError):
        move_text_down(session)

    assert session.buffer.text == "a\nbb\ncc\n"
    assert session.buffer.state.selection == ((1, 0), (2, 2))


def test_multi_line_selection_moves_as_characters_when_policy_off() -> None:
    session = make_session("ab\ncd\nef\n", select=(1, 4), region_whole_line=False)

    view = move_text_down(session)

    assert view.text == "ad\neb\ncf\n"
    assert view.selection == ((1, 1), (2, 1))


def test_single_line_selection_moves_to_same_column() -> None:
    session = make_session("abc\ndefgh\nij\n", select=(1, 2))

    view = move_text_down(session)

    assert view.text == "ac\ndbefgh\nij\n"
    assert view.selection == ((1, 1), (1, 2))


def test_single_line_selection_down_then_up_round_trips() -> None:
    session = make_session("abc\ndefgh\nij\n", select=(3, 1))

    move_text_down(session)
    view = move_text_up(session)

    assert view.text == "abc\ndefgh\nij\n"
    assert view.selection == ((0, 3), (0, 1))


def test_consecutive_moves_return_to_remembered_column() -> None:
    session = make_session("abcdef\nx\nabcdef\n", select=(2, 4))

    first = move_text_down(session)
    assert first.text == "abef\nxcd\nabcdef\n"
    assert first.selection == ((1, 1), (1, 3))

    second = move_text_down(session)
    assert second.text == "abef\nx\nabcdcdef\n"
    assert second.selection == ((2, 2), (2, 4))
    assert session.start_column == 2


def test_column_follows_previous_result_when_not_maintained() -> None:
    session = make_session(
        "abcdef\nx\nabcdef\n", select=(2, 4), maintain_start_column=False
    )

    move_text_down(session)
    view = move_text_down(session)

    assert view.text == "abef\nx\nacdbcdef\n"
    assert view.selection == ((2, 1), (2, 3))


def test_other_command_resets_remembered_column() -> None:
    session = make_session("abcdef\nx\nabcdef\n", select=(2, 4))

    move_text_down(session)
    session.record_command("self_insert")
    view = move_text_down(session)

    assert view.text == "abef\nx\nacdbcdef\n"


def test_failed_move_is_a_single_noop_for_undo() -> None:
    session = make_session("a\nb\nc\n", cursor=(1, 0))

    move_text_down(session)
    with pytest.raises(MoveBoundaryError):
        move_text_down(session)

    assert len(session.buffer.history) == 1
    session.buffer.undo()
    assert session.buffer.text == "a\nb\nc\n"
    assert session.buffer.state.cursor == (1, 0)

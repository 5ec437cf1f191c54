"""Displacement routines behind the four move commands.

Positive ``arg`` moves down (vertical) or right (horizontal). Every routine
checks its boundaries before touching the buffer and performs its edits in a
single buffer transaction, so a move is one undo step and never half-applied.
"""

from __future__ import annotations

from typing import Tuple

from move_text.buffer import TextHost
from move_text.runtime import telemetry
from move_text.session import EditSession

from .errors import MoveBoundaryError
from .models import Axis


def _boundary(reason: str, *, axis: Axis, arg: int) -> MoveBoundaryError:
    telemetry.record_event(
        "move.boundary",
        level="warning",
        data={"axis": axis.value, "arg": arg, "reason": reason},
    )
    return MoveBoundaryError(reason, axis=axis, arg=arg)


def _ensure_vertical_room(
    buffer: TextHost, first_row: int, last_row: int, arg: int
) -> None:
    if arg < 0 and first_row + arg < 0:
        raise _boundary("Beginning of buffer", axis=Axis.VERTICAL, arg=arg)
    if arg > 0 and last_row + arg > buffer.last_content_row:
        raise _boundary("End of buffer", axis=Axis.VERTICAL, arg=arg)


def _touched_rows(buffer: TextHost, start: int, end: int) -> Tuple[int, int]:
    """Rows of ``start`` through ``end``; a trailing empty row only counts alone."""

    first_row = buffer.line_number(start)
    last_row = buffer.line_number(end)
    if last_row > first_row and last_row > buffer.last_content_row:
        last_row = buffer.last_content_row
    return first_row, last_row


def _block_rows(buffer: TextHost, start: int, end: int) -> Tuple[int, int]:
    """Rows holding ``[start, end)``.

    An ``end`` sitting at the start of a later row does not pull that row in.
    """

    first_row = buffer.line_number(start)
    last_row = buffer.line_number(end)
    if last_row > first_row and end == buffer.line_start(last_row):
        last_row -= 1
    return first_row, last_row


def _reselect(buffer: TextHost, start: int, end: int, backward: bool) -> None:
    if backward:
        buffer.select(end, start)
    else:
        buffer.select(start, end)


def move_region_vertically(
    session: EditSession, start: int, end: int, arg: int = 1
) -> None:
    """Move the characters in ``[start, end)`` by ``arg`` lines.

    The text lands at the session's target column on the destination line,
    clamped to that line's length.
    """

    buffer = session.buffer
    _ensure_vertical_room(
        buffer, buffer.line_number(start), buffer.line_number(end), arg
    )
    column = session.target_column(buffer.column_at(start))
    backward = buffer.point_before_anchor()
    first_row = buffer.line_number(start)
    with buffer.transaction("move_region_vertically"):
        text = buffer.extract_range(start, end)
        position = buffer.offset_at_column(first_row + arg, column)
        buffer.insert_at(position, text)
        _reselect(buffer, position, position + len(text), backward)


def move_region_horizontally(
    session: EditSession, start: int, end: int, arg: int = 1
) -> None:
    """Move the characters in ``[start, end)`` by ``arg`` characters."""

    buffer = session.buffer
    if start + arg < 0:
        raise _boundary("Beginning of buffer", axis=Axis.HORIZONTAL, arg=arg)
    if end + arg > buffer.length:
        raise _boundary("End of buffer", axis=Axis.HORIZONTAL, arg=arg)
    backward = buffer.point_before_anchor()
    with buffer.transaction("move_region_horizontally"):
        text = buffer.extract_range(start, end)
        position = start + arg
        buffer.insert_at(position, text)
        _reselect(buffer, position, position + len(text), backward)


def move_lines_vertically(
    session: EditSession, start: int, end: int, arg: int = 1
) -> None:
    """Move every line holding ``[start, end)`` by ``arg`` lines as a block.

    The selection is restored at the same offsets from the block's first
    line start and last line end.
    """

    buffer = session.buffer
    first_row, last_row = _block_rows(buffer, start, end)
    if first_row > buffer.last_content_row:
        raise _boundary("End of buffer", axis=Axis.VERTICAL, arg=arg)
    _ensure_vertical_room(buffer, first_row, last_row, arg)
    lead = start - buffer.line_start(first_row)
    trail = buffer.line_end(last_row) - end
    backward = buffer.point_before_anchor()
    with buffer.transaction("move_lines_vertically"):
        buffer.move_lines(first_row, last_row, arg)
        new_start = buffer.line_start(first_row + arg) + lead
        new_end = buffer.line_end(last_row + arg) - trail
        _reselect(buffer, new_start, new_end, backward)


def move_lines_horizontally(
    session: EditSession, start: int, end: int, arg: int = 1
) -> None:
    """Rigidly indent every line touched by ``[start, end)`` by ``arg`` columns."""

    buffer = session.buffer
    first_row, last_row = _touched_rows(buffer, start, end)
    with buffer.transaction("move_lines_horizontally"):
        buffer.indent_rigidly(first_row, last_row, arg)


def move_line_vertically(session: EditSession, arg: int = 1) -> None:
    buffer = session.buffer
    point = buffer.point
    row = buffer.line_number(point)
    if row > buffer.last_content_row:
        raise _boundary("End of buffer", axis=Axis.VERTICAL, arg=arg)
    _ensure_vertical_room(buffer, row, row, arg)
    column = buffer.column_at(point)
    with buffer.transaction("move_line_vertically"):
        buffer.move_lines(row, row, arg)
        buffer.set_point(buffer.offset_at_column(row + arg, column))


def move_line_horizontally(session: EditSession, arg: int = 1) -> None:
    """Shift the current line by ``arg`` columns.

    Blank lines grow or shrink at the cursor instead: ``arg`` spaces are
    inserted, or up to ``-arg`` characters before the cursor are removed.
    """

    buffer = session.buffer
    point = buffer.point
    row = buffer.line_number(point)
    line = buffer.get_line(row)
    with buffer.transaction("move_line_horizontally"):
        if line.strip():
            buffer.indent_rigidly(row, row, arg)
        elif arg > 0:
            buffer.insert_at(point, " " * arg)
        else:
            count = min(-arg, point - buffer.line_start(row))
            buffer.extract_range(point - count, point)


__all__ = [
    "move_region_vertically",
    "move_region_horizontally",
    "move_lines_vertically",
    "move_lines_horizontally",
    "move_line_vertically",
    "move_line_horizontally",
]

"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .host import BufferValidationError
from .state import Cursor


def ensure_cursor(document: BufferDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    line = document.get_line(row)
    if col < 0 or col > len(line):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def ensure_offset(document: BufferDocument, offset: int) -> int:
    if offset < 0 or offset > len(document.text):
        raise BufferValidationError("Offset out of range", offset=offset)
    return offset


def ensure_row(document: BufferDocument, row: int) -> int:
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=(row, 0))
    return row

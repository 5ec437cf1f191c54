"""Capability boundary between the displacement engine and a text host."""

from __future__ import annotations

from typing import ContextManager, Optional, Protocol, Tuple

from .state import Cursor


class TextHost(Protocol):
    """Operations the movers need from an editing host.

    ``move_text.buffer.Buffer`` implements this protocol; adapters for other
    editors provide the same surface over their own buffer objects.
    """

    @property
    def length(self) -> int: ...

    @property
    def point(self) -> int: ...

    @property
    def last_content_row(self) -> int: ...

    def set_point(self, offset: int) -> None: ...

    def region(self) -> Optional[Tuple[int, int]]: ...

    def point_before_anchor(self) -> bool: ...

    def select(self, anchor: int, point: int) -> None: ...

    def line_number(self, offset: int) -> int: ...

    def line_start(self, row: int) -> int: ...

    def line_end(self, row: int) -> int: ...

    def get_line(self, row: int) -> str: ...

    def column_at(self, offset: int) -> int: ...

    def offset_at_column(self, row: int, column: int) -> int: ...

    def extract_range(self, start: int, end: int) -> str: ...

    def insert_at(self, offset: int, text: str) -> None: ...

    def move_lines(self, first_row: int, last_row: int, delta: int) -> None: ...

    def indent_rigidly(self, first_row: int, last_row: int, delta: int) -> None: ...

    def transaction(self, label: str) -> ContextManager[object]: ...


class BufferValidationError(RuntimeError):
    """Raised when a cursor or offset handed to a buffer is out of bounds."""

    def __init__(
        self,
        message: str,
        *,
        cursor: Cursor | None = None,
        offset: int | None = None,
    ) -> None:
        super().__init__(message)
        self.cursor = cursor
        self.offset = offset

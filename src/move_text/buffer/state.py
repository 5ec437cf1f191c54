"""Cursor and selection state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Cursor = Tuple[int, int]  # (row, column)
Selection = Tuple[Cursor, Cursor]  # (anchor, point)


@dataclass(slots=True)
class BufferState:
    """Mutable cursor + selection info tied to a BufferDocument version.

    ``selection`` is ``None`` when no region is active. When it is set, its
    second element always equals ``cursor``.
    """

    cursor: Cursor = (0, 0)
    selection: Optional[Selection] = None
    last_change_tick: int = 0

    @property
    def anchor(self) -> Optional[Cursor]:
        if self.selection is None:
            return None
        return self.selection[0]

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)
        if self.selection is not None:
            self.selection = (self.selection[0], self.cursor)

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(self, anchor: Cursor, point: Cursor) -> None:
        self.cursor = point
        self.selection = (anchor, point)

"""High-level buffer façade combining document, cursor state, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Callable, ContextManager, Dict, Optional, Tuple

from move_text.runtime import telemetry

from .document import BufferDocument
from .host import BufferValidationError
from .state import BufferState, Cursor, Selection
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_offset, ensure_row

DEFAULT_TAB_WIDTH = 8


@dataclass(slots=True)
class BufferView:
    version: int
    text: str
    cursor: Cursor
    selection: Optional[Selection]


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    cursor: Cursor
    selection: Optional[Selection]
    label: str


class Buffer:
    """In-memory text host addressed by character offsets or ``(row, col)``."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        history: Optional[UndoTimeline] = None,
        tab_width: int = DEFAULT_TAB_WIDTH,
    ) -> None:
        if tab_width <= 0:
            raise ValueError("tab_width must be positive")
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.history = history or UndoTimeline()
        self.tab_width = tab_width
        self._transaction: Optional[Transaction] = None

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        tab_width: int = DEFAULT_TAB_WIDTH,
    ) -> "Buffer":
        return cls(
            name=name, document=BufferDocument.from_text(text), tab_width=tab_width
        )

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def length(self) -> int:
        return len(self.document.text)

    @property
    def line_count(self) -> int:
        return self.document.line_count

    @property
    def last_content_row(self) -> int:
        return self.document.last_content_row

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
        )

    # -- positions -----------------------------------------------------

    def offset_of(self, cursor: Cursor) -> int:
        return _offset_for_cursor(self.document, ensure_cursor(self.document, cursor))

    def cursor_at(self, offset: int) -> Cursor:
        return _cursor_from_offset(self.document, ensure_offset(self.document, offset))

    def line_number(self, offset: int) -> int:
        return self.cursor_at(offset)[0]

    def line_start(self, row: int) -> int:
        return _offset_for_cursor(self.document, (ensure_row(self.document, row), 0))

    def line_end(self, row: int) -> int:
        return self.line_start(row) + len(self.document.get_line(row))

    def get_line(self, row: int) -> str:
        return self.document.get_line(ensure_row(self.document, row))

    def get_text(self, start: int, end: int) -> str:
        start = ensure_offset(self.document, start)
        end = ensure_offset(self.document, end)
        if start > end:
            start, end = end, start
        return self.text[start:end]

    @property
    def point(self) -> int:
        return self.offset_of(self.state.cursor)

    def set_point(self, offset: int) -> None:
        self.state.set_cursor(*self.cursor_at(offset))

    def region(self) -> Optional[Tuple[int, int]]:
        """Ordered ``(start, end)`` offsets of the active selection, if any."""

        selection = self.state.selection
        if selection is None:
            return None
        anchor = self.offset_of(selection[0])
        point = self.offset_of(selection[1])
        return min(anchor, point), max(anchor, point)

    def point_before_anchor(self) -> bool:
        selection = self.state.selection
        if selection is None:
            return False
        return self.offset_of(selection[1]) < self.offset_of(selection[0])

    def select(self, anchor: int, point: int) -> None:
        self.state.set_selection(self.cursor_at(anchor), self.cursor_at(point))

    def deactivate_selection(self) -> None:
        self.state.clear_selection()

    # -- columns -------------------------------------------------------

    def column_at(self, offset: int) -> int:
        """Display column of ``offset`` with tabs expanded to ``tab_width``."""

        row, col = self.cursor_at(offset)
        return _display_width(self.document.get_line(row)[:col], self.tab_width)

    def offset_at_column(self, row: int, column: int) -> int:
        """Offset of the first position on ``row`` at or past ``column``.

        A tab spanning ``column`` is passed over; a short line yields its end.
        """

        line = self.get_line(row)
        start = self.line_start(row)
        for index in range(len(line)):
            if _display_width(line[:index], self.tab_width) >= column:
                return start + index
        return start + len(line)

    # -- editing -------------------------------------------------------

    def transaction(self, label: str) -> ContextManager["Transaction"]:
        return Transaction(self, label)

    def replace_range(
        self, start: int, end: int, text: str, *, label: str = "replace_range"
    ) -> BufferDelta:
        start = ensure_offset(self.document, start)
        end = ensure_offset(self.document, end)
        if start > end:
            start, end = end, start
        with self.transaction(label):
            before_text = self.text
            anchor = self.state.anchor
            anchor_offset = None if anchor is None else self.offset_of(anchor)
            new_text = before_text[:start] + text + before_text[end:]
            self.document = self.document.replace_text(new_text)
            point = self.cursor_at(start + len(text))
            if anchor_offset is None:
                self.state.set_cursor(*point)
            else:
                shifted = _shift_marker(anchor_offset, start, end, len(text))
                self.state.set_selection(self.cursor_at(shifted), point)
            self.state.last_change_tick = self.document.version

        return BufferDelta(
            version=self.document.version,
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            label=label,
        )

    def extract_range(self, start: int, end: int) -> str:
        """Delete ``[start, end)`` and return the removed text."""

        text = self.get_text(start, end)
        self.replace_range(start, end, "", label="extract_range")
        return text

    def insert_at(self, offset: int, text: str) -> None:
        self.replace_range(offset, offset, text, label="insert_text")

    def move_lines(self, first_row: int, last_row: int, delta: int) -> None:
        """Shift rows ``first_row..last_row`` by ``delta`` rows as one block."""

        ensure_row(self.document, first_row)
        ensure_row(self.document, last_row)
        if first_row > last_row:
            raise BufferValidationError("Row block is inverted", cursor=(first_row, 0))
        if first_row + delta < 0 or last_row + delta >= self.line_count:
            raise BufferValidationError(
                "Row block would leave the document", cursor=(first_row + delta, 0)
            )
        size = last_row - first_row + 1

        def remap(cursor: Cursor) -> Cursor:
            row, col = cursor
            if first_row <= row <= last_row:
                return row + delta, col
            if delta > 0 and last_row < row <= last_row + delta:
                return row - size, col
            if delta < 0 and first_row + delta <= row < first_row:
                return row + size, col
            return row, col

        with self.transaction("move_lines"):
            self._remap_state(remap)
            self.document = self.document.move_lines(first_row, last_row, delta)
            self.state.last_change_tick = self.document.version

    def indent_rigidly(self, first_row: int, last_row: int, delta: int) -> None:
        """Shift the indentation of rows ``first_row..last_row`` by ``delta`` columns.

        Indentation is rebuilt with spaces and clamps at column 0.
        Whitespace-only rows are emptied. A position at a row start stays put;
        any other position keeps its distance from the end of the indentation,
        clamped to the new indentation.
        """

        ensure_row(self.document, first_row)
        ensure_row(self.document, last_row)
        new_lines = []
        widths: Dict[int, Tuple[int, int]] = {}
        for row in range(first_row, last_row + 1):
            line = self.document.get_line(row)
            body = line.lstrip(" \t")
            old_ws = len(line) - len(body)
            if body:
                indent = _display_width(line[:old_ws], self.tab_width)
                new_line = " " * max(0, indent + delta) + body
            else:
                new_line = ""
            new_lines.append(new_line)
            widths[row] = (old_ws, len(new_line) - len(body))

        def remap(cursor: Cursor) -> Cursor:
            row, col = cursor
            if row not in widths:
                return cursor
            old_ws, new_ws = widths[row]
            if col == 0:
                return cursor
            return row, max(new_ws, col - old_ws + new_ws)

        with self.transaction("indent_rigidly"):
            self._remap_state(remap)
            self.document = self.document.update_lines(
                first_row, last_row + 1, new_lines
            )
            self.state.last_change_tick = self.document.version

    def _remap_state(self, remap: Callable[[Cursor], Cursor]) -> None:
        selection = self.state.selection
        if selection is None:
            self.state.set_cursor(*remap(self.state.cursor))
        else:
            self.state.set_selection(remap(selection[0]), remap(selection[1]))

    # -- undo ----------------------------------------------------------

    def undo(self) -> Optional[UndoEntry]:
        entry = self.history.undo()
        if entry is None:
            return None
        self._restore(entry.before_text, entry.cursor_before, entry.selection_before)
        telemetry.record_event(
            "buffer.undo", data={"buffer": self.name, "label": entry.label}
        )
        return entry

    def redo(self) -> Optional[UndoEntry]:
        entry = self.history.redo()
        if entry is None:
            return None
        self._restore(entry.after_text, entry.cursor_after, entry.selection_after)
        telemetry.record_event(
            "buffer.redo", data={"buffer": self.name, "label": entry.label}
        )
        return entry

    def _restore(
        self, text: str, cursor: Cursor, selection: Optional[Selection]
    ) -> None:
        self.document = self.document.replace_text(text)
        self.state.cursor = cursor
        self.state.selection = selection
        self.state.last_change_tick = self.document.version


class Transaction(AbstractContextManager["Transaction"]):
    """Groups buffer edits into one undo step; rolls back on error.

    Transactions opened while another is active join the outer one.
    """

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._owner = False
        self._span_cm: Optional[ContextManager[object]] = None
        self._before: Optional[
            Tuple[BufferDocument, Cursor, Optional[Selection]]
        ] = None

    def __enter__(self) -> "Transaction":
        if self.buffer._transaction is not None:
            return self
        self._owner = True
        self.buffer._transaction = self
        state = self.buffer.state
        self._before = (self.buffer.document, state.cursor, state.selection)
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self) -> None:
        assert self._before is not None
        document, cursor, selection = self._before
        if self.buffer.text == document.text:
            return
        self.buffer.history.push(
            UndoEntry(
                label=self.label,
                before_text=document.text,
                after_text=self.buffer.text,
                cursor_before=cursor,
                cursor_after=self.buffer.state.cursor,
                selection_before=selection,
                selection_after=self.buffer.state.selection,
            )
        )

    def rollback(self) -> None:
        assert self._before is not None
        document, cursor, selection = self._before
        self.buffer.document = document
        self.buffer.state.cursor = cursor
        self.buffer.state.selection = selection

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self._owner:
            return False
        self.buffer._transaction = None
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _display_width(text: str, tab_width: int) -> int:
    return len(text.expandtabs(tab_width))


def _shift_marker(offset: int, start: int, end: int, inserted: int) -> int:
    if offset > end or (offset == end and end > start):
        return offset + inserted - (end - start)
    if offset > start:
        return start
    return offset


def _offset_for_cursor(document: BufferDocument, cursor: Cursor) -> int:
    lines = document.snapshot()
    row, col = cursor
    offset = 0
    for i in range(row):
        offset += len(lines[i]) + 1  # newline
    return offset + col


def _cursor_from_offset(document: BufferDocument, offset: int) -> Cursor:
    lines = document.snapshot()
    running = 0
    for row, line in enumerate(lines):
        line_len = len(line)
        if offset <= running + line_len:
            return (row, offset - running)
        running += line_len + 1
    return (len(lines) - 1, len(lines[-1]))

"""Buffer host: document storage, cursor/selection state, and undo."""

from .buffer import Buffer, BufferDelta, BufferView, Transaction
from .document import BufferDocument
from .host import BufferValidationError, TextHost
from .state import BufferState, Cursor, Selection
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_offset, ensure_row

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "BufferView",
    "Cursor",
    "Selection",
    "TextHost",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "ensure_cursor",
    "ensure_offset",
    "ensure_row",
]

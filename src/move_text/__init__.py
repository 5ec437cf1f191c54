"""Commands that move lines and selections around a text buffer."""

from .actions import (
    MoveBoundaryError,
    MoveTextError,
    move_text_down,
    move_text_left,
    move_text_right,
    move_text_up,
)
from .buffer import Buffer
from .config import MoveTextConfig
from .session import EditSession

__all__ = [
    "Buffer",
    "EditSession",
    "MoveTextConfig",
    "MoveTextError",
    "MoveBoundaryError",
    "move_text_up",
    "move_text_down",
    "move_text_left",
    "move_text_right",
    "actions",
    "buffer",
    "runtime",
]

__version__ = "0.1.0"

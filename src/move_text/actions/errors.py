"""Errors raised by the move commands."""

from __future__ import annotations

from .models import Axis


class MoveTextError(RuntimeError):
    """Base class for move command failures."""


class MoveBoundaryError(MoveTextError):
    """Raised when a move would push content past either end of the buffer.

    Raised before the buffer is touched, so a failed move leaves no trace.
    """

    def __init__(self, message: str, *, axis: Axis, arg: int) -> None:
        super().__init__(message)
        self.axis = axis
        self.arg = arg


__all__ = ["MoveTextError", "MoveBoundaryError"]

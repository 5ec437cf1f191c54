"""Move commands and the displacement routines they dispatch to."""

from .dispatch import (
    move,
    move_text_down,
    move_text_left,
    move_text_right,
    move_text_up,
)
from .errors import MoveBoundaryError, MoveTextError
from .models import Axis, MoveRequest, Strategy
from .movers import (
    move_line_horizontally,
    move_line_vertically,
    move_lines_horizontally,
    move_lines_vertically,
    move_region_horizontally,
    move_region_vertically,
)

__all__ = [
    "Axis",
    "MoveRequest",
    "Strategy",
    "MoveTextError",
    "MoveBoundaryError",
    "move",
    "move_text_up",
    "move_text_down",
    "move_text_left",
    "move_text_right",
    "move_region_vertically",
    "move_region_horizontally",
    "move_lines_vertically",
    "move_lines_horizontally",
    "move_line_vertically",
    "move_line_horizontally",
]

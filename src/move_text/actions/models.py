"""Value types describing a displacement request."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Axis(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Strategy(str, Enum):
    """How an active selection is displaced."""

    SINGLE_RANGE = "single_range"
    WHOLE_LINE = "whole_line"


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """Signed displacement along one axis.

    Positive magnitudes move down (vertical, in lines) or right (horizontal,
    in characters or columns).
    """

    axis: Axis
    magnitude: int = 1
    region_whole_line: bool = True

    def choose_strategy(self, single_line: bool) -> Strategy:
        if single_line:
            return Strategy.SINGLE_RANGE
        if self.axis is Axis.HORIZONTAL or self.region_whole_line:
            return Strategy.WHOLE_LINE
        return Strategy.SINGLE_RANGE


__all__ = ["Axis", "Strategy", "MoveRequest"]

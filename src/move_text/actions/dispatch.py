"""The four directional move commands and the dispatch behind them."""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from move_text.buffer import BufferView
from move_text.runtime import telemetry
from move_text.session import EditSession

from . import movers
from .models import Axis, MoveRequest, Strategy

RegionMover = Callable[[EditSession, int, int, int], None]
LineMover = Callable[[EditSession, int], None]

_REGION_MOVERS: Dict[Tuple[Axis, Strategy], RegionMover] = {
    (Axis.VERTICAL, Strategy.SINGLE_RANGE): movers.move_region_vertically,
    (Axis.VERTICAL, Strategy.WHOLE_LINE): movers.move_lines_vertically,
    (Axis.HORIZONTAL, Strategy.SINGLE_RANGE): movers.move_region_horizontally,
    (Axis.HORIZONTAL, Strategy.WHOLE_LINE): movers.move_lines_horizontally,
}

_LINE_MOVERS: Dict[Axis, LineMover] = {
    Axis.VERTICAL: movers.move_line_vertically,
    Axis.HORIZONTAL: movers.move_line_horizontally,
}


def _resolve(
    session: EditSession, request: MoveRequest
) -> Tuple[Callable[..., None], Tuple[int, ...]]:
    """Pick the mover for ``request`` and the positional arguments it takes."""

    buffer = session.buffer
    region = buffer.region()
    if region is None:
        return _LINE_MOVERS[request.axis], (request.magnitude,)
    start, end = region
    single_line = buffer.line_number(start) == buffer.line_number(end)
    strategy = request.choose_strategy(single_line)
    return _REGION_MOVERS[(request.axis, strategy)], (start, end, request.magnitude)


def move(session: EditSession, request: MoveRequest) -> None:
    """Apply ``request`` to the session's selection, or its current line."""

    if request.magnitude == 0:
        return
    mover, args = _resolve(session, request)
    mover(session, *args)


def _run(session: EditSession, name: str, axis: Axis, magnitude: int) -> BufferView:
    request = MoveRequest(
        axis=axis,
        magnitude=magnitude,
        region_whole_line=session.config.region_whole_line,
    )
    with session.command(name):
        with telemetry.span(
            f"move_text::{name}",
            component="move_text",
            metadata={
                "buffer": session.buffer.name,
                "axis": axis.value,
                "magnitude": magnitude,
            },
        ) as handle:
            if request.magnitude:
                mover, args = _resolve(session, request)
                handle.add_metadata("mover", mover.__name__)
                mover(session, *args)
    return session.buffer.snapshot()


def move_text_up(session: EditSession, arg: int = 1) -> BufferView:
    return _run(session, "move_text_up", Axis.VERTICAL, -arg)


def move_text_down(session: EditSession, arg: int = 1) -> BufferView:
    return _run(session, "move_text_down", Axis.VERTICAL, arg)


def move_text_left(session: EditSession, arg: int = 1) -> BufferView:
    return _run(session, "move_text_left", Axis.HORIZONTAL, -arg)


def move_text_right(session: EditSession, arg: int = 1) -> BufferView:
    return _run(session, "move_text_right", Axis.HORIZONTAL, arg)


__all__ = [
    "move",
    "move_text_up",
    "move_text_down",
    "move_text_left",
    "move_text_right",
]

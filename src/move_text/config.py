"""User-facing options for the move commands."""

from __future__ import annotations

from dataclasses import dataclass

from move_text.runtime.telemetry import env, env_flag


@dataclass(frozen=True, slots=True)
class MoveTextConfig:
    """Options read by command dispatch and the vertical movers.

    ``maintain_start_column`` keeps a selection aligned to the column it
    started from across consecutive vertical moves. ``region_whole_line``
    makes multi-line selections move vertically as whole lines.
    """

    maintain_start_column: bool = True
    region_whole_line: bool = True
    tab_width: int = 8

    def __post_init__(self) -> None:
        if self.tab_width <= 0:
            raise ValueError("tab_width must be positive")

    @classmethod
    def from_env(cls) -> "MoveTextConfig":
        """Build a config from ``MOVE_TEXT_*`` environment variables."""

        defaults = cls()
        raw_width = env("TAB_WIDTH")
        try:
            tab_width = int(raw_width) if raw_width else defaults.tab_width
        except ValueError as exc:
            raise ValueError(
                f"MOVE_TEXT_TAB_WIDTH must be an integer, got {raw_width!r}"
            ) from exc
        return cls(
            maintain_start_column=env_flag(
                "MAINTAIN_START_COLUMN", defaults.maintain_start_column
            ),
            region_whole_line=env_flag("REGION_WHOLE_LINE", defaults.region_whole_line),
            tab_width=tab_width,
        )


__all__ = ["MoveTextConfig"]

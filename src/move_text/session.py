"""Per-buffer editing session holding command history and column memory."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from move_text.buffer import Buffer
from move_text.config import MoveTextConfig

VERTICAL_COMMANDS = frozenset({"move_text_up", "move_text_down"})


class EditSession:
    """Binds a buffer to its configuration and the remembered start column.

    The host runs every command through ``command`` (or reports foreign
    commands with ``record_command``) so the session can tell whether a
    vertical move continues a chain of vertical moves.
    """

    def __init__(
        self, buffer: Buffer, *, config: Optional[MoveTextConfig] = None
    ) -> None:
        self.buffer = buffer
        self.config = config or MoveTextConfig()
        self.start_column: Optional[int] = None
        self.last_command: Optional[str] = None
        self.this_command: Optional[str] = None

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        config: Optional[MoveTextConfig] = None,
        name: str = "default",
    ) -> "EditSession":
        config = config or MoveTextConfig()
        buffer = Buffer.from_text(text, name=name, tab_width=config.tab_width)
        return cls(buffer, config=config)

    @contextmanager
    def command(self, name: str) -> Iterator["EditSession"]:
        self.this_command = name
        try:
            yield self
        finally:
            self.this_command = None
            self.last_command = name

    def record_command(self, name: str) -> None:
        """Note that the host ran ``name`` outside the move commands."""

        self.last_command = name

    @property
    def in_vertical_chain(self) -> bool:
        return self.last_command in VERTICAL_COMMANDS

    def target_column(self, column: int) -> int:
        """Column a vertical region move should land on.

        Reuses the column stored at the start of the current vertical chain
        when that policy is on; otherwise stores and returns ``column``.
        """

        if (
            self.config.maintain_start_column
            and self.in_vertical_chain
            and self.start_column is not None
        ):
            return self.start_column
        self.start_column = column
        return column


__all__ = ["EditSession", "VERTICAL_COMMANDS"]

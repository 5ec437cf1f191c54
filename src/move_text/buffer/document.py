"""Line storage for move_text buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text storage.

    Lines are joined with ``"\\n"``. Text ending in a newline keeps a final
    empty line so the round trip through ``from_text``/``text`` is exact.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=0, dirty=False)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def replace_text(self, text: str) -> "BufferDocument":
        """Return a document holding ``text`` with a bumped version."""

        return BufferDocument(
            _lines=text.split("\n"), version=self.version + 1, dirty=True
        )

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "BufferDocument":
        """Return a document with ``[start:end]`` replaced by ``new_lines``."""

        lines = list(self._lines)
        lines[start:end] = list(new_lines)
        return BufferDocument(_lines=lines, version=self.version + 1, dirty=True)

    def move_lines(self, first: int, last: int, delta: int) -> "BufferDocument":
        """Return a document with rows ``first..last`` shifted by ``delta`` rows."""

        lines = list(self._lines)
        block = lines[first : last + 1]
        del lines[first : last + 1]
        target = first + delta
        lines[target:target] = block
        return BufferDocument(_lines=lines, version=self.version + 1, dirty=True)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def ends_with_newline(self) -> bool:
        return len(self._lines) > 1 and self._lines[-1] == ""

    @property
    def last_content_row(self) -> int:
        """Index of the last row holding content (skips the trailing empty row)."""

        if self.ends_with_newline:
            return len(self._lines) - 2
        return len(self._lines) - 1

    def get_line(self, index: int) -> str:
        return self._lines[index]

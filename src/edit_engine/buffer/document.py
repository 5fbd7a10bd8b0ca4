"""Line-based text storage with offset/position conversions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

Position = Tuple[int, int]  # (line, column)


@dataclass(slots=True)
class BufferDocument:
    """Text stored as lines split on ``"\\n"``.

    Splitting only on ``"\\n"`` keeps ``"\\r"`` inside the lines, so joining the
    lines back with ``"\\n"`` always reproduces the original text and offsets
    computed from lines match offsets into the flat string.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=version)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def replace_text(self, text: str) -> "BufferDocument":
        """Return a new document holding ``text`` with the version bumped."""

        return BufferDocument.from_text(text, version=self.version + 1)

    def line_offset(self, line: int) -> int:
        """Offset of the first character of ``line``."""

        return sum(len(self._lines[i]) + 1 for i in range(line))

    def offset_for_position(self, position: Position) -> int:
        line, column = position
        return self.line_offset(line) + column

    def position_for_offset(self, offset: int) -> Position:
        running = 0
        for line, content in enumerate(self._lines):
            if offset <= running + len(content):
                return (line, offset - running)
            running += len(content) + 1
        return (len(self._lines) - 1, len(self._lines[-1]))

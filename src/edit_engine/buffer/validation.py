"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument, Position
from .sync import BufferValidationError


def ensure_position(document: BufferDocument, position: Position) -> Position:
    line, column = position
    if line < 0 or line >= document.line_count:
        raise BufferValidationError("Line out of range", position=position)
    if column < 0 or column > len(document.get_line(line)):
        raise BufferValidationError("Column out of range", position=position)
    return position


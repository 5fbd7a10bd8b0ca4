"""Buffer abstractions and the host editor boundary."""

from .buffer import Buffer, BufferDelta, BufferView, Transaction
from .document import BufferDocument, Position
from .host import BufferHost
from .sync import BufferMirror, BufferValidationError, EditorHost
from .validation import ensure_position

__all__ = [
    "BufferDocument",
    "Position",
    "Buffer",
    "BufferDelta",
    "BufferView",
    "Transaction",
    "BufferHost",
    "BufferMirror",
    "EditorHost",
    "BufferValidationError",
    "ensure_position",
]

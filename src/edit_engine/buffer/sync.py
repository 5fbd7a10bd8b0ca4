"""Adapter boundary types for exchanging text and edits with a host editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from edit_engine.edits import Edit

from .document import Position


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer."""

    text: str
    version: int
    attributes: dict[str, str] = field(default_factory=dict)


class EditorHost(Protocol):
    """What the engine needs from a host editor.

    Edits handed to ``apply_edits`` are expressed against the text returned by
    the preceding ``document_text`` call. Writing them back is asynchronous;
    the host resolves to ``True`` once every edit landed.
    """

    def document_text(self) -> str:
        ...

    async def apply_edits(self, edits: Sequence[Edit]) -> bool:
        ...


class BufferValidationError(RuntimeError):
    """Raised when a host or caller provides out-of-bounds coordinates."""

    def __init__(self, message: str, *, position: Optional[Position] = None) -> None:
        super().__init__(message)
        self.position = position

"""In-process ``EditorHost`` backed by a ``Buffer``."""

from __future__ import annotations

from typing import Sequence

from edit_engine.edits import Edit

from .buffer import Buffer


class BufferHost:
    """Serves a ``Buffer`` to code written against ``EditorHost``."""

    def __init__(self, buffer: Buffer, *, label: str = "host_edit") -> None:
        self.buffer = buffer
        self.label = label

    def document_text(self) -> str:
        return self.buffer.text

    async def apply_edits(self, edits: Sequence[Edit]) -> bool:
        self.buffer.apply_edits(edits, label=self.label)
        return True

"""High-level buffer façade: a document plus transactional edit batches."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional, Sequence

from edit_engine.edits import ChangeEdit, Edit, merge_and_apply_edits
from edit_engine.runtime import telemetry

from .document import BufferDocument, Position
from .sync import BufferMirror
from .validation import ensure_position


@dataclass(slots=True)
class BufferView:
    version: int
    text: str


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    edit_count: int
    label: str


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @property
    def text(self) -> str:
        return self.document.text

    def snapshot(self) -> BufferView:
        return BufferView(version=self.document.version, text=self.document.text)

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.document.text,
            version=self.document.version,
            attributes=dict(attributes or {}),
        )

    def apply_edits(self, edits: Sequence[Edit], *, label: str = "apply_edits") -> BufferDelta:
        """Merge and apply ``edits`` (in current-text coordinates) as one write.

        The document is only replaced when every edit applied; the first
        ``EditError`` is raised and leaves the buffer untouched.
        """

        with Transaction(self, label) as tx:
            result = merge_and_apply_edits(edits, self.document.text)
            tx.commit(result.unwrap())
        return BufferDelta(
            version=self.document.version,
            text=self.document.text,
            edit_count=len(edits),
            label=label,
        )

    def replace_range(
        self, start: Position, end: Position, text: str, *, label: str = "replace_range"
    ) -> BufferDelta:
        start = ensure_position(self.document, start)
        end = ensure_position(self.document, end)
        if start > end:
            start, end = end, start
        start_offset = self.document.offset_for_position(start)
        end_offset = self.document.offset_for_position(end)
        edit = ChangeEdit(start_offset, end_offset - start_offset, text)
        return self.apply_edits([edit], label=label)

    def insert_text(self, position: Position, text: str) -> BufferDelta:
        return self.replace_range(position, position, text, label="insert_text")

    def delete_range(self, start: Position, end: Position) -> BufferDelta:
        return self.replace_range(start, end, "", label="delete_range")

    def get_text_range(self, start: Position, end: Position) -> str:
        start = ensure_position(self.document, start)
        end = ensure_position(self.document, end)
        if start > end:
            start, end = end, start
        start_offset = self.document.offset_for_position(start)
        end_offset = self.document.offset_for_position(end)
        return self.document.text[start_offset:end_offset]


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self.committed = False

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self, text: str) -> None:
        self.buffer.document = self.buffer.document.replace_text(text)
        self.committed = True

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False

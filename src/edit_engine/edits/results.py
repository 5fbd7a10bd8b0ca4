"""Result values returned by apply/merge calls and by the sequencer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import EditError


@dataclass(slots=True)
class EditResult:
    """Outcome of ``apply_edit`` or ``merge_edit``.

    ``text`` is the new buffer text for an apply, ``None`` for a merge.
    """

    ok: bool
    text: Optional[str] = None
    error: Optional[EditError] = None

    @classmethod
    def success(cls, text: Optional[str] = None) -> "EditResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, error: EditError) -> "EditResult":
        return cls(ok=False, error=error)

    def unwrap(self) -> Optional[str]:
        if self.error is not None:
            raise self.error
        return self.text


@dataclass(slots=True)
class SequenceResult:
    """Outcome of a whole merge-and-apply batch.

    On failure ``text`` holds the buffer as written by the ``applied`` edits
    that succeeded before the error; nothing is rolled back.
    """

    ok: bool
    text: str
    applied: int
    error: Optional[EditError] = None
    failed_index: Optional[int] = None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        return self.text


__all__ = ["EditResult", "SequenceResult"]

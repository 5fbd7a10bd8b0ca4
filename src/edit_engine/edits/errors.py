"""Error kinds raised (or carried in results) by the edit algebra."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .models import Edit


class EditError(RuntimeError):
    """Base class for every failure of the edit algebra."""


class InvalidEditError(EditError, ValueError):
    """Raised when an edit is constructed with impossible coordinates."""


class OverlapConflictError(EditError):
    """Two edits interact in a way the merge rules cannot reconcile."""

    def __init__(self, message: str, *, applied: "Edit", pending: "Edit") -> None:
        super().__init__(f"{message} (applied={applied!r}, pending={pending!r})")
        self.reason = message
        self.applied = applied
        self.pending = pending


class OutOfRangeError(EditError, IndexError):
    """An edit reaches past the end of the buffer it is applied to."""

    def __init__(self, edit: "Edit", length: int) -> None:
        super().__init__(f"{edit!r} is out of range for a buffer of length {length}")
        self.edit = edit
        self.length = length


__all__ = [
    "EditError",
    "InvalidEditError",
    "OverlapConflictError",
    "OutOfRangeError",
]

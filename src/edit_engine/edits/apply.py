"""Apply a single edit to a text value."""

from __future__ import annotations

from typing import Callable, Dict

from .errors import OutOfRangeError
from .models import ChangeEdit, Edit, EditKind, MoveEdit
from .results import EditResult


def apply_change(edit: ChangeEdit, text: str) -> EditResult:
    if edit.end > len(text):
        return EditResult.failure(OutOfRangeError(edit, len(text)))
    return EditResult.success(text[: edit.start] + edit.replacement + text[edit.end :])


def apply_move(edit: MoveEdit, text: str) -> EditResult:
    if edit.end > len(text) or edit.dest > len(text):
        return EditResult.failure(OutOfRangeError(edit, len(text)))
    moved = text[edit.start : edit.end]
    remaining = text[: edit.start] + text[edit.end :]

    dest = edit.dest
    if edit.start < dest:
        # Removing the block pulled everything after it back by ``length``.
        dest -= edit.length
    return EditResult.success(remaining[:dest] + moved + remaining[dest:])


_APPLIERS: Dict[EditKind, Callable[..., EditResult]] = {
    EditKind.CHANGE: apply_change,
    EditKind.MOVE: apply_move,
}


def apply_edit(edit: Edit, text: str) -> EditResult:
    """Return the text produced by writing ``edit`` into ``text``."""

    return _APPLIERS[edit.kind](edit, text)


__all__ = ["apply_edit", "apply_change", "apply_move"]

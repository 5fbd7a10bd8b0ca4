"""Merge rules that re-coordinate a pending edit after another one was applied.

Each rule answers one question: given that ``applied`` has just been written
into the buffer, where does ``pending`` (expressed against the same original
text) now live? Only offsets are compared; no text is inspected. Rules mutate
``pending`` in place and report conflicts through an ``EditResult``.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from .errors import OverlapConflictError
from .models import ChangeEdit, Edit, EditKind, MoveEdit
from .results import EditResult

MergeRule = Callable[..., EditResult]


def _conflict(reason: str, applied: Edit, pending: Edit) -> EditResult:
    return EditResult.failure(
        OverlapConflictError(reason, applied=applied, pending=pending)
    )


def _offset_after_move(offset: int, move: MoveEdit) -> int:
    """Map an offset lying outside the moved block to post-move coordinates."""

    if move.dest > move.start:
        # Block travelled forward: text between its end and dest slid back.
        if move.end <= offset < move.dest:
            return offset - move.length
        return offset
    if move.dest < move.start and move.dest <= offset <= move.start:
        # Block travelled backward and now sits in front of this offset.
        return offset + move.length
    return offset


def merge_change_after_change(applied: ChangeEdit, pending: ChangeEdit) -> EditResult:
    if pending.is_after(applied):
        pending.start += applied.added_length
    elif not pending.is_before(applied):
        return _conflict("overlapping change edits", applied, pending)
    return EditResult.success()


def merge_change_after_move(applied: MoveEdit, pending: ChangeEdit) -> EditResult:
    if pending.intersects(applied):
        if not pending.inside(applied):
            return _conflict(
                "change edit intersects but is not inside move edit", applied, pending
            )
        # The change travels with the moved block.
        pending.start += applied.added_index
        return EditResult.success()
    if pending.strictly_contains_offset(applied.dest):
        return _conflict("move edit destination is inside change edit", applied, pending)
    pending.start = _offset_after_move(pending.start, applied)
    return EditResult.success()


def merge_move_after_change(applied: ChangeEdit, pending: MoveEdit) -> EditResult:
    contains_change = pending.intersects(applied)
    if contains_change and not pending.contains(applied):
        return _conflict(
            "move edit intersects change edit but does not contain it",
            applied,
            pending,
        )
    if applied.strictly_contains_offset(pending.dest):
        return _conflict("move edit destination is inside change edit", applied, pending)

    if contains_change:
        # The block to move now carries the replacement text.
        pending.length += applied.added_length
    elif pending.is_after(applied):
        pending.start += applied.added_length
    if pending.dest >= applied.end:
        pending.dest += applied.added_length
    return EditResult.success()


def merge_move_after_move(applied: MoveEdit, pending: MoveEdit) -> EditResult:
    if pending.intersects(applied):
        return _conflict("overlapping move edits", applied, pending)
    if pending.strictly_contains_offset(applied.dest):
        return _conflict("move edit destination is inside move edit", applied, pending)
    if applied.strictly_contains_offset(pending.dest):
        return _conflict("move edit destination is inside move edit", applied, pending)

    pending.start = _offset_after_move(pending.start, applied)
    pending.dest = _offset_after_move(pending.dest, applied)
    return EditResult.success()


_MERGE_RULES: Dict[Tuple[EditKind, EditKind], MergeRule] = {
    (EditKind.CHANGE, EditKind.CHANGE): merge_change_after_change,
    (EditKind.MOVE, EditKind.CHANGE): merge_change_after_move,
    (EditKind.CHANGE, EditKind.MOVE): merge_move_after_change,
    (EditKind.MOVE, EditKind.MOVE): merge_move_after_move,
}


def merge_edit(applied: Edit, pending: Edit) -> EditResult:
    """Adjust ``pending`` so it can be applied after ``applied``.

    For example, if ``applied`` inserted text before ``pending``, the start of
    ``pending`` is shifted forward by the inserted length.
    """

    return _MERGE_RULES[(applied.kind, pending.kind)](applied, pending)


__all__ = [
    "merge_edit",
    "merge_change_after_change",
    "merge_change_after_move",
    "merge_move_after_change",
    "merge_move_after_move",
]

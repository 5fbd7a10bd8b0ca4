"""Edit algebra: Change/Move edits, merge rules, and the batch sequencer."""

from .apply import apply_edit
from .errors import EditError, InvalidEditError, OutOfRangeError, OverlapConflictError
from .factory import (
    create_delete_edit,
    create_insert_edit,
    create_insert_line_edit,
    create_modify_edit,
    create_move_edit,
)
from .merge import merge_edit
from .models import ChangeEdit, Edit, EditKind, EditSpan, MoveEdit
from .results import EditResult, SequenceResult
from .sequencer import apply_edits, merge_and_apply_edits

__all__ = [
    "EditKind",
    "EditSpan",
    "ChangeEdit",
    "MoveEdit",
    "Edit",
    "EditError",
    "InvalidEditError",
    "OverlapConflictError",
    "OutOfRangeError",
    "EditResult",
    "SequenceResult",
    "apply_edit",
    "merge_edit",
    "merge_and_apply_edits",
    "apply_edits",
    "create_modify_edit",
    "create_insert_edit",
    "create_insert_line_edit",
    "create_delete_edit",
    "create_move_edit",
]

import itertools
from typing import List, Optional, Tuple

import pytest

from edit_engine.edits import (
    ChangeEdit,
    Edit,
    MoveEdit,
    OutOfRangeError,
    OverlapConflictError,
    apply_edit,
    apply_edits,
    merge_and_apply_edits,
)

TEXT = "0123456789ABCDEFGHIJ"


def make_changes() -> List[ChangeEdit]:
    return [
        ChangeEdit(0, 3, "a"),
        ChangeEdit(4, 5, "slow"),
        ChangeEdit(16, 3, "dog"),
    ]


@pytest.mark.parametrize("order", [(0, 1, 2), (2, 1, 0), (1, 0, 2), (2, 0, 1)])
def test_non_intersecting_changes_are_order_independent(order) -> None:
    edits = make_changes()
    ordered = [edits[i] for i in order]

    result = merge_and_apply_edits(ordered, "the quick brown fox")

    assert result.ok
    assert result.applied == 3
    assert result.text == "a slow brown dog"


ALPHABET = "abcdefghijklmnop"

EditRecipe = Tuple[str, int, int, object]

MIXED_EDITS: List[EditRecipe] = [
    ("change", 0, 2, "X"),
    ("change", 3, 0, "Y"),
    ("change", 4, 3, ""),
    ("change", 5, 1, "V"),
    ("change", 8, 1, "ZZZ"),
    ("change", 10, 0, "W"),
    ("change", 12, 4, "Q"),
    ("move", 0, 2, 6),
    ("move", 2, 3, 12),
    ("move", 6, 2, 1),
    ("move", 9, 3, 4),
    ("move", 13, 2, 8),
    ("move", 10, 2, 16),
    ("move", 4, 4, 0),
    ("move", 14, 2, 6),
]


def build_edit(recipe: EditRecipe) -> Edit:
    kind, start, length, extra = recipe
    if kind == "change":
        return ChangeEdit(start, length, extra)
    return MoveEdit(start, length, extra)


def _insertion_point(recipe: EditRecipe) -> Optional[int]:
    kind, start, length, extra = recipe
    if kind == "move":
        return extra
    return start if length == 0 else None


def _change_inside_forward_move(change: EditRecipe, move: EditRecipe) -> bool:
    _, start, length, _ = change
    _, move_start, move_length, dest = move
    move_end = move_start + move_length
    intersects = start < move_end and start + length > move_start
    inside = move_start <= start and start + length <= move_end
    return dest > move_start and intersects and inside


def _order_sensitive(first: EditRecipe, second: EditRecipe) -> bool:
    """Pairs whose result legitimately depends on application order."""

    point = _insertion_point(first)
    if point is not None and point == _insertion_point(second):
        return True
    kinds = (first[0], second[0])
    if kinds == ("change", "move"):
        return _change_inside_forward_move(first, second)
    if kinds == ("move", "change"):
        return _change_inside_forward_move(second, first)
    return False


MIXED_PAIRS = [
    pair
    for pair in itertools.combinations(MIXED_EDITS, 2)
    if not _order_sensitive(*pair)
]


@pytest.mark.parametrize("first,second", MIXED_PAIRS, ids=str)
def test_non_intersecting_edits_are_order_independent(first, second) -> None:
    forward = merge_and_apply_edits([build_edit(first), build_edit(second)], ALPHABET)
    backward = merge_and_apply_edits([build_edit(second), build_edit(first)], ALPHABET)

    assert forward.ok == backward.ok
    if forward.ok:
        assert forward.text == backward.text


def test_mixed_pairs_cover_moves_and_exclusions() -> None:
    kinds = {(first[0], second[0]) for first, second in MIXED_PAIRS}

    assert {("change", "move"), ("move", "move")} <= kinds
    assert (("move", 0, 2, 6), ("move", 14, 2, 6)) not in MIXED_PAIRS
    assert (("change", 0, 2, "X"), ("move", 0, 2, 6)) not in MIXED_PAIRS


def test_single_change_round_trip() -> None:
    original = "hello world"
    edit = ChangeEdit(0, 5, "goodbye")

    changed = apply_edits([edit], original)
    restored = apply_edits([ChangeEdit(0, len("goodbye"), original[0:5])], changed)

    assert changed == "goodbye world"
    assert restored == original


def _inverse_move(move: MoveEdit) -> MoveEdit:
    if move.dest > move.start:
        return MoveEdit(move.dest - move.length, move.length, move.start)
    return MoveEdit(move.dest, move.length, move.start + move.length)


@pytest.mark.parametrize(
    "start,length,dest",
    [(0, 3, 6), (6, 3, 1), (2, 4, 16), (10, 5, 0), (4, 4, 4), (4, 4, 8), (3, 0, 9)],
)
def test_move_and_move_back_restores_text(start, length, dest) -> None:
    text = "abcdefghijklmnop"
    move = MoveEdit(start, length, dest)

    moved = apply_edit(move, text).unwrap()
    restored = apply_edit(_inverse_move(move), moved).unwrap()

    assert restored == text


def test_scenario_two_changes_on_one_line() -> None:
    first = ChangeEdit(0, 3, "abcde")
    second = ChangeEdit(10, 2, "")

    result = merge_and_apply_edits([first, second], TEXT)

    assert second.start == 12
    assert result.text == "abcde3456789CDEFGHIJ"


def test_moves_applied_in_sequence() -> None:
    edits: List[Edit] = [MoveEdit(0, 3, 10), MoveEdit(5, 2, 15)]

    assert apply_edits(edits, TEXT) == "34789012ABCDE56FGHIJ"


def test_change_then_move_containing_it() -> None:
    edits: List[Edit] = [ChangeEdit(6, 2, "abcd"), MoveEdit(5, 5, 20)]

    assert apply_edits(edits, TEXT) == "01234ABCDEFGHIJ5abcd89"


def test_change_then_move_after_it() -> None:
    edits: List[Edit] = [ChangeEdit(0, 2, ""), MoveEdit(5, 3, 10)]

    assert apply_edits(edits, "0123456789") == "23489567"


def test_move_then_change_outside_block() -> None:
    edits: List[Edit] = [MoveEdit(10, 5, 0), ChangeEdit(2, 1, "two")]

    assert apply_edits(edits, TEXT) == "ABCDE01two3456789FGHIJ"


def test_conflict_stops_batch_and_keeps_written_edits() -> None:
    edits = [ChangeEdit(0, 1, "X"), ChangeEdit(5, 3, "a"), ChangeEdit(6, 2, "b")]

    result = merge_and_apply_edits(edits, "0123456789")

    assert not result.ok
    assert isinstance(result.error, OverlapConflictError)
    assert result.applied == 2
    assert result.failed_index == 2
    assert result.text == "X1234a89"
    with pytest.raises(OverlapConflictError):
        result.unwrap()


def test_out_of_range_edit_stops_batch() -> None:
    edits = [ChangeEdit(0, 1, "ab"), ChangeEdit(20, 1, "x")]

    result = merge_and_apply_edits(edits, "0123456789")

    assert not result.ok
    assert isinstance(result.error, OutOfRangeError)
    assert result.applied == 1
    assert result.failed_index == 1
    assert result.text == "ab123456789"


def test_apply_edits_raises_first_error() -> None:
    with pytest.raises(OverlapConflictError):
        apply_edits([ChangeEdit(0, 5, ""), ChangeEdit(2, 5, "")], TEXT)


def test_empty_batch_returns_text() -> None:
    result = merge_and_apply_edits([], TEXT)

    assert result.ok
    assert result.applied == 0
    assert result.text == TEXT

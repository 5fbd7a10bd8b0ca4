import pytest

from edit_engine.edits import (
    ChangeEdit,
    EditKind,
    InvalidEditError,
    MoveEdit,
    OutOfRangeError,
    apply_edit,
    create_delete_edit,
    create_insert_edit,
    create_insert_line_edit,
    create_modify_edit,
    create_move_edit,
)

ALPHABET = "0123456789"


def test_change_edit_derived_values() -> None:
    edit = ChangeEdit(2, 3, "abcde")

    assert edit.end == 5
    assert edit.added_length == 2
    assert edit.kind is EditKind.CHANGE
    assert ChangeEdit(0, 4, "").added_length == -4


def test_move_edit_derived_values() -> None:
    edit = MoveEdit(5, 5, 20)

    assert edit.end == 10
    assert edit.added_index == 15
    assert edit.kind is EditKind.MOVE


@pytest.mark.parametrize(
    "factory",
    [
        lambda: ChangeEdit(0, -1, ""),
        lambda: ChangeEdit(-1, 0, "x"),
        lambda: MoveEdit(0, -2, 5),
        lambda: MoveEdit(5, 5, 7),
        lambda: MoveEdit(5, 5, -1),
    ],
)
def test_invalid_construction_is_rejected(factory) -> None:
    with pytest.raises(InvalidEditError):
        factory()


def test_invalid_edit_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        MoveEdit(0, 10, 3)


def test_move_destination_on_block_boundary_is_allowed() -> None:
    assert MoveEdit(5, 5, 5).dest == 5
    assert MoveEdit(5, 5, 10).dest == 10


def test_range_predicates() -> None:
    left = ChangeEdit(0, 5, "")
    right = ChangeEdit(5, 3, "")
    middle = ChangeEdit(3, 4, "")
    outer = ChangeEdit(0, 10, "")

    assert left.is_before(right)
    assert right.is_after(left)
    assert not left.intersects(right)
    assert not right.intersects(left)
    assert middle.intersects(left)
    assert middle.intersects(right)
    assert outer.contains(middle)
    assert middle.inside(outer)
    assert not middle.contains(outer)


def test_zero_length_edit_touching_range_does_not_intersect() -> None:
    block = ChangeEdit(4, 4, "")

    assert not ChangeEdit(4, 0, "x").intersects(block)
    assert not ChangeEdit(8, 0, "x").intersects(block)
    assert ChangeEdit(5, 0, "x").intersects(block)


def test_apply_change_replaces_range() -> None:
    result = apply_edit(ChangeEdit(2, 3, "abc"), ALPHABET)

    assert result.ok
    assert result.text == "01abc56789"


def test_apply_change_reaching_end_of_buffer() -> None:
    # An edit whose end equals the buffer length is valid.
    assert apply_edit(ChangeEdit(6, 5, "there"), "hello world").unwrap() == "hello there"
    assert apply_edit(ChangeEdit(11, 0, "!"), "hello world").unwrap() == "hello world!"


def test_apply_change_past_end_fails() -> None:
    result = apply_edit(ChangeEdit(6, 6, "x"), "hello world")

    assert not result.ok
    assert isinstance(result.error, OutOfRangeError)
    assert result.error.length == 11
    with pytest.raises(OutOfRangeError):
        result.unwrap()


def test_apply_move_forward() -> None:
    assert apply_edit(MoveEdit(0, 3, 6), ALPHABET).unwrap() == "3450126789"


def test_apply_move_backward() -> None:
    assert apply_edit(MoveEdit(6, 3, 1), ALPHABET).unwrap() == "0678123459"


def test_apply_move_to_end_of_buffer() -> None:
    assert apply_edit(MoveEdit(0, 2, 10), ALPHABET).unwrap() == "2345678901"


def test_apply_move_out_of_range_fails() -> None:
    assert isinstance(apply_edit(MoveEdit(8, 5, 0), ALPHABET).error, OutOfRangeError)
    assert isinstance(apply_edit(MoveEdit(0, 2, 11), ALPHABET).error, OutOfRangeError)


def test_factories_convert_end_offsets() -> None:
    assert create_modify_edit(2, 5, "x") == ChangeEdit(2, 3, "x")
    assert create_insert_edit(4, "y") == ChangeEdit(4, 0, "y")
    assert create_insert_line_edit(0, "import x") == ChangeEdit(0, 0, "import x\n")
    assert create_insert_line_edit(0, "a", newline="\r\n").replacement == "a\r\n"
    assert create_delete_edit(1, 3) == ChangeEdit(1, 2, "")
    assert create_move_edit(5, 10, 20) == MoveEdit(5, 5, 20)

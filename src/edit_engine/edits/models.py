"""Dataclasses describing Change and Move edits and their range predicates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .errors import InvalidEditError


class EditKind(str, Enum):
    CHANGE = "change"
    MOVE = "move"


@dataclass(slots=True)
class EditSpan:
    """Half-open range ``[start, start + length)`` in current buffer coordinates.

    Concrete edits are ``ChangeEdit`` and ``MoveEdit``; the merge step mutates
    ``start`` (and a move's ``dest``/``length``) in place.
    """

    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise InvalidEditError(f"start must be >= 0, got {self.start}")
        if self.length < 0:
            raise InvalidEditError(f"length must be >= 0, got {self.length}")

    @property
    def end(self) -> int:
        return self.start + self.length

    def is_before(self, edit: EditSpan) -> bool:
        return self.end <= edit.start

    def is_after(self, edit: EditSpan) -> bool:
        return self.start >= edit.end

    def intersects(self, edit: EditSpan) -> bool:
        # Touching ranges do not intersect.
        return edit.start < self.end and edit.end > self.start

    def contains(self, edit: EditSpan) -> bool:
        return self.start <= edit.start and self.end >= edit.end

    def inside(self, edit: EditSpan) -> bool:
        return edit.start <= self.start and edit.end >= self.end

    def strictly_contains_offset(self, offset: int) -> bool:
        return self.start < offset < self.end


@dataclass(slots=True)
class ChangeEdit(EditSpan):
    """Replace ``[start, end)`` with ``replacement``.

    ``length == 0`` is an insertion, an empty ``replacement`` a deletion.
    """

    replacement: str
    kind: ClassVar[EditKind] = EditKind.CHANGE

    @property
    def added_length(self) -> int:
        # Can be negative.
        return len(self.replacement) - self.length


@dataclass(slots=True)
class MoveEdit(EditSpan):
    """Relocate ``[start, end)`` to ``dest`` (an offset in the same buffer)."""

    dest: int
    kind: ClassVar[EditKind] = EditKind.MOVE

    def __post_init__(self) -> None:
        EditSpan.__post_init__(self)
        if self.dest < 0:
            raise InvalidEditError(f"dest must be >= 0, got {self.dest}")
        if self.strictly_contains_offset(self.dest):
            raise InvalidEditError(
                f"cannot move [{self.start}, {self.end}) into itself at {self.dest}"
            )

    @property
    def added_index(self) -> int:
        return self.dest - self.start


Edit = Union[ChangeEdit, MoveEdit]


__all__ = [
    "EditKind",
    "EditSpan",
    "ChangeEdit",
    "MoveEdit",
    "Edit",
]

"""Shorthands for building edits from ``(start, end)`` offsets."""

from __future__ import annotations

from .models import ChangeEdit, MoveEdit


def create_modify_edit(start: int, end: int, text: str) -> ChangeEdit:
    return ChangeEdit(start, end - start, text)


def create_insert_edit(start: int, text: str) -> ChangeEdit:
    return ChangeEdit(start, 0, text)


def create_insert_line_edit(start: int, text: str, *, newline: str = "\n") -> ChangeEdit:
    return ChangeEdit(start, 0, text + newline)


def create_delete_edit(start: int, end: int) -> ChangeEdit:
    return ChangeEdit(start, end - start, "")


def create_move_edit(start: int, end: int, dest: int) -> MoveEdit:
    return MoveEdit(start, end - start, dest)


__all__ = [
    "create_modify_edit",
    "create_insert_edit",
    "create_insert_line_edit",
    "create_delete_edit",
    "create_move_edit",
]

"""Command registry mapping command ids to handlers."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from edit_engine.runtime.telemetry import span

from .models import CommandRef


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    command_count: int
    command_ids: tuple[str, ...]


class CommandConflictError(RuntimeError):
    """Raised when a command id is registered twice."""

    def __init__(self, command: CommandRef, existing: CommandRef) -> None:
        super().__init__(f"Command '{command.id}' is already registered")
        self.command = command
        self.existing = existing


class CommandRegistry:
    """Owns the commands a host can invoke by id."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, CommandRef] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_command(self, command_id: str) -> CommandRef:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def register_command(
        self, command: CommandRef, *, replace: bool = False
    ) -> CommandRef:
        with span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id},
        ) as handle:
            existing = self._commands.get(command.id)
            if existing is not None and not replace:
                handle.add_metadata("conflict", existing.id)
                raise CommandConflictError(command, existing)
            self._commands[command.id] = command
            self._touch()
            return command

    def unregister_command(self, command_id: str) -> Optional[CommandRef]:
        with span(
            "commands::unregister",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command_id},
        ):
            command = self._commands.pop(command_id, None)
            if command is not None:
                self._touch()
            return command

    def execute(self, command_id: str, *args: object, **kwargs: object) -> object:
        command = self.get_command(command_id)
        with span(
            f"commands::{command.telemetry_name}",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command_id},
        ):
            return command(*args, **kwargs)

    async def execute_async(
        self, command_id: str, *args: object, **kwargs: object
    ) -> object:
        """Like ``execute`` but awaits coroutine handlers inside the span."""

        command = self.get_command(command_id)
        with span(
            f"commands::{command.telemetry_name}",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command_id},
        ):
            outcome = command(*args, **kwargs)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            return outcome

    def iter_commands(self) -> Iterator[CommandRef]:
        yield from self._commands.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            command_count=len(self._commands),
            command_ids=tuple(sorted(self._commands)),
        )

    def _touch(self) -> None:
        self._revision += 1


__all__ = [
    "CommandRegistry",
    "CommandConflictError",
    "RegistryStats",
]

"""Textual adapter that runs registered commands against a buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from edit_engine.buffer import Buffer, BufferHost, BufferMirror
from edit_engine.commands import CommandRegistry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges a ``Buffer`` and a ``CommandRegistry`` to a Textual surface."""

    def __init__(
        self, buffer: Buffer, registry: CommandRegistry, hooks: TextualUIHooks
    ) -> None:
        self.buffer = buffer
        self.registry = registry
        self.hooks = hooks
        self.host = BufferHost(buffer, label="textual_command")
        self._refresh_buffer()

    def load_text(self, text: str) -> None:
        self.buffer.document = self.buffer.document.replace_text(text)
        self._log_state("load ->", length=len(text))
        self._refresh_buffer()

    async def run_command(self, command_id: str) -> bool:
        """Run ``command_id`` with the buffer host; ``True`` if the text changed."""

        self._log_state("command ->", command=command_id)
        version = self.buffer.document.version
        try:
            self.registry.get_command(command_id)
        except KeyError:
            self.hooks.update_status(f"unknown command: {command_id}")
            return False
        outcome = await self.registry.execute_async(command_id, self.host)

        changed = bool(outcome) and self.buffer.document.version != version
        status = "applied" if changed else "unchanged"
        self.hooks.update_status(f"{command_id}:{status}")
        self._refresh_buffer()
        self._log_state("result <-", command=command_id, status=status)
        return changed

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.buffer.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        return {
            "buffer": self.buffer.name,
            "buffer_version": self.buffer.document.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]

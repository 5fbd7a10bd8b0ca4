"""Executable Textual app that hosts one edit-engine buffer."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use edit_engine.adapters.textual.app"
    ) from exc

from edit_engine.buffer import Buffer, BufferMirror
from edit_engine.commands import CONVERT_TO_TEMPLATE_STRINGS, CommandRegistry, activate
from edit_engine.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""


class EditEngineApp(App[None]):
    """Minimal Textual UI showing one buffer and the built-in commands."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+t", "convert_template_strings", "Template strings"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = "", name: str = "default") -> None:
        super().__init__()
        self._state = UIState()
        self._initial_text = text
        self._buffer_name = name
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Footer()

    async def on_mount(self) -> None:
        registry = activate(CommandRegistry(logger_name="edit_engine.commands"))
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
        )
        buffer = Buffer.from_text(self._initial_text, name=self._buffer_name)
        self.adapter = TextualEditorAdapter(buffer, registry, hooks)
        self._update_status(f"{self._buffer_name} loaded")

    async def action_convert_template_strings(self) -> None:
        if self.adapter:
            await self.adapter.run_command(CONVERT_TO_TEMPLATE_STRINGS)

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._state.buffer_text = mirror.text
        if self._buffer_widget:
            self._buffer_widget.update(self._state.buffer_text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the edit engine Textual demo.")
    parser.add_argument("path", nargs="?", help="File to load into the buffer")
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("EDIT_ENGINE_LOG_PRESET", "quiet"),
        help="Telemetry preset (default: quiet, keeps logs off the terminal)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    text = ""
    name = "default"
    if args.path:
        path = Path(args.path)
        text = path.read_text(encoding="utf-8")
        name = path.name
    EditEngineApp(text=text, name=name).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()

"""Built-in commands registered when the engine is activated in a host."""

from __future__ import annotations

from typing import Iterable, Optional

from edit_engine.transforms import convert_to_template_strings

from .models import CommandRef
from .registry import CommandRegistry

CONVERT_TO_TEMPLATE_STRINGS = "tools.convertToTemplateStrings"

DEFAULT_COMMANDS: tuple[CommandRef, ...] = (
    CommandRef(
        id=CONVERT_TO_TEMPLATE_STRINGS,
        handler=convert_to_template_strings,
        description="Convert string concatenations to template strings",
        telemetry_name="convert_to_template_strings",
    ),
)


def activate(
    registry: CommandRegistry,
    *,
    include: Optional[Iterable[str]] = None,
    replace: bool = False,
) -> CommandRegistry:
    """Register the built-in commands (optionally only ``include``)."""

    allowed = set(include) if include is not None else None
    for command in DEFAULT_COMMANDS:
        if allowed is not None and command.id not in allowed:
            continue
        registry.register_command(command, replace=replace)
    return registry


__all__ = ["CONVERT_TO_TEMPLATE_STRINGS", "DEFAULT_COMMANDS", "activate"]

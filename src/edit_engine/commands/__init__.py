"""Command registry and the built-in host commands."""

from .models import CommandRef
from .registry import CommandConflictError, CommandRegistry, RegistryStats
from .defaults import CONVERT_TO_TEMPLATE_STRINGS, DEFAULT_COMMANDS, activate

__all__ = [
    "CommandRef",
    "CommandRegistry",
    "CommandConflictError",
    "RegistryStats",
    "CONVERT_TO_TEMPLATE_STRINGS",
    "DEFAULT_COMMANDS",
    "activate",
]

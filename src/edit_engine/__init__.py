"""Position-based edit merging and application for in-memory text buffers."""

__all__ = [
    "adapters",
    "buffer",
    "cli",
    "commands",
    "edits",
    "runtime",
    "transforms",
]

__version__ = "0.1.0"

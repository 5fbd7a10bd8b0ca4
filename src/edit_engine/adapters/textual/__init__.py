"""Textual host adapter. ``app`` needs the ``textual`` package at import time."""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]

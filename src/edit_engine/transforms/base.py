"""Base class for rules that turn a text into a list of independent edits."""

from __future__ import annotations

from typing import Sequence

from edit_engine.edits import Edit, merge_and_apply_edits


class RuleIncompatibleError(ValueError):
    """Raised by a rule that cannot process the given input."""


class EditRule:
    """A rule scans a text and proposes edits against that original text.

    Subclasses implement ``process``; ``apply`` merges and applies the edits
    in the order they were returned.
    """

    name: str = "rule"

    def process(self, text: str) -> Sequence[Edit]:  # pragma: no cover - abstract override
        raise NotImplementedError

    def apply(self, text: str) -> str:
        edits = self.process(text)
        if not edits:
            return text
        result = merge_and_apply_edits(
            edits, text, logger_name=f"edit_engine.rules.{self.name}"
        )
        return result.unwrap()


__all__ = ["EditRule", "RuleIncompatibleError"]

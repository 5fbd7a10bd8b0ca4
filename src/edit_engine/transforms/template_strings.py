"""Convert quoted string concatenations into template strings.

``a = 'foo' + bar + 'baz'`` becomes ``a = `foo${bar}baz```. The scan is line
oriented and yields at most one edit per line so edits never overlap.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from edit_engine.buffer import EditorHost
from edit_engine.edits import ChangeEdit, EditError
from edit_engine.runtime import telemetry

from .base import EditRule, RuleIncompatibleError

LOGGER_NAME = "edit_engine.rules.template-strings"

_OPERAND = r"(?:'[^']*')|(?:\w+)"
CONCATENATION = re.compile(rf"({_OPERAND})((?:\s*\+\s*(?:{_OPERAND}))+)")
OPERAND = re.compile(_OPERAND)


@dataclass(frozen=True, slots=True)
class Concatenation:
    """A concatenation found on one line."""

    column: int
    original: str
    replacement: str

    @property
    def length(self) -> int:
        return len(self.original)


def escape(text: str) -> str:
    return text.replace("`", "\\`").replace("$", "\\$")


def replace_operand(operand: str) -> str:
    quoted_start = operand.startswith("'")
    quoted_end = operand.endswith("'") and len(operand) > 1
    if quoted_start != quoted_end:
        raise RuleIncompatibleError(f"Unexpected input: {operand}")
    if quoted_start:
        return escape(operand[1:-1])
    return "${" + escape(operand) + "}"


def find_concatenation(line: str) -> Optional[Concatenation]:
    match = CONCATENATION.search(line)
    if match is None:
        return None
    original = match.group(0)
    if not original.startswith("'") and not original.endswith("'"):
        return None
    parts = [replace_operand(operand) for operand in OPERAND.findall(original)]
    return Concatenation(
        column=match.start(),
        original=original,
        replacement="`" + "".join(parts) + "`",
    )


def scan_concatenations(text: str) -> List[ChangeEdit]:
    """Return one ``ChangeEdit`` per converted line, in ascending order."""

    edits: List[ChangeEdit] = []
    line_offset = 0
    for line_index, line in enumerate(text.split("\n")):
        found = find_concatenation(line)
        if found is not None:
            telemetry.record_event(
                "template_strings.replace",
                level="debug",
                data={
                    "line": line_index,
                    "original": found.original,
                    "replacement": found.replacement,
                },
                logger_name=LOGGER_NAME,
            )
            edits.append(
                ChangeEdit(line_offset + found.column, found.length, found.replacement)
            )
        line_offset += len(line) + 1
    return edits


class TemplateStringRule(EditRule):
    name = "template-strings"

    def process(self, text: str) -> List[ChangeEdit]:
        return scan_concatenations(text)


def convert_text(text: str) -> str:
    return TemplateStringRule().apply(text)


async def convert_to_template_strings(host: EditorHost) -> bool:
    """Scan the host's text and hand the resulting edits back in one write.

    Returns ``False`` when nothing matched or when the host rejected the edits;
    the rejection is logged.
    """

    edits = scan_concatenations(host.document_text())
    if not edits:
        return False
    try:
        return await host.apply_edits(edits)
    except EditError as exc:
        telemetry.record_event(
            "template_strings.apply_failed",
            level="error",
            data={"reason": str(exc), "edit_count": len(edits)},
            logger_name=LOGGER_NAME,
        )
        return False


__all__ = [
    "Concatenation",
    "TemplateStringRule",
    "convert_text",
    "convert_to_template_strings",
    "escape",
    "find_concatenation",
    "replace_operand",
    "scan_concatenations",
]

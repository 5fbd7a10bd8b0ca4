"""Rules that scan a text and propose edits."""

from .base import EditRule, RuleIncompatibleError
from .template_strings import (
    TemplateStringRule,
    convert_text,
    convert_to_template_strings,
    scan_concatenations,
)

RULES = {
    TemplateStringRule.name: TemplateStringRule,
}

__all__ = [
    "EditRule",
    "RuleIncompatibleError",
    "TemplateStringRule",
    "RULES",
    "convert_text",
    "convert_to_template_strings",
    "scan_concatenations",
]

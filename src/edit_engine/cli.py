"""Command-line entry point: run one rule over one file and print the result."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from edit_engine.edits import EditError
from edit_engine.runtime import telemetry
from edit_engine.transforms import RULES, RuleIncompatibleError


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="edit-engine",
        description="Apply an edit rule to a file and print the edited text.",
    )
    parser.add_argument("path", help="File to read, or '-' for stdin")
    parser.add_argument(
        "--rule",
        choices=sorted(RULES),
        default="template-strings",
        help="Rule to apply (default: template-strings)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("EDIT_ENGINE_LOG_PRESET", "quiet"),
        help="Telemetry preset (default: quiet)",
    )
    return parser.parse_args(argv)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    text = _read_input(args.path)
    rule = RULES[args.rule]()

    try:
        edited = rule.apply(text)
    except RuleIncompatibleError as exc:
        telemetry.record_event(
            "cli.rule_incompatible",
            level="warning",
            data={"rule": rule.name, "path": args.path, "reason": str(exc)},
        )
        print(f"rule incompatible with input file: {exc}", file=sys.stderr)
        return 1
    except EditError as exc:
        telemetry.record_event(
            "cli.edit_failed",
            level="error",
            data={"rule": rule.name, "path": args.path, "reason": str(exc)},
        )
        print(f"could not apply edits: {exc}", file=sys.stderr)
        return 1

    if edited == text:
        print("no edits to this file", file=sys.stderr)
    sys.stdout.write(edited)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())

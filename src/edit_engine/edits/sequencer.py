"""Apply an ordered batch of edits, re-coordinating the rest after each one."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from edit_engine.runtime import telemetry

from .apply import apply_edit
from .errors import EditError, OverlapConflictError
from .merge import merge_edit
from .models import Edit
from .results import SequenceResult


def merge_and_apply_edits(
    edits: Sequence[Edit], text: str, *, logger_name: Optional[str] = None
) -> SequenceResult:
    """Apply ``edits`` in order to ``text``.

    Every edit must be expressed against the original ``text``. After edit
    ``i`` is written it is merged into each edit ``j > i`` so those stay valid
    against the new buffer; the edits are mutated in place. The first failure
    stops the batch and edits written before it stay in ``SequenceResult.text``.
    """

    with telemetry.span(
        "edits::merge_and_apply",
        logger_name=logger_name,
        component="edits",
        metadata={"edit_count": len(edits)},
    ) as handle:
        for index, edit in enumerate(edits):
            outcome = apply_edit(edit, text)
            if outcome.error is not None:
                _report(handle, outcome.error, {"edit": edit}, logger_name)
                return SequenceResult(
                    ok=False,
                    text=text,
                    applied=index,
                    error=outcome.error,
                    failed_index=index,
                )
            text = outcome.text or ""

            for offset, pending in enumerate(edits[index + 1 :], start=index + 1):
                merged = merge_edit(edit, pending)
                if merged.error is not None:
                    _report(
                        handle,
                        merged.error,
                        {"applied_edit": edit, "pending_edit": pending},
                        logger_name,
                    )
                    return SequenceResult(
                        ok=False,
                        text=text,
                        applied=index + 1,
                        error=merged.error,
                        failed_index=offset,
                    )

        return SequenceResult(ok=True, text=text, applied=len(edits))


def apply_edits(edits: Sequence[Edit], text: str) -> str:
    """Like ``merge_and_apply_edits`` but raise the first ``EditError``."""

    return merge_and_apply_edits(edits, text).unwrap()


def _report(
    handle: telemetry.SpanHandle,
    error: EditError,
    edits: Dict[str, Any],
    logger_name: Optional[str],
) -> None:
    name = "edits.conflict" if isinstance(error, OverlapConflictError) else "edits.failed"
    telemetry.record_event(
        name,
        level="error",
        data={"reason": str(error), **edits},
        logger_name=logger_name,
    )
    handle.fail(type(error).__name__)


__all__ = ["merge_and_apply_edits", "apply_edits"]

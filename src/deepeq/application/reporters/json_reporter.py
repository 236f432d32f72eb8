"""JSON reporter: DiffReport → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deepeq.domain.model.diff_record import DiffRecord, DiffReport


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Schema matches domain structure 1:1 with summary added.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, diff: DiffReport) -> str:
        """Format diff report as JSON string.

        Args:
            diff: Diff report to format.

        Returns:
            JSON string with stored differences and summary.
        """
        data = {
            "differences": [_record_to_dict(r) for r in diff.records],
            "summary": _build_summary(diff),
        }
        return json.dumps(data, indent=self._indent)


def _build_summary(diff: DiffReport) -> dict[str, object]:
    """Build summary statistics."""
    return {
        "total": diff.total_diffs,
        "shown": len(diff.records),
        "omitted": diff.omitted,
        "truncated": diff.truncated,
    }


def _record_to_dict(record: DiffRecord) -> dict[str, object]:
    """Convert DiffRecord to dict."""
    return {
        "path": record.path,
        "before": record.before,
        "after": record.after,
    }

"""Diff accumulator: renders unequal leaves into a bounded list of records.

Rendering of one unequal leaf (left, right, path):
    1. Format both values in FRIENDLY mode.
    2. If both texts are identical, re-format both in EXACT_TYPE mode.
    3. Compose "<path>:\\n\\t-: <before>\\n\\t+: <after>\\n".
    4. Store the block only while stored text is below both caps.

Truncation is a one-way latch: once a cap is reached, later unequal leaves
are tallied but neither rendered nor stored.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from deepeq.domain.model.diff_record import DiffRecord, DiffReport
from deepeq.domain.model.enums import FormatMode, Verdict
from deepeq.domain.model.limits import DiffLimits

if TYPE_CHECKING:
    from deepeq.application.reporters.path_tracker import PathTracker
    from deepeq.domain.model.path import Path
    from deepeq.domain.ports.formatter import ValueFormatter

logger = logging.getLogger(__name__)


class DiffAccumulator:
    """Collects DiffRecords for UNEQUAL verdicts.

    Running totals are monotonic: total_diffs counts every unequal leaf,
    stored_bytes/stored_lines count stored text only.
    """

    def __init__(
        self,
        tracker: PathTracker,
        formatter: ValueFormatter,
        limits: DiffLimits | None = None,
    ) -> None:
        """Initialize accumulator.

        Args:
            tracker: Source of the current path and value pair
            formatter: Value formatter (FRIENDLY / EXACT_TYPE)
            limits: Output caps. Defaults to 4096 bytes / 256 lines.
        """
        self._tracker = tracker
        self._formatter = formatter
        self._limits = limits or DiffLimits()
        self._records: list[DiffRecord] = []
        self._total_diffs = 0
        self._stored_bytes = 0
        self._stored_lines = 0

    @property
    def limits(self) -> DiffLimits:
        return self._limits

    @property
    def total_diffs(self) -> int:
        return self._total_diffs

    @property
    def stored_count(self) -> int:
        return len(self._records)

    @property
    def stored_bytes(self) -> int:
        return self._stored_bytes

    @property
    def stored_lines(self) -> int:
        return self._stored_lines

    @property
    def is_full(self) -> bool:
        """True once either cap is reached (latch closed)."""
        return not self._limits.allows(self._stored_bytes, self._stored_lines)

    def on_report(self, verdict: Verdict) -> None:
        """Handle the verdict for the current leaf. Only UNEQUAL does work."""
        if verdict is not Verdict.UNEQUAL:
            return

        self._total_diffs += 1
        if self.is_full:
            return

        pair = self._tracker.current_value_pair()
        record = self.render(pair.left, pair.right, self._tracker.current_path())
        self._records.append(record)
        self._stored_bytes += record.byte_size
        self._stored_lines += record.line_count

        if self.is_full:
            logger.debug(
                "diff output capped after %d records (%d bytes, %d lines)",
                len(self._records),
                self._stored_bytes,
                self._stored_lines,
            )

    def render(self, left: object, right: object, path: Path) -> DiffRecord:
        """Render one unequal leaf. Pure: does not touch running totals."""
        before = self._formatter(left, FormatMode.FRIENDLY)
        after = self._formatter(right, FormatMode.FRIENDLY)
        if before == after:
            # Identical text hides the difference: disambiguate by type.
            before = self._formatter(left, FormatMode.EXACT_TYPE)
            after = self._formatter(right, FormatMode.EXACT_TYPE)
        return DiffRecord(path=path.format(), before=before, after=after)

    def snapshot(self) -> DiffReport:
        """Immutable view of the current state."""
        return DiffReport(records=tuple(self._records), total_diffs=self._total_diffs)

    def final_report(self) -> str:
        """Stored blocks in traversal order, plus an omission suffix if truncated.

        Idempotent. Before the traversal ends, yields the report so far.
        """
        return self.snapshot().render()

"""Tests for DiffAccumulator.

Tests:
- Only UNEQUAL verdicts produce records
- Two-pass rendering: EXACT_TYPE fallback when FRIENDLY texts collide
- Truncation latch on byte and line caps
- Tally always counts, storing is conditional
- final_report() shape and idempotence
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from deepeq.application.reporters.diff_accumulator import DiffAccumulator
from deepeq.application.reporters.path_tracker import PathTracker
from deepeq.domain.model.enums import FormatMode, Verdict
from deepeq.domain.model.limits import DiffLimits
from deepeq.domain.model.path import FieldStep, Path, RootStep, SliceIndexStep
from deepeq.infrastructure.formatting import format_value

if TYPE_CHECKING:
    from collections.abc import Iterator


class RecordingFormatter:
    """Formatter stub recording every call."""

    def __init__(self, friendly: str | None = None) -> None:
        self.calls: list[tuple[object, FormatMode]] = []
        self._friendly = friendly

    def __call__(self, value: object, mode: FormatMode) -> str:
        self.calls.append((value, mode))
        if mode is FormatMode.FRIENDLY and self._friendly is not None:
            return self._friendly
        return f"{mode.name}:{value}"


@pytest.fixture
def tracker() -> Iterator[PathTracker]:
    tracker = PathTracker()
    tracker.push_step(RootStep("Person"), None, None)
    tracker.push_step(FieldStep("age"), 30, 31)
    yield tracker
    tracker.pop_step()
    tracker.pop_step()


class TestOnReport:
    """Tests for on_report() verdict handling."""

    def test_unequal_stores_record(self, tracker: PathTracker) -> None:
        accumulator = DiffAccumulator(tracker, format_value)
        accumulator.on_report(Verdict.UNEQUAL)

        assert accumulator.total_diffs == 1
        assert accumulator.stored_count == 1
        assert accumulator.final_report() == "{Person}.age:\n\t-: 30\n\t+: 31\n"

    @pytest.mark.parametrize("verdict", [Verdict.EQUAL, Verdict.IGNORE])
    def test_equal_and_ignore_are_noops(self, tracker: PathTracker, verdict: Verdict) -> None:
        formatter = RecordingFormatter()
        accumulator = DiffAccumulator(tracker, formatter)
        accumulator.on_report(verdict)

        assert accumulator.total_diffs == 0
        assert accumulator.final_report() == ""
        assert formatter.calls == []

    def test_running_totals_match_stored_text(self, tracker: PathTracker) -> None:
        accumulator = DiffAccumulator(tracker, format_value)
        accumulator.on_report(Verdict.UNEQUAL)
        accumulator.on_report(Verdict.UNEQUAL)

        text = accumulator.final_report()
        assert accumulator.stored_bytes == len(text.encode("utf-8"))
        assert accumulator.stored_lines == text.count("\n") == 6


class TestRender:
    """Tests for two-pass rendering."""

    def test_friendly_only_when_texts_differ(self) -> None:
        formatter = RecordingFormatter()
        accumulator = DiffAccumulator(PathTracker(), formatter)
        record = accumulator.render(1, 2, Path((RootStep("int"),)))

        assert [mode for _, mode in formatter.calls] == [FormatMode.FRIENDLY, FormatMode.FRIENDLY]
        assert record.before == "FRIENDLY:1"
        assert record.after == "FRIENDLY:2"
        assert record.path == "{int}"

    def test_exact_type_fallback_when_texts_collide(self) -> None:
        formatter = RecordingFormatter(friendly="boom")
        accumulator = DiffAccumulator(PathTracker(), formatter)
        record = accumulator.render("a", "b", Path((RootStep("T"),)))

        assert [mode for _, mode in formatter.calls] == [
            FormatMode.FRIENDLY,
            FormatMode.FRIENDLY,
            FormatMode.EXACT_TYPE,
            FormatMode.EXACT_TYPE,
        ]
        assert record.before == "EXACT_TYPE:a"
        assert record.after == "EXACT_TYPE:b"

    def test_distinct_errors_with_same_message(self) -> None:
        accumulator = DiffAccumulator(PathTracker(), format_value)
        path = Path((RootStep("E"),))
        record = accumulator.render(ValueError("boom"), RuntimeError("boom"), path)

        assert record.before != record.after
        assert "ValueError" in record.before
        assert "RuntimeError" in record.after

    def test_render_does_not_touch_totals(self) -> None:
        accumulator = DiffAccumulator(PathTracker(), format_value)
        accumulator.render(1, 2, Path((RootStep("int"),)))
        assert accumulator.total_diffs == 0
        assert accumulator.stored_count == 0


class TestTruncation:
    """Tests for the truncation latch."""

    @staticmethod
    def _report_elements(accumulator: DiffAccumulator, tracker: PathTracker, count: int) -> None:
        tracker.push_step(RootStep("list"), None, None)
        for i in range(count):
            tracker.push_step(SliceIndexStep(i), i, i + 1)
            accumulator.on_report(Verdict.UNEQUAL)
            tracker.pop_step()
        tracker.pop_step()

    def test_line_cap_latches(self) -> None:
        tracker = PathTracker()
        accumulator = DiffAccumulator(tracker, format_value, DiffLimits(max_lines=6))
        self._report_elements(accumulator, tracker, 5)

        assert accumulator.total_diffs == 5
        assert accumulator.stored_count == 2
        assert accumulator.is_full is True
        assert accumulator.final_report().endswith("... 3 more differences ...")

    def test_byte_cap_latches(self) -> None:
        tracker = PathTracker()
        accumulator = DiffAccumulator(tracker, format_value, DiffLimits(max_bytes=1))
        self._report_elements(accumulator, tracker, 4)

        assert accumulator.stored_count == 1
        assert accumulator.stored_bytes > 1
        assert accumulator.final_report().endswith("... 3 more differences ...")

    def test_no_rendering_after_latch(self) -> None:
        tracker = PathTracker()
        formatter = RecordingFormatter()
        accumulator = DiffAccumulator(tracker, formatter, DiffLimits(max_lines=1))
        self._report_elements(accumulator, tracker, 3)

        assert len(formatter.calls) == 2
        assert accumulator.total_diffs == 3

    def test_default_caps_bound_stored_text(self) -> None:
        tracker = PathTracker()
        accumulator = DiffAccumulator(tracker, format_value)
        self._report_elements(accumulator, tracker, 1000)

        stored = accumulator.stored_count
        last_block = accumulator.snapshot().records[-1]
        assert accumulator.stored_bytes - last_block.byte_size < 4096
        assert accumulator.stored_lines - last_block.line_count < 256
        assert accumulator.final_report().endswith(f"... {1000 - stored} more differences ...")

    def test_stored_prefix_is_traversal_order(self) -> None:
        tracker = PathTracker()
        accumulator = DiffAccumulator(tracker, format_value, DiffLimits(max_lines=6))
        self._report_elements(accumulator, tracker, 5)

        paths = [record.path for record in accumulator.snapshot().records]
        assert paths == ["{list}[0]", "{list}[1]"]


class TestFinalReport:
    """Tests for final_report()."""

    def test_empty_without_unequal(self) -> None:
        accumulator = DiffAccumulator(PathTracker(), format_value)
        assert accumulator.final_report() == ""

    def test_idempotent(self, tracker: PathTracker) -> None:
        accumulator = DiffAccumulator(tracker, format_value)
        accumulator.on_report(Verdict.UNEQUAL)
        assert accumulator.final_report() == accumulator.final_report()

    def test_partial_report_mid_traversal(self, tracker: PathTracker) -> None:
        accumulator = DiffAccumulator(tracker, format_value)
        accumulator.on_report(Verdict.UNEQUAL)
        partial = accumulator.final_report()
        accumulator.on_report(Verdict.UNEQUAL)
        assert accumulator.final_report().startswith(partial)

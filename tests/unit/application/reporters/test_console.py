"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- ConsoleReporter report() output format
- Truncation line and header totals
- Plain vs styled output
"""

import pytest

from deepeq.application.reporters.console import ConsoleConfig, ConsoleReporter
from tests.factories import make_record, make_report


def _plain() -> ConsoleReporter:
    return ConsoleReporter(ConsoleConfig(color=False))


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ConsoleConfig()
        assert config.color is True
        assert config.width == 120
        assert config.show_header is True

    def test_custom_values(self) -> None:
        """Custom values can be set."""
        config = ConsoleConfig(color=False, width=80, show_header=False)
        assert config.color is False
        assert config.width == 80
        assert config.show_header is False

    @pytest.mark.parametrize("width", [0, -1])
    def test_non_positive_width_raises(self, width: int) -> None:
        """FAIL-FIRST: width must be positive."""
        with pytest.raises(ValueError, match="width must be > 0"):
            ConsoleConfig(width=width)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        """report() contains DEEP EQUALITY DIFF header."""
        output = _plain().report(make_report((make_record(),)))
        assert "DEEP EQUALITY DIFF" in output

    def test_identical_report(self) -> None:
        """Empty report says there are no differences."""
        output = _plain().report(make_report())
        assert "No differences" in output
        assert "Differences:" not in output

    def test_record_lines(self) -> None:
        """Each record renders path, "-" line and "+" line."""
        output = _plain().report(make_report((make_record(),)))
        assert "{Person}.age:" in output
        assert "-: 30" in output
        assert "+: 31" in output

    def test_totals_line(self) -> None:
        """Header shows total, shown and omitted counts."""
        output = _plain().report(make_report((make_record(),), total_diffs=3))
        assert "Differences: 3 (shown: 1, omitted: 2)" in output

    def test_truncation_line(self) -> None:
        """Truncated report ends with the omitted count."""
        output = _plain().report(make_report((make_record(),), total_diffs=3))
        assert "... 2 more differences ..." in output

    def test_no_truncation_line_when_complete(self) -> None:
        output = _plain().report(make_report((make_record(),)))
        assert "more differences" not in output

    def test_records_in_order(self) -> None:
        records = (
            make_record(path="{Order}.id", before="1", after="2"),
            make_record(path="{Order}.owner.name", before="'Ann'", after="'Bob'"),
        )
        output = _plain().report(make_report(records))
        assert output.index("{Order}.id") < output.index("{Order}.owner.name")

    def test_brackets_in_values_not_markup(self) -> None:
        """Values that look like rich markup are printed literally."""
        record = make_record(path="{dict}['k']", before="[red]", after="[0]")
        output = _plain().report(make_report((record,)))
        assert "{dict}['k']:" in output
        assert "-: [red]" in output
        assert "+: [0]" in output

    def test_without_header(self) -> None:
        output = ConsoleReporter(ConsoleConfig(color=False, show_header=False)).report(
            make_report((make_record(),))
        )
        assert "DEEP EQUALITY DIFF" not in output
        assert output.startswith("{Person}.age:")

    def test_plain_output_has_no_ansi(self) -> None:
        output = _plain().report(make_report((make_record(),)))
        assert "\x1b[" not in output

    def test_color_output_has_ansi(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERM", "xterm-256color")
        monkeypatch.delenv("NO_COLOR", raising=False)
        output = ConsoleReporter().report(make_report((make_record(),)))
        assert "\x1b[" in output

    def test_returns_str(self) -> None:
        """report() returns str, never prints."""
        assert isinstance(_plain().report(make_report()), str)

"""Console reporter: DiffReport → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from deepeq.domain.model.diff_record import DiffRecord, DiffReport


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        color: Emit ANSI styles. False for plain text (logs, CI files).
        width: Console width used for the header rule (must be > 0).
        show_header: Show title rule and totals line.
    """

    color: bool = True
    width: int = 120
    show_header: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs "-" lines in red, "+" lines in green.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, diff: DiffReport) -> str:
        """Format diff report as rich formatted string.

        Args:
            diff: Diff report to format.

        Returns:
            Formatted string, styled when config.color is set.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

        if self._config.show_header:
            self._render_header(console, diff)

        for record in diff.records:
            self._render_record(console, record)

        if diff.truncated:
            console.print(f"[dim]... {diff.omitted} more differences ...[/dim]")

        return output.getvalue()

    def _render_header(self, console: Console, diff: DiffReport) -> None:
        """Render title and totals."""
        console.rule("[bold]DEEP EQUALITY DIFF[/bold]")
        if diff.identical:
            console.print("[bold green]No differences[/bold green]")
            return
        console.print(
            f"[bold]Differences:[/bold] {diff.total_diffs} "
            f"(shown: {len(diff.records)}, omitted: {diff.omitted})"
        )
        console.print()

    def _render_record(self, console: Console, record: DiffRecord) -> None:
        """Render one record: path, then before/after lines."""
        console.print(f"[cyan]{escape(record.path)}[/cyan]:")
        console.print(f"  [red]-: {escape(record.before)}[/red]")
        console.print(f"  [green]+: {escape(record.after)}[/green]")

"""Diff record (one unequal leaf) and diff report (all stored records + tally)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DiffRecord:
    """Rendering of one unequal leaf.

    Attributes:
        path: Formatted path to the leaf
        before: Rendered left value
        after: Rendered right value
    """

    path: str
    before: str
    after: str

    @property
    def text(self) -> str:
        """Fixed-shape block: path line, then "-:" and "+:" lines."""
        return f"{self.path}:\n\t-: {self.before}\n\t+: {self.after}\n"

    @property
    def byte_size(self) -> int:
        """UTF-8 length of text."""
        return len(self.text.encode("utf-8"))

    @property
    def line_count(self) -> int:
        """Number of newline characters in text."""
        return self.text.count("\n")


@dataclass(frozen=True, slots=True)
class DiffReport:
    """Snapshot of accumulated differences.

    Attributes:
        records: Stored records in traversal order
        total_diffs: Count of all unequal leaves, stored or not (>= len(records))
    """

    records: tuple[DiffRecord, ...]
    total_diffs: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.total_diffs < len(self.records):
            raise ValueError(
                f"total_diffs ({self.total_diffs}) must be >= stored records ({len(self.records)})"
            )

    @classmethod
    def empty(cls) -> DiffReport:
        """Create report with no differences."""
        return cls(records=(), total_diffs=0)

    @property
    def omitted(self) -> int:
        """Unequal leaves counted but not stored."""
        return self.total_diffs - len(self.records)

    @property
    def truncated(self) -> bool:
        return self.omitted > 0

    @property
    def identical(self) -> bool:
        return self.total_diffs == 0

    def render(self) -> str:
        """Concatenate stored blocks, with an omission suffix when truncated."""
        text = "".join(record.text for record in self.records)
        if not self.truncated:
            return text
        return f"{text}... {self.omitted} more differences ..."

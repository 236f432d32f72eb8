"""Default reporter: PathTracker + DiffAccumulator behind ReporterProtocol.

Also enforces the per-node verdict state machine:
    NO_VERDICT → REPORTED     (report on a leaf, once)
    NO_VERDICT → DESCENDED    (push of a child)
Any other transition is a protocol violation and raises immediately.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from deepeq.application.reporters.diff_accumulator import DiffAccumulator
from deepeq.application.reporters.path_tracker import PathTracker
from deepeq.domain.exceptions import (
    DuplicateVerdictError,
    EmptyPathError,
    InvalidVerdictError,
    NonLeafReportError,
)
from deepeq.domain.model.enums import Verdict
from deepeq.infrastructure.formatting import format_value

if TYPE_CHECKING:
    from deepeq.domain.model.diff_record import DiffReport
    from deepeq.domain.model.limits import DiffLimits
    from deepeq.domain.model.path import Path, Step
    from deepeq.domain.ports.formatter import ValueFormatter


class _NodeState(Enum):
    NO_VERDICT = auto()
    DESCENDED = auto()
    REPORTED = auto()


class DefaultReporter:
    """Reporter producing a bounded, human-readable diff.

    One instance per comparison: state is never reset.

    Contracts:
        - FAIL-FIRST: ProtocolViolationError on unbalanced or misplaced calls
        - Only UNEQUAL verdicts produce output
    """

    def __init__(
        self,
        *,
        limits: DiffLimits | None = None,
        formatter: ValueFormatter | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            limits: Output caps. Defaults to 4096 bytes / 256 lines.
            formatter: Value formatter. Defaults to format_value.
        """
        self._tracker = PathTracker()
        self._accumulator = DiffAccumulator(
            self._tracker,
            formatter or format_value,
            limits,
        )
        self._states: list[_NodeState] = []

    @property
    def depth(self) -> int:
        return self._tracker.depth

    def push_step(self, step: Step, left: object, right: object) -> None:
        """Descend one step.

        Raises:
            NonLeafReportError: Parent node already has a verdict.
        """
        if self._states:
            if self._states[-1] is _NodeState.REPORTED:
                raise NonLeafReportError(len(self._states))
            self._states[-1] = _NodeState.DESCENDED
        self._tracker.push_step(step, left, right)
        self._states.append(_NodeState.NO_VERDICT)

    def report(self, verdict: Verdict) -> None:
        """Report the verdict for the current leaf.

        Raises:
            InvalidVerdictError: verdict is not a Verdict.
            EmptyPathError: No step pushed.
            DuplicateVerdictError: Leaf already has a verdict.
            NonLeafReportError: Current node has children.
        """
        if not isinstance(verdict, Verdict):
            raise InvalidVerdictError(type(verdict))
        if not self._states:
            raise EmptyPathError("report()")

        match self._states[-1]:
            case _NodeState.REPORTED:
                raise DuplicateVerdictError(len(self._states))
            case _NodeState.DESCENDED:
                raise NonLeafReportError(len(self._states))
            case _NodeState.NO_VERDICT:
                self._states[-1] = _NodeState.REPORTED

        self._accumulator.on_report(verdict)

    def pop_step(self) -> None:
        """Ascend to the parent node.

        Raises:
            EmptyPathPopError: Depth is 0.
        """
        self._tracker.pop_step()
        self._states.pop()

    def current_path(self) -> Path:
        return self._tracker.current_path()

    def snapshot(self) -> DiffReport:
        return self._accumulator.snapshot()

    def final_report(self) -> str:
        """Rendered diff. Empty string when no leaf was unequal."""
        return self._accumulator.final_report()

    def __str__(self) -> str:
        return self.final_report()

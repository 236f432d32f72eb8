"""Path tracker: live stack mirroring the traversal engine's descent."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deepeq.domain.exceptions import EmptyPathError, EmptyPathPopError
from deepeq.domain.model.path import Path
from deepeq.domain.model.value_pair import ValuePair

if TYPE_CHECKING:
    from deepeq.domain.model.path import Step


class PathTracker:
    """Steps from the root plus the value pair at each depth.

    Two parallel stacks, always the same length (= depth).
    Value pairs are dropped on pop, never retained.

    Contracts:
        - push_step() always succeeds
        - FAIL-FIRST: EmptyPathPopError on pop at depth 0
    """

    def __init__(self) -> None:
        self._steps: list[Step] = []
        self._values: list[ValuePair] = []

    @property
    def depth(self) -> int:
        """Number of steps currently pushed."""
        return len(self._steps)

    def push_step(self, step: Step, left: object, right: object) -> None:
        """Append step and its value pair."""
        self._steps.append(step)
        self._values.append(ValuePair(left, right))

    def pop_step(self) -> None:
        """Remove the deepest step and value pair.

        Raises:
            EmptyPathPopError: Depth is 0.
        """
        if not self._steps:
            raise EmptyPathPopError
        self._steps.pop()
        self._values.pop()

    def current_path(self) -> Path:
        """Immutable snapshot of steps from the root to the current depth."""
        return Path(tuple(self._steps))

    def current_value_pair(self) -> ValuePair:
        """Value pair at the deepest depth.

        Raises:
            EmptyPathError: Depth is 0.
        """
        if not self._values:
            raise EmptyPathError("current_value_pair()")
        return self._values[-1]

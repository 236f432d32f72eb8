"""Counting reporter: tallies verdicts, renders nothing. Used by equal()."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deepeq.domain.exceptions import EmptyPathError, EmptyPathPopError
from deepeq.domain.model.enums import Verdict

if TYPE_CHECKING:
    from deepeq.domain.model.path import Step


class CountingReporter:
    """Counts verdicts by kind. Keeps only the depth, no values."""

    def __init__(self) -> None:
        self._depth = 0
        self._counts: dict[Verdict, int] = dict.fromkeys(Verdict, 0)

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def unequal(self) -> int:
        return self._counts[Verdict.UNEQUAL]

    def count(self, verdict: Verdict) -> int:
        return self._counts[verdict]

    def push_step(self, step: Step, left: object, right: object) -> None:
        self._depth += 1

    def report(self, verdict: Verdict) -> None:
        if self._depth == 0:
            raise EmptyPathError("report()")
        self._counts[verdict] += 1

    def pop_step(self) -> None:
        if self._depth == 0:
            raise EmptyPathPopError
        self._depth -= 1

"""Comparer: reference traversal engine driving the push/report/pop protocol.

Rules per node, first match wins:
    one side MISSING          → leaf UNEQUAL
    ignore predicate matches  → leaf IGNORE
    transformer applies       → descend into TransformStep
    left is right             → leaf EQUAL
    type(left) != type(right) → leaf UNEQUAL
    depth > max_depth         → leaf ==
    pair already on descent   → leaf EQUAL (cycle)
    dataclass instance        → descend per compared field (FieldStep)
    Mapping                   → descend per key (MapIndexStep), left keys first
    list / tuple              → descend per index (SliceIndexStep)
    anything else             → leaf ==
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, TypeAlias

from deepeq.application.reporters.counting import CountingReporter
from deepeq.application.reporters.default import DefaultReporter
from deepeq.domain.model.enums import Verdict
from deepeq.domain.model.limits import DiffLimits
from deepeq.domain.model.path import (
    FieldStep,
    MapIndexStep,
    Path,
    RootStep,
    SliceIndexStep,
    TransformStep,
)
from deepeq.domain.model.value_pair import MISSING
from deepeq.infrastructure.formatting import format_value

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from deepeq.domain.model.diff_record import DiffReport
    from deepeq.domain.model.options import IgnorePredicate, Transformer
    from deepeq.domain.model.path import Step
    from deepeq.domain.ports.formatter import ValueFormatter
    from deepeq.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256

_Child: TypeAlias = "tuple[Step, object, object]"


@dataclass(frozen=True, slots=True)
class ComparerConfig:
    """Comparison options.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        ignore: Predicates (path, left, right) -> bool. Matching nodes are IGNORE leaves.
        transformers: Value transformers, tried in order.
        max_depth: Deeper nodes are compared with == as leaves (must be > 0).
        limits: Output caps for diff().
        formatter: Value formatter for diff().
    """

    ignore: tuple[IgnorePredicate, ...] = ()
    transformers: tuple[Transformer, ...] = ()
    max_depth: int = DEFAULT_MAX_DEPTH
    limits: DiffLimits = field(default_factory=DiffLimits)
    formatter: ValueFormatter = format_value

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be > 0, got {self.max_depth}")
        for predicate in self.ignore:
            if not callable(predicate):
                msg = f"ignore predicates must be callable, got {type(predicate).__name__}"
                raise TypeError(msg)


class Comparer:
    """Deep structural comparison of Python values.

    Stateless between calls: every compare() uses a fresh walk, every diff()
    a fresh reporter.
    """

    def __init__(self, config: ComparerConfig | None = None) -> None:
        """Initialize comparer.

        Args:
            config: Comparison options. Uses defaults if None.
        """
        self._config = config or ComparerConfig()

    @property
    def config(self) -> ComparerConfig:
        return self._config

    def compare(self, left: object, right: object, reporter: ReporterProtocol) -> None:
        """Walk both values, driving reporter with balanced push/report/pop calls.

        Args:
            left: Left ("before") value
            right: Right ("after") value
            reporter: Any ReporterProtocol implementation
        """
        _Walk(self._config, reporter).run(left, right)

    def diff_report(self, left: object, right: object) -> DiffReport:
        """Compare and return the structured report."""
        reporter = DefaultReporter(limits=self._config.limits, formatter=self._config.formatter)
        self.compare(left, right, reporter)
        report = reporter.snapshot()
        logger.debug(
            "compared %s and %s: %d differences (%d shown)",
            type(left).__qualname__,
            type(right).__qualname__,
            report.total_diffs,
            len(report.records),
        )
        return report

    def diff(self, left: object, right: object) -> str:
        """Compare and return the rendered report. Empty string if equal."""
        return self.diff_report(left, right).render()

    def equal(self, left: object, right: object) -> bool:
        """True if no leaf is UNEQUAL."""
        reporter = CountingReporter()
        self.compare(left, right, reporter)
        return reporter.unequal == 0

class _Walk:
    """One traversal over an explicit work stack.

    Nesting depth costs no Python frames: every node is one enter task and,
    for interior nodes, one exit task scheduled below its children.
    Holds the path for ignore predicates and the cycle guard.
    """

    def __init__(self, config: ComparerConfig, reporter: ReporterProtocol) -> None:
        self._config = config
        self._reporter = reporter
        self._steps: list[Step] = []
        self._active: set[tuple[int, int]] = set()
        self._pending: list[Callable[[], None]] = []
        self._depth_limited = False

    def run(self, left: object, right: object) -> None:
        root = left if left is not MISSING else right
        self._pending.append(partial(self._enter, RootStep(type(root).__qualname__), left, right))
        while self._pending:
            self._pending.pop()()

    def _enter(self, step: Step, left: object, right: object) -> None:
        self._reporter.push_step(step, left, right)
        self._steps.append(step)
        self._compare(left, right)

    def _exit(self, key: tuple[int, int] | None) -> None:
        if key is not None:
            self._active.discard(key)
        self._steps.pop()
        self._reporter.pop_step()

    def _schedule(self, children: list[_Child], key: tuple[int, int] | None = None) -> None:
        """Queue children in traversal order, then the parent's exit."""
        self._pending.append(partial(self._exit, key))
        for step, left, right in reversed(children):
            self._pending.append(partial(self._enter, step, left, right))

    def _leaf(self, verdict: Verdict) -> None:
        self._reporter.report(verdict)
        self._exit(None)

    def _compare(self, left: object, right: object) -> None:
        if left is MISSING or right is MISSING:
            self._leaf(Verdict.UNEQUAL)
            return

        if self._config.ignore and self._is_ignored(left, right):
            self._leaf(Verdict.IGNORE)
            return

        transformer = self._find_transformer(left, right)
        if transformer is not None:
            step = TransformStep(transformer.name)
            self._schedule([(step, transformer.func(left), transformer.func(right))])
            return

        if left is right:
            self._leaf(Verdict.EQUAL)
            return

        if type(left) is not type(right):
            self._leaf(Verdict.UNEQUAL)
            return

        if len(self._steps) > self._config.max_depth:
            if not self._depth_limited:
                self._depth_limited = True
                logger.debug("max_depth %d exceeded, comparing with ==", self._config.max_depth)
            self._compare_leaf(left, right)
            return

        key = (id(left), id(right))
        if key in self._active:
            self._leaf(Verdict.EQUAL)
            return

        children = _children(left, right)
        if children is None:
            self._compare_leaf(left, right)
        elif not children:
            self._leaf(Verdict.EQUAL)
        else:
            self._active.add(key)
            self._schedule(children, key)

    def _compare_leaf(self, left: object, right: object) -> None:
        self._leaf(Verdict.EQUAL if left == right else Verdict.UNEQUAL)

    def _is_ignored(self, left: object, right: object) -> bool:
        path = Path(tuple(self._steps))
        return any(predicate(path, left, right) for predicate in self._config.ignore)

    def _find_transformer(self, left: object, right: object) -> Transformer | None:
        if not self._config.transformers:
            return None
        last = self._steps[-1] if self._steps else None
        for transformer in self._config.transformers:
            if isinstance(last, TransformStep) and last.name == transformer.name:
                continue
            if transformer.applies(left) and transformer.applies(right):
                return transformer
        return None


def _children(left: object, right: object) -> list[_Child] | None:
    """Child pairs of a composite node, None for values compared as leaves."""
    if dataclasses.is_dataclass(left) and not isinstance(left, type):
        return [
            (FieldStep(f.name), getattr(left, f.name), getattr(right, f.name))
            for f in dataclasses.fields(left)
            if f.compare
        ]

    match left, right:
        case Mapping(), Mapping():
            return _mapping_children(left, right)
        case list() | tuple(), list() | tuple():
            return _sequence_children(left, right)
        case _:
            return None


def _mapping_children(
    left: Mapping[object, object],
    right: Mapping[object, object],
) -> list[_Child]:
    keys = [*left, *(k for k in right if k not in left)]
    return [
        (
            MapIndexStep(k),
            left[k] if k in left else MISSING,
            right[k] if k in right else MISSING,
        )
        for k in keys
    ]


def _sequence_children(left: Sequence[object], right: Sequence[object]) -> list[_Child]:
    return [
        (
            SliceIndexStep(i),
            left[i] if i < len(left) else MISSING,
            right[i] if i < len(right) else MISSING,
        )
        for i in range(max(len(left), len(right)))
    ]

"""Reporter protocol: the contract between a traversal engine and a reporter.

The engine calls, strictly nested, for every node of the comparison tree:
    push_step  (going deeper, once per node)
    report     (leaf nodes only, exactly once)
    pop_step   (returning, once per push)
One push/pop pair brackets the whole comparison, so a root leaf is still
reported inside it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from deepeq.domain.model.enums import Verdict
    from deepeq.domain.model.path import Step


class ReporterProtocol(Protocol):
    """Contract for reporters driven by a traversal engine.

    The reporter is traversal-strategy-agnostic: recursive calls or an explicit
    work stack are equally valid as long as calls stay balanced.

    Example:
        class CountingReporter:
            def __init__(self) -> None:
                self.unequal = 0

            def push_step(self, step: Step, left: object, right: object) -> None:
                pass

            def report(self, verdict: Verdict) -> None:
                if verdict is Verdict.UNEQUAL:
                    self.unequal += 1

            def pop_step(self) -> None:
                pass
    """

    def push_step(self, step: Step, left: object, right: object) -> None:
        """Descend one step.

        Args:
            step: Step taken from the parent node
            left: Left sub-value after the step (may be MISSING)
            right: Right sub-value after the step (may be MISSING)
        """
        ...

    def report(self, verdict: Verdict) -> None:
        """Report the verdict for the current leaf node.

        Args:
            verdict: Exactly one of EQUAL, UNEQUAL, IGNORE
        """
        ...

    def pop_step(self) -> None:
        """Ascend back to the parent node."""
        ...

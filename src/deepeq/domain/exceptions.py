"""Domain exceptions: all public errors of deepeq.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Infrastructure use these, not define their own public exceptions.

Two families:
    ProtocolViolationError: the driving traversal engine broke the
        push/report/pop contract. Programming error, never absorbed.
    DeepEqualityError: compared values differ (assert_equal).
"""

from __future__ import annotations


class DeepEqError(Exception):
    """Base for all deepeq error exceptions.

    Allows: except DeepEqError to catch all library errors.
    """


class ProtocolViolationError(DeepEqError, AssertionError):
    """Traversal engine violated the push/report/pop protocol.

    Inherits AssertionError: a broken invariant in the caller, not bad input.
    """


class EmptyPathPopError(ProtocolViolationError):
    """pop_step() called with depth 0.

    Every pop must match an earlier push.
    """

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("pop_step() called with empty path (depth 0)")


class EmptyPathError(ProtocolViolationError):
    """Current node requested with depth 0.

    Raised when a verdict or value pair is requested outside any push/pop pair.

    Attributes:
        operation: Operation that required a current node.
    """

    def __init__(self, operation: str) -> None:
        """Initialize with offending operation name."""
        self.operation = operation
        super().__init__(f"{operation} requires a pushed step, path is empty")


class DuplicateVerdictError(ProtocolViolationError):
    """Second verdict reported for the same leaf.

    Attributes:
        depth: Depth of the leaf.
    """

    def __init__(self, depth: int) -> None:
        """Initialize with leaf depth."""
        self.depth = depth
        super().__init__(f"verdict already reported for leaf at depth {depth}")


class NonLeafReportError(ProtocolViolationError):
    """Verdict reported for a node with children, or descent below a reported leaf.

    Attributes:
        depth: Depth of the offending node.
    """

    def __init__(self, depth: int) -> None:
        """Initialize with node depth."""
        self.depth = depth
        super().__init__(f"node at depth {depth} is not a leaf: it has both a verdict and children")


class InvalidVerdictError(DeepEqError, TypeError):
    """report() received something other than a Verdict.

    Inherits TypeError for semantic correctness.

    Attributes:
        got: Actual type received.
    """

    def __init__(self, got: type) -> None:
        """Initialize with actual type."""
        self.got = got
        super().__init__(f"verdict must be Verdict, got {got.__name__}")


class DeepEqualityError(DeepEqError, AssertionError):
    """Values are not deeply equal.

    Raised by assert_equal(). Message is the rendered diff report.

    Attributes:
        report: Rendered diff report (never empty).
    """

    def __init__(self, report: str, msg: str | None = None) -> None:
        """Initialize with rendered report and optional user message."""
        if not report:
            raise ValueError("DeepEqualityError requires a non-empty report")

        self.report = report
        header = msg if msg else "values are not deeply equal"
        super().__init__(f"{header}:\n{report}")

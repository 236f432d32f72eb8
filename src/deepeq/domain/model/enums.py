"""Domain enumerations."""

from enum import Enum, auto


class Verdict(Enum):
    """Traversal engine judgment for one leaf node.

    Exactly one verdict per report() call. Combinations are unrepresentable.
    """

    EQUAL = auto()
    UNEQUAL = auto()
    IGNORE = auto()


class FormatMode(Enum):
    """Value rendering mode requested from the formatter."""

    FRIENDLY = auto()  # prefer custom __str__
    EXACT_TYPE = auto()  # annotate with concrete type

"""Value pair compared at one traversal depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, final


@final
class _Missing:
    """Marker for a value absent on one side (missing key, extra element)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


@dataclass(frozen=True, slots=True)
class ValuePair:
    """Left ("before") and right ("after") sub-values of the current node.

    Borrowed from the traversal engine: valid between the matching push and pop.
    Either side may be MISSING.
    """

    left: object
    right: object

    @property
    def has_missing(self) -> bool:
        """True if either side is absent."""
        return self.left is MISSING or self.right is MISSING

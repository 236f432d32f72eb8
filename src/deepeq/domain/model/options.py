"""Comparison options consumed by the traversal engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable

    from deepeq.domain.model.path import Path

IgnorePredicate: TypeAlias = "Callable[[Path, object, object], bool]"


@dataclass(frozen=True, slots=True)
class Transformer:
    """Replace a pair of values by a derived pair before comparing.

    Applied when both values satisfy applies(). Never re-applied directly
    to its own output.

    Attributes:
        name: Name shown in paths, e.g. "sorted" (must be an identifier)
        applies: Predicate selecting values to transform
        func: Transformation function
    """

    name: str
    applies: Callable[[object], bool]
    func: Callable[[object], object]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name.isidentifier():
            raise ValueError(f"name must be an identifier, got {self.name!r}")
        if not callable(self.applies):
            raise TypeError(f"applies must be callable, got {type(self.applies).__name__}")
        if not callable(self.func):
            raise TypeError(f"func must be callable, got {type(self.func).__name__}")

"""Path value objects: one traversal hop (Step) and the root-to-node sequence (Path).

Steps are supplied by the traversal engine. The reporter treats them as opaque:
str(step) is the step fragment, joined in order to render the path.
TransformStep is the only step with structure: it wraps the path so far.

Example:
    Path((RootStep("Person"), FieldStep("Age"))).format() == "{Person}.Age"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator


class Step(Protocol):
    """Contract for one traversal hop.

    Any immutable object whose str() is the path fragment satisfies it.
    """

    def __str__(self) -> str:
        """Path fragment for this step."""
        ...


@dataclass(frozen=True, slots=True)
class RootStep:
    """Operation-less step for the root values.

    Attributes:
        type_name: Type name of the root value (must not be empty)
    """

    type_name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type_name:
            raise ValueError("type_name must not be empty")

    def __str__(self) -> str:
        return f"{{{self.type_name}}}"


@dataclass(frozen=True, slots=True)
class FieldStep:
    """Attribute or dataclass field access.

    Attributes:
        name: Field name (must not be empty)
    """

    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True, slots=True)
class MapIndexStep:
    """Mapping key lookup.

    Attributes:
        key: Mapping key, rendered with repr()
    """

    key: object

    def __str__(self) -> str:
        return f"[{self.key!r}]"


@dataclass(frozen=True, slots=True)
class SliceIndexStep:
    """Sequence element access.

    Attributes:
        index: Index on the left side (>= 0)
        other_index: Index on the right side when it differs from index
    """

    index: int
    other_index: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")
        if self.other_index is not None and self.other_index < 0:
            raise ValueError(f"other_index must be >= 0, got {self.other_index}")

    def __str__(self) -> str:
        if self.other_index is None or self.other_index == self.index:
            return f"[{self.index}]"
        return f"[{self.index}->{self.other_index}]"


@dataclass(frozen=True, slots=True)
class TypeAssertionStep:
    """Narrowing of a value to a concrete type.

    Attributes:
        type_name: Target type name (must not be empty)
    """

    type_name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type_name:
            raise ValueError("type_name must not be empty")

    def __str__(self) -> str:
        return f".({self.type_name})"


@dataclass(frozen=True, slots=True)
class TransformStep:
    """Value transformation applied before comparing.

    Rendered by Path as a call wrapping everything before it.

    Attributes:
        name: Transformer name (must not be empty)
    """

    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

    def __str__(self) -> str:
        return f"{self.name}()"


@dataclass(frozen=True, slots=True)
class Path:
    """Ordered steps from the root to the current node.

    Immutable snapshot: len(path) equals the traversal depth when taken.

    Attributes:
        steps: Steps in traversal order, root first
    """

    steps: tuple[Step, ...] = ()

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> Step:
        return self.steps[index]

    @property
    def last(self) -> Step | None:
        """Deepest step, None for the empty path."""
        return self.steps[-1] if self.steps else None

    def format(self) -> str:
        """Render as a single expression, e.g. "sorted({Order}.items)[0]".

        A TransformStep opens "Name(" before everything rendered so far and
        closes ")" at its position.
        """
        prefixes: list[str] = []
        parts: list[str] = []
        for step in self.steps:
            if isinstance(step, TransformStep):
                prefixes.append(f"{step.name}(")
                parts.append(")")
                continue
            parts.append(str(step))
        return "".join(reversed(prefixes)) + "".join(parts)

    def __str__(self) -> str:
        return self.format()

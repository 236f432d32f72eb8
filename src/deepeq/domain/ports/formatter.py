"""Value formatter protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from deepeq.domain.model.enums import FormatMode


class ValueFormatter(Protocol):
    """Contract for rendering one value to display text.

    Implementations must be deterministic for a given value and mode and must
    never raise: absent (MISSING) or broken values render as sentinel text.
    """

    def __call__(self, value: object, mode: FormatMode) -> str:
        """Render value.

        Args:
            value: Value to render (may be MISSING)
            mode: FRIENDLY or EXACT_TYPE

        Returns:
            Display text
        """
        ...

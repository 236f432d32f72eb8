"""Infrastructure: default adapters for domain ports."""

from deepeq.infrastructure.formatting import (
    DEFAULT_MAX_LENGTH,
    NON_EXISTENT,
    format_value,
    qualified_type_name,
)

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "NON_EXISTENT",
    "format_value",
    "qualified_type_name",
]

"""Application services: traversal engine."""

from deepeq.application.services.comparer import DEFAULT_MAX_DEPTH, Comparer, ComparerConfig

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Comparer",
    "ComparerConfig",
]

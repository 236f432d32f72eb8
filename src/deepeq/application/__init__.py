"""Application layer.

- reporters: traversal observers (DefaultReporter) and diff renderers
- services: reference traversal engine (Comparer)
"""

from deepeq.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    CountingReporter,
    DefaultReporter,
    DiffAccumulator,
    JsonReporter,
    PathTracker,
)
from deepeq.application.services import Comparer, ComparerConfig

__all__ = [
    # Reporters
    "PathTracker",
    "DiffAccumulator",
    "DefaultReporter",
    "CountingReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    # Services
    "Comparer",
    "ComparerConfig",
]

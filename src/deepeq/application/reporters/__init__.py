"""Reporters: traversal observers and diff renderers.

Traversal observers (ReporterProtocol):
    DefaultReporter: bounded human-readable diff
    CountingReporter: verdict counts only

Renderers (DiffReport → str):
    ConsoleReporter: rich styled text
    JsonReporter: machine-readable JSON (stdlib)
"""

from deepeq.application.reporters.console import ConsoleConfig, ConsoleReporter
from deepeq.application.reporters.counting import CountingReporter
from deepeq.application.reporters.default import DefaultReporter
from deepeq.application.reporters.diff_accumulator import DiffAccumulator
from deepeq.application.reporters.json_reporter import JsonReporter
from deepeq.application.reporters.path_tracker import PathTracker

__all__ = [
    "PathTracker",
    "DiffAccumulator",
    "DefaultReporter",
    "CountingReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
]

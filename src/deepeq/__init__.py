"""deepeq - deep structural equality with bounded, human-readable diffs."""

__version__ = "0.1.0"

from deepeq.application.reporters import ConsoleReporter, DefaultReporter, JsonReporter
from deepeq.application.services import Comparer, ComparerConfig
from deepeq.domain.exceptions import DeepEqError, DeepEqualityError, ProtocolViolationError
from deepeq.domain.model import DiffLimits, DiffReport, Transformer, Verdict
from deepeq.presentation.api import assert_equal, diff, diff_report, equal

__all__ = [
    "__version__",
    # API
    "assert_equal",
    "diff",
    "diff_report",
    "equal",
    # Engine and reporters
    "Comparer",
    "ComparerConfig",
    "DefaultReporter",
    "ConsoleReporter",
    "JsonReporter",
    # Model
    "DiffLimits",
    "DiffReport",
    "Transformer",
    "Verdict",
    # Errors
    "DeepEqError",
    "DeepEqualityError",
    "ProtocolViolationError",
]

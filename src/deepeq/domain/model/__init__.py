"""Domain model: immutable value objects for traversal paths and diffs."""

from deepeq.domain.model.diff_record import DiffRecord, DiffReport
from deepeq.domain.model.enums import FormatMode, Verdict
from deepeq.domain.model.limits import DEFAULT_MAX_BYTES, DEFAULT_MAX_LINES, DiffLimits
from deepeq.domain.model.options import IgnorePredicate, Transformer
from deepeq.domain.model.path import (
    FieldStep,
    MapIndexStep,
    Path,
    RootStep,
    SliceIndexStep,
    Step,
    TransformStep,
    TypeAssertionStep,
)
from deepeq.domain.model.value_pair import MISSING, ValuePair

__all__ = [
    # Verdicts and modes
    "Verdict",
    "FormatMode",
    # Path
    "Step",
    "RootStep",
    "FieldStep",
    "MapIndexStep",
    "SliceIndexStep",
    "TypeAssertionStep",
    "TransformStep",
    "Path",
    # Values
    "MISSING",
    "ValuePair",
    # Diffs
    "DiffRecord",
    "DiffReport",
    "DiffLimits",
    "DEFAULT_MAX_BYTES",
    "DEFAULT_MAX_LINES",
    # Options
    "IgnorePredicate",
    "Transformer",
]

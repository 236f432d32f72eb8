"""Public functional API."""

from deepeq.presentation.api.functions import assert_equal, diff, diff_report, equal

__all__ = [
    "assert_equal",
    "diff",
    "diff_report",
    "equal",
]

"""Functional API for deep comparison.

Example:
    assert_equal(Person(name="Ann", age=30), Person(name="Ann", age=31))
    # DeepEqualityError: values are not deeply equal:
    # {Person}.age:
    #     -: 30
    #     +: 31
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deepeq.application.services.comparer import Comparer, ComparerConfig
from deepeq.domain.exceptions import DeepEqualityError

if TYPE_CHECKING:
    from deepeq.domain.model.diff_record import DiffReport


def diff(left: object, right: object, *, config: ComparerConfig | None = None) -> str:
    """Rendered differences between left and right. Empty string if equal."""
    return Comparer(config).diff(left, right)


def diff_report(left: object, right: object, *, config: ComparerConfig | None = None) -> DiffReport:
    """Structured differences, for ConsoleReporter/JsonReporter."""
    return Comparer(config).diff_report(left, right)


def equal(left: object, right: object, *, config: ComparerConfig | None = None) -> bool:
    """True if left and right are deeply equal."""
    return Comparer(config).equal(left, right)


def assert_equal(
    left: object,
    right: object,
    *,
    config: ComparerConfig | None = None,
    msg: str | None = None,
) -> None:
    """Assert left and right are deeply equal.

    Args:
        left: Expected ("before") value
        right: Actual ("after") value
        config: Comparison options
        msg: Header line for the failure message

    Raises:
        DeepEqualityError: Values differ. Message contains the diff report.
    """
    report = diff(left, right, config=config)
    if report:
        raise DeepEqualityError(report, msg=msg)

"""pytest fixtures for deep equality assertions.

User overrides deepeq_config in their conftest.py.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

import pytest

from deepeq.application.services.comparer import ComparerConfig
from deepeq.domain.model.limits import DEFAULT_MAX_BYTES, DEFAULT_MAX_LINES, DiffLimits
from deepeq.presentation.api.functions import assert_equal

if TYPE_CHECKING:
    from collections.abc import Callable


def _get_ini_int(config: pytest.Config, name: str, default: int) -> int:
    """Get integer ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        Integer value of ini option

    Raises:
        pytest.UsageError: Value is not an integer.
    """
    value = config.getini(name)
    if not value:
        return default
    try:
        return int(str(value))
    except ValueError as error:
        raise pytest.UsageError(f"{name} must be an integer, got {value!r}") from error


@pytest.fixture(scope="session")
def deepeq_config(request: pytest.FixtureRequest) -> ComparerConfig:
    """Comparison options for deep_equal.

    Reads deepeq_max_bytes and deepeq_max_lines from pytest.ini.
    Override in conftest.py for ignore predicates or transformers.

    Returns:
        ComparerConfig with configured output caps
    """
    limits = DiffLimits(
        max_bytes=_get_ini_int(request.config, "deepeq_max_bytes", DEFAULT_MAX_BYTES),
        max_lines=_get_ini_int(request.config, "deepeq_max_lines", DEFAULT_MAX_LINES),
    )
    return ComparerConfig(limits=limits)


@pytest.fixture
def deep_equal(deepeq_config: ComparerConfig) -> Callable[..., None]:
    """assert_equal bound to deepeq_config.

    Usage:
        def test_order(deep_equal):
            deep_equal(expected, actual)
    """
    return partial(assert_equal, config=deepeq_config)

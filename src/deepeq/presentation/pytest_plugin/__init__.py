"""pytest plugin for deepeq.

Provides fixtures:
    deepeq_config: Comparison options (override in conftest.py)
    deep_equal: assert_equal bound to deepeq_config

Enriches `assert left == right` failures on dataclass instances
of the same type with a deep diff.

Configuration (pytest.ini or pyproject.toml):
    deepeq_max_bytes: Cap on stored diff bytes (default: 4096)
    deepeq_max_lines: Cap on stored diff lines (default: 256)
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from deepeq.presentation.api.functions import diff

# Register fixtures from fixtures module
from deepeq.presentation.pytest_plugin.fixtures import deep_equal, deepeq_config

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "deep_equal",
    "deepeq_config",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("deepeq_max_bytes", "Cap on stored deep diff bytes", default="")
    parser.addini("deepeq_max_lines", "Cap on stored deep diff lines", default="")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "deepeq: mark test as deep equality test",
    )


def pytest_assertrepr_compare(op: str, left: object, right: object) -> list[str] | None:
    """Explain failed == between dataclass instances of the same type."""
    if op != "==" or type(left) is not type(right):
        return None
    if not dataclasses.is_dataclass(left) or isinstance(left, type):
        return None

    report = diff(left, right)
    if not report:
        return None
    return [
        f"{type(left).__qualname__} instances differ (deepeq):",
        *report.expandtabs(4).splitlines(),
    ]

"""Ports: contracts between the reporter core and its collaborators."""

from deepeq.domain.ports.formatter import ValueFormatter
from deepeq.domain.ports.reporter import ReporterProtocol

__all__ = [
    "ReporterProtocol",
    "ValueFormatter",
]

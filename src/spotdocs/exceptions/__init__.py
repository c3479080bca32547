"""Shared exception hierarchy for Spotdocs."""

from __future__ import annotations

from .base import SpotdocsError
from .config import ConfigError
from .parsing import AnalysisParseError
from .reporting import SerializationError

__all__ = [
    "AnalysisParseError",
    "ConfigError",
    "SerializationError",
    "SpotdocsError",
]

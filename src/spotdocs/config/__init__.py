"""Configuration loading, validation, and normalization for report runs."""

from __future__ import annotations

from spotdocs.config.loader import load_config
from spotdocs.config.model import ReportConfig
from spotdocs.config.validator import _suggest_key, validate_config_file

__all__ = [
    "ReportConfig",
    "_suggest_key",
    "load_config",
    "validate_config_file",
]

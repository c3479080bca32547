"""Configuration-related exceptions."""

from __future__ import annotations

from spotdocs.exceptions.base import SpotdocsError


class ConfigError(SpotdocsError, ValueError):
    """Raised when report configuration is invalid."""

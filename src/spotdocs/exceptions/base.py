"""Root exception type."""

from __future__ import annotations


class SpotdocsError(Exception):
    """Base exception for all Spotdocs errors."""

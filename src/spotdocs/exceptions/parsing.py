"""Parsing-related exceptions."""

from __future__ import annotations

from spotdocs.exceptions.base import SpotdocsError


class AnalysisParseError(SpotdocsError, ValueError):
    """Raised when a SpotBugs result document is not well-formed XML."""

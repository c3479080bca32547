"""Report output exceptions."""

from __future__ import annotations

from spotdocs.exceptions.base import SpotdocsError


class SerializationError(SpotdocsError, OSError):
    """Raised when the report sink cannot be written to or closed."""

"""Shared file I/O helpers."""

from .atomic import atomic_output
from .files import file_sha256

__all__ = ["atomic_output", "file_sha256"]

"""Shared type aliases for Spotdocs."""

from .common import BinarySink, NameTable, PriorityCode

__all__ = ["BinarySink", "NameTable", "PriorityCode"]

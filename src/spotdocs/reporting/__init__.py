"""Reporting package for Spotdocs outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["build_xdocs_report", "generate_report", "write_xdocs"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name in {"build_xdocs_report", "generate_report", "write_xdocs"}:
        from .builder import build_xdocs_report
        from .generator import generate_report
        from .xdocs_writer import write_xdocs

        exports = {
            "build_xdocs_report": build_xdocs_report,
            "generate_report": generate_report,
            "write_xdocs": write_xdocs,
        }
        return exports[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

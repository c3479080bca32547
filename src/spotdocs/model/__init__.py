"""Core data models for Spotdocs."""

from .entities import (
    AnalysisResult,
    BugInstance,
    BugRecord,
    ClassReport,
    ClassStats,
    XDocsReport,
)

__all__ = [
    "AnalysisResult",
    "BugInstance",
    "BugRecord",
    "ClassReport",
    "ClassStats",
    "XDocsReport",
]

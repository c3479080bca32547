"""Typed input and output models for the XDocs transformation."""

from __future__ import annotations

from dataclasses import dataclass

from spotdocs.types import PriorityCode


@dataclass(frozen=True)
class ClassStats:
    """Per-class statistics row from the analysis summary.

    ``bug_count`` keeps the raw attribute text; the report builder decides
    how to treat values that do not parse as integers.
    """

    class_name: str
    bug_count: str


@dataclass(frozen=True)
class BugInstance:
    """One defect reported by the analysis tool."""

    type: str
    category: str
    long_message: str
    priority: PriorityCode
    primary_class_name: str | None = None
    start_line: str | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Parsed analysis-result document."""

    class_stats: tuple[ClassStats, ...] = ()
    bug_instances: tuple[BugInstance, ...] = ()
    analysis_errors: tuple[str, ...] = ()
    missing_classes: tuple[str, ...] = ()
    tool_version: str | None = None
    total_bugs: str | None = None


@dataclass(frozen=True)
class BugRecord:
    """A defect as emitted inside a class block."""

    type: str
    priority: str
    category: str
    message: str
    line_number: int

    def to_dict(self) -> dict[str, object]:
        """Return a plain mapping of the emitted attributes."""
        return {
            "type": self.type,
            "priority": self.priority,
            "category": self.category,
            "message": self.message,
            "lineNumber": self.line_number,
        }


@dataclass(frozen=True)
class ClassReport:
    """All defects owned by one class, in input order."""

    class_name: str
    bugs: tuple[BugRecord, ...]


@dataclass(frozen=True)
class XDocsReport:
    """The complete output document before serialization."""

    tool_version: str | None
    threshold: str | None
    effort: str | None
    files: tuple[ClassReport, ...] = ()
    analysis_errors: tuple[str, ...] = ()
    missing_classes: tuple[str, ...] = ()
    source_dirs: tuple[str, ...] = ()

    @property
    def bug_count(self) -> int:
        """Total number of emitted bug records."""
        return sum(len(class_report.bugs) for class_report in self.files)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable view of the report."""
        return {
            "version": self.tool_version,
            "threshold": self.threshold,
            "effort": self.effort,
            "files": [
                {
                    "classname": class_report.class_name,
                    "bugs": [bug.to_dict() for bug in class_report.bugs],
                }
                for class_report in self.files
            ],
            "errors": {
                "analysis_errors": list(self.analysis_errors),
                "missing_classes": list(self.missing_classes),
            },
            "source_dirs": list(self.source_dirs),
        }

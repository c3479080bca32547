"""Selection, grouping and projection of bug instances into an XDocs report."""

from __future__ import annotations

import logging

from spotdocs.config.model import ReportConfig
from spotdocs.constants.reporting import NO_LINE_NUMBER
from spotdocs.model import AnalysisResult, BugInstance, BugRecord, ClassReport, XDocsReport
from spotdocs.reporting.severity import SeverityMapper

logger = logging.getLogger(__name__)


def select_bug_classes(result: AnalysisResult) -> list[str]:
    """Return class names with a positive bug count, in first-seen order.

    A bug count that is not an integer counts as zero.
    """
    bug_classes: list[str] = []
    seen: set[str] = set()
    for stats in result.class_stats:
        try:
            bug_count = int(stats.bug_count)
        except ValueError:
            logger.warning("Malformed bug count %r for class %s; skipping", stats.bug_count, stats.class_name)
            continue
        logger.debug("Class %s has %d bugs", stats.class_name, bug_count)
        if bug_count > 0 and stats.class_name not in seen:
            seen.add(stats.class_name)
            bug_classes.append(stats.class_name)
    return bug_classes


def index_bug_instances(result: AnalysisResult) -> dict[str, list[BugInstance]]:
    """Group bug instances by primary class name in a single pass.

    Instances without a primary class are left out of the index.
    """
    index: dict[str, list[BugInstance]] = {}
    orphaned = 0
    for bug in result.bug_instances:
        if not bug.primary_class_name:
            orphaned += 1
            continue
        index.setdefault(bug.primary_class_name, []).append(bug)
    if orphaned:
        logger.warning("Dropped %d bug instance(s) without a primary class", orphaned)
    return index


def parse_line_number(start_line: str | None) -> int:
    """Return the start line as an integer, or ``-1`` when absent or not numeric."""
    if start_line is None:
        return NO_LINE_NUMBER
    try:
        return int(start_line)
    except ValueError:
        return NO_LINE_NUMBER


def project_bug_instance(bug: BugInstance, mapper: SeverityMapper) -> BugRecord:
    """Convert one parsed bug instance into its emitted record."""
    logger.debug("BugInstance message is %s", bug.long_message)
    return BugRecord(
        type=bug.type,
        priority=mapper.priority_name(bug.priority),
        category=bug.category,
        message=bug.long_message,
        line_number=parse_line_number(bug.start_line),
    )


def collect_diagnostics(result: AnalysisResult) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Return analysis-error messages and missing-class names in input order."""
    return tuple(result.analysis_errors), tuple(result.missing_classes)


def collect_source_dirs(config: ReportConfig) -> tuple[str, ...]:
    """Return the compile source roots followed by the test source roots."""
    return (*config.source_roots, *config.test_source_roots)


def build_xdocs_report(
    result: AnalysisResult,
    config: ReportConfig,
    *,
    tool_version: str | None,
    mapper: SeverityMapper | None = None,
) -> XDocsReport:
    """Build the complete XDocs report model for one analysis run."""
    mapper = mapper or SeverityMapper.from_config(config)
    logger.debug("Analysis reports total_bugs=%s", result.total_bugs)

    bug_classes = select_bug_classes(result)
    index = index_bug_instances(result)

    files: list[ClassReport] = []
    for class_name in bug_classes:
        bugs = tuple(project_bug_instance(bug, mapper) for bug in index.get(class_name, ()))
        logger.debug("Class %s reports %d bug instance(s)", class_name, len(bugs))
        files.append(ClassReport(class_name=class_name, bugs=bugs))

    analysis_errors, missing_classes = collect_diagnostics(result)

    return XDocsReport(
        tool_version=tool_version,
        threshold=mapper.threshold_name(config.threshold),
        effort=mapper.effort_name(config.effort),
        files=tuple(files),
        analysis_errors=analysis_errors,
        missing_classes=missing_classes,
        source_dirs=collect_source_dirs(config),
    )

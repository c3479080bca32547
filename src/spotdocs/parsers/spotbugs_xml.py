"""Parser for SpotBugs / FindBugs XML result documents."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from spotdocs.constants.parsing import (
    BUG_INSTANCE_TAG,
    CLASS_STATS_PATH,
    CLASS_TAG,
    ERRORS_MESSAGE_PATH,
    ERRORS_MISSING_CLASS_PATH,
    LEGACY_ERROR_MESSAGE_PATH,
    LEGACY_MISSING_CLASS_PATH,
    LONG_MESSAGE_TAG,
    PRIMARY_TRUE,
    SOURCE_LINE_TAG,
    SUMMARY_TAG,
)
from spotdocs.exceptions import AnalysisParseError
from spotdocs.model import AnalysisResult, BugInstance, ClassStats

logger = logging.getLogger(__name__)


def parse_spotbugs_xml(path: Path) -> AnalysisResult:
    """Read and parse a SpotBugs XML file from disk."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise AnalysisParseError(f"Cannot read analysis result {path}: {exc}") from exc
    return parse_spotbugs_bytes(data, source=str(path))


def parse_spotbugs_bytes(data: bytes, *, source: str = "<bytes>") -> AnalysisResult:
    """Parse SpotBugs XML content into an :class:`AnalysisResult`.

    Field extraction is best-effort: absent attributes become empty strings
    and absent optional values become ``None``.  Only a document that is not
    well-formed raises :class:`AnalysisParseError`.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise AnalysisParseError(f"Malformed analysis result {source}: {exc}") from exc

    summary = root.find(SUMMARY_TAG)
    total_bugs = summary.get("total_bugs") if summary is not None else None

    result = AnalysisResult(
        class_stats=tuple(
            ClassStats(class_name=node.get("class", ""), bug_count=node.get("bugs", ""))
            for node in root.iterfind(CLASS_STATS_PATH)
        ),
        bug_instances=tuple(_parse_bug_instance(node) for node in root.iterfind(BUG_INSTANCE_TAG)),
        analysis_errors=tuple(
            _node_text(node) for path in (LEGACY_ERROR_MESSAGE_PATH, ERRORS_MESSAGE_PATH) for node in root.iterfind(path)
        ),
        missing_classes=tuple(
            _node_text(node)
            for path in (LEGACY_MISSING_CLASS_PATH, ERRORS_MISSING_CLASS_PATH)
            for node in root.iterfind(path)
        ),
        tool_version=root.get("version"),
        total_bugs=total_bugs,
    )
    logger.debug(
        "Parsed %s: %d class stats, %d bug instances, total_bugs=%s",
        source,
        len(result.class_stats),
        len(result.bug_instances),
        total_bugs,
    )
    return result


def _parse_bug_instance(node: ET.Element) -> BugInstance:
    primary_class_name: str | None = None
    for class_node in node.iterfind(CLASS_TAG):
        if class_node.get("primary") == PRIMARY_TRUE:
            primary_class_name = class_node.get("classname")
            break

    # Only the first SourceLine directly under the bug instance counts.
    source_line = node.find(SOURCE_LINE_TAG)
    start_line = source_line.get("start") if source_line is not None else None

    long_message = node.find(LONG_MESSAGE_TAG)
    return BugInstance(
        type=node.get("type", ""),
        category=node.get("category", ""),
        long_message=_node_text(long_message) if long_message is not None else "",
        priority=node.get("priority", ""),
        primary_class_name=primary_class_name,
        start_line=start_line,
    )


def _node_text(node: ET.Element) -> str:
    return "".join(node.itertext())

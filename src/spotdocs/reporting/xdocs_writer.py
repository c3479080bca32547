"""XDocs XML serialization for built reports."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from contextlib import closing

from spotdocs.constants.reporting import (
    ANALYSIS_ERROR_ELEMENT,
    BUG_ELEMENT,
    ERROR_ELEMENT,
    FILE_ELEMENT,
    MISSING_CLASS_ELEMENT,
    PROJECT_ELEMENT,
    ROOT_ELEMENT,
    SRC_DIR_ELEMENT,
    XML_INDENT,
)
from spotdocs.exceptions import SerializationError
from spotdocs.model import XDocsReport
from spotdocs.types import BinarySink

logger = logging.getLogger(__name__)


def _attributes(**values: str | None) -> dict[str, str]:
    """Drop attributes whose value is unknown."""
    return {name: value for name, value in values.items() if value is not None}


def render_xdocs_element(report: XDocsReport) -> ET.Element:
    """Build the XDocs element tree for a report."""
    root = ET.Element(
        ROOT_ELEMENT,
        _attributes(version=report.tool_version, threshold=report.threshold, effort=report.effort),
    )

    for class_report in report.files:
        file_node = ET.SubElement(root, FILE_ELEMENT, {"classname": class_report.class_name})
        for bug in class_report.bugs:
            ET.SubElement(
                file_node,
                BUG_ELEMENT,
                {
                    "type": bug.type,
                    "priority": bug.priority,
                    "category": bug.category,
                    "message": bug.message,
                    "lineNumber": str(bug.line_number),
                },
            )

    error_node = ET.SubElement(root, ERROR_ELEMENT)
    for message in report.analysis_errors:
        ET.SubElement(error_node, ANALYSIS_ERROR_ELEMENT).text = message
    for class_name in report.missing_classes:
        ET.SubElement(error_node, MISSING_CLASS_ELEMENT).text = class_name

    # Always present, empty when no source roots are configured.
    project_node = ET.SubElement(root, PROJECT_ELEMENT)
    for src_dir in report.source_dirs:
        ET.SubElement(project_node, SRC_DIR_ELEMENT).text = src_dir

    ET.indent(root, space=XML_INDENT)
    return root


def render_xdocs_bytes(report: XDocsReport, *, encoding: str) -> bytes:
    """Render a report as an encoded XML document (useful for testing)."""
    return ET.tostring(render_xdocs_element(report), encoding=encoding, xml_declaration=True)


def write_xdocs(report: XDocsReport, sink: BinarySink, *, encoding: str) -> None:
    """Serialize a report to ``sink`` and close it.

    The sink is closed on every exit path.  Failures while writing, flushing
    or closing surface as :class:`SerializationError`.
    """
    try:
        with closing(sink):
            # ElementTree treats "unicode" as a request for str output.
            if encoding.lower() == "unicode":
                raise ValueError(f"{encoding!r} is not a byte encoding")
            ET.ElementTree(render_xdocs_element(report)).write(sink, encoding=encoding, xml_declaration=True)
            sink.flush()
    except (OSError, ValueError, LookupError) as exc:
        raise SerializationError(f"Failed to write XDocs report: {exc}") from exc
    logger.debug("Wrote XDocs report with %d class block(s)", len(report.files))

"""Entry point turning one analysis result into one XDocs document."""

from __future__ import annotations

import logging

from spotdocs.config.model import ReportConfig
from spotdocs.model import AnalysisResult, XDocsReport
from spotdocs.reporting.builder import build_xdocs_report
from spotdocs.reporting.severity import SeverityMapper
from spotdocs.reporting.xdocs_writer import write_xdocs
from spotdocs.types import BinarySink

logger = logging.getLogger(__name__)


def generate_report(
    result: AnalysisResult,
    config: ReportConfig,
    *,
    tool_version: str | None,
    sink: BinarySink,
    severity_mapper: SeverityMapper | None = None,
) -> XDocsReport:
    """Build the XDocs report for ``result`` and write it to ``sink``.

    The sink is owned by this call and is closed before it returns or
    raises.  Only sink failures raise (as ``SerializationError``); gaps in
    the analysis result degrade to documented placeholders.
    """
    try:
        report = build_xdocs_report(result, config, tool_version=tool_version, mapper=severity_mapper)
    except BaseException:
        sink.close()
        raise
    write_xdocs(report, sink, encoding=config.output_encoding)
    logger.info(
        "Generated XDocs report: %d class(es), %d bug instance(s)",
        len(report.files),
        report.bug_count,
    )
    return report

"""End-to-end tests for generating XDocs reports from analysis results."""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET
from pathlib import Path
from unittest.mock import patch

import pytest

from spotdocs.config.model import ReportConfig
from spotdocs.exceptions import SerializationError
from spotdocs.model import AnalysisResult, BugInstance, ClassStats
from spotdocs.parsers.spotbugs_xml import parse_spotbugs_xml
from spotdocs.reporting.generator import generate_report
from spotdocs.reporting.severity import SeverityMapper


class _KeepingSink(io.BytesIO):
    """Sink that keeps its content after close."""

    def __init__(self) -> None:
        super().__init__()
        self.content = b""

    def close(self) -> None:
        if not self.closed:
            self.content = self.getvalue()
        super().close()


class _BrokenSink(io.BytesIO):
    def write(self, data) -> int:  # type: ignore[no-untyped-def, override]
        raise OSError("sink unavailable")


def _generate(result: AnalysisResult, config: ReportConfig | None = None, tool_version: str | None = "4.8.3") -> bytes:
    sink = _KeepingSink()
    generate_report(result, config or ReportConfig(), tool_version=tool_version, sink=sink)
    assert sink.closed
    return sink.content


def test_foo_with_valid_and_invalid_priority(foo_result: AnalysisResult) -> None:
    root = ET.fromstring(_generate(foo_result))

    files = root.findall("file")
    assert [node.get("classname") for node in files] == ["com.example.Foo"]
    bugs = files[0].findall("BugInstance")
    assert [bug.get("priority") for bug in bugs] == ["High", "Invalid Priority"]
    assert [bug.get("lineNumber") for bug in bugs] == ["13", "-1"]


def test_class_without_bugs_is_absent() -> None:
    result = AnalysisResult(class_stats=(ClassStats("com.example.Bar", "0"),))

    root = ET.fromstring(_generate(result))

    assert root.findall("file") == []
    assert b"com.example.Bar" not in _generate(result)


def test_empty_source_roots_emit_empty_project_block() -> None:
    root = ET.fromstring(_generate(AnalysisResult(), ReportConfig(source_roots=(), test_source_roots=())))

    project = root.find("Project")
    assert project is not None
    assert project.findall("SrcDir") == []


def test_orphaned_defect_never_appears() -> None:
    result = AnalysisResult(
        class_stats=(ClassStats("com.example.Foo", "1"),),
        bug_instances=(
            BugInstance(type="ORPHAN", category="STYLE", long_message="no owner", priority="2"),
            BugInstance(
                type="OWNED",
                category="STYLE",
                long_message="owned",
                priority="2",
                primary_class_name="com.example.Foo",
            ),
        ),
    )

    root = ET.fromstring(_generate(result))

    assert [bug.get("type") for bug in root.iter("BugInstance")] == ["OWNED"]


def test_diagnostic_count_matches_input() -> None:
    result = AnalysisResult(analysis_errors=("e1", "e2", "e3"), missing_classes=("m1", "m2"))

    root = ET.fromstring(_generate(result))
    error_node = root.find("Error")

    assert error_node is not None
    assert [child.text for child in error_node] == ["e1", "e2", "e3", "m1", "m2"]


def test_generation_is_byte_identical_across_runs(spotbugs_result_path: Path) -> None:
    result = parse_spotbugs_xml(spotbugs_result_path)
    config = ReportConfig(source_roots=("src/main/java",), test_source_roots=("src/test/java",))

    assert _generate(result, config) == _generate(result, config)


def test_fixture_document_end_to_end(spotbugs_result_path: Path) -> None:
    result = parse_spotbugs_xml(spotbugs_result_path)
    config = ReportConfig(threshold="1", effort="Max", source_roots=("src/main/java",))

    root = ET.fromstring(_generate(result, config, tool_version=result.tool_version))

    assert root.attrib == {"version": "4.8.3", "threshold": "High", "effort": "max"}
    assert [node.get("classname") for node in root.findall("file")] == ["com.example.Foo", "com.example.Bar"]
    foo_bugs = root.findall("file")[0].findall("BugInstance")
    assert [(bug.get("type"), bug.get("lineNumber")) for bug in foo_bugs] == [
        ("NP_NULL_ON_SOME_PATH", "13"),
        ("SE_BAD_FIELD", "-1"),
    ]
    assert [bug.get("type") for bug in root.iter("BugInstance")].count("DM_DEFAULT_ENCODING") == 0
    assert root.findtext("Error/AnalysisError") == "Unable to read class com.example.Broken"
    assert root.findtext("Error/MissingClass") == "org.slf4j.Logger"
    assert [node.text for node in root.iterfind("Project/SrcDir")] == ["src/main/java"]


def test_returns_built_report(foo_result: AnalysisResult) -> None:
    report = generate_report(foo_result, ReportConfig(), tool_version="4.8.3", sink=io.BytesIO())

    assert report.bug_count == 2
    assert report.threshold == "Normal"


def test_sink_failure_surfaces_and_sink_is_closed(foo_result: AnalysisResult) -> None:
    sink = _BrokenSink()

    with pytest.raises(SerializationError):
        generate_report(foo_result, ReportConfig(), tool_version=None, sink=sink)

    assert sink.closed


def test_output_encoding_is_declared(foo_result: AnalysisResult) -> None:
    payload = _generate(foo_result, ReportConfig(output_encoding="UTF-16"))

    assert payload.decode("utf-16").startswith("<?xml version='1.0' encoding='UTF-16'?>")


def test_unicode_output_encoding_raises_serialization_error(foo_result: AnalysisResult) -> None:
    sink = io.BytesIO()

    with pytest.raises(SerializationError):
        generate_report(foo_result, ReportConfig(output_encoding="unicode"), tool_version=None, sink=sink)

    assert sink.closed


def test_sink_is_closed_when_building_fails(foo_result: AnalysisResult) -> None:
    sink = io.BytesIO()
    mapper = SeverityMapper.from_config(ReportConfig())

    with patch.object(mapper, "priority_name", side_effect=RuntimeError("mapper broke")):
        with pytest.raises(RuntimeError, match="mapper broke"):
            generate_report(foo_result, ReportConfig(), tool_version=None, sink=sink, severity_mapper=mapper)

    assert sink.closed

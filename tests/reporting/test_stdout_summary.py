"""Tests for the terminal report summary."""

from __future__ import annotations

from pathlib import Path

from spotdocs.constants.reporting import ANSI_RED, ANSI_RESET
from spotdocs.model import BugRecord, ClassReport, XDocsReport
from spotdocs.reporting.stdout import SummaryReporter, priority_counts


def _bug(priority: str) -> BugRecord:
    return BugRecord(type="T", priority=priority, category="C", message="m", line_number=1)


def _report() -> XDocsReport:
    return XDocsReport(
        tool_version="4.8.3",
        threshold="Normal",
        effort=None,
        files=(
            ClassReport("com.example.Foo", (_bug("High"), _bug("Invalid Priority"))),
            ClassReport("com.example.Bar", (_bug("Low"), _bug("High"))),
        ),
        analysis_errors=("e",),
        missing_classes=(),
        source_dirs=("src/main/java",),
    )


def test_priority_counts() -> None:
    assert priority_counts(_report()) == {"High": 2, "Low": 1, "Invalid Priority": 1}


def test_plain_render_lists_totals() -> None:
    output = SummaryReporter(_report(), output_path=Path("target/spotbugs.xml"), color=False).render()

    assert "Classes     2 with bugs" in output
    assert "Bugs        4" in output
    assert "Priorities  High 2, Low 1, Invalid Priority 1" in output
    assert "Threshold   Normal / effort unknown" in output
    assert "Errors      1 analysis / 0 missing classes" in output
    assert "target/spotbugs.xml" in output
    assert "\033[" not in output


def test_color_render_highlights_high_priority() -> None:
    output = SummaryReporter(_report(), color=True).render()

    assert f"{ANSI_RED}High 2{ANSI_RESET}" in output


def test_verbose_render_lists_classes() -> None:
    output = SummaryReporter(_report(), color=False, verbose=True).render()

    assert "com.example.Foo  2" in output
    assert "com.example.Bar  2" in output


def test_empty_report_has_no_priorities() -> None:
    empty = XDocsReport(tool_version=None, threshold=None, effort=None)

    output = SummaryReporter(empty, color=False).render()

    assert "Priorities  none" in output

"""Terminal summary for a generated XDocs report."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from spotdocs.constants.branding import ASCII_LOGO_LINES, REPORT_SUMMARY_TITLE
from spotdocs.constants.reporting import ANSI_DIM, ANSI_RESET, PRIORITY_COLORS
from spotdocs.constants.severity import PRIORITY_NAMES
from spotdocs.model import XDocsReport


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def priority_counts(report: XDocsReport) -> Counter[str]:
    """Count emitted bug records per priority display name."""
    return Counter(bug.priority for class_report in report.files for bug in class_report.bugs)


class SummaryReporter:
    """Formats a generated report as a short, human-readable summary."""

    def __init__(
        self,
        report: XDocsReport,
        *,
        output_path: Path | None = None,
        color: bool = True,
        verbose: bool = False,
    ) -> None:
        self._report = report
        self._output_path = output_path
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the summary as a single string."""
        r = self._report
        sep = "  " + "─" * 38

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {REPORT_SUMMARY_TITLE}",
            sep,
            "",
            f"  Classes     {len(r.files)} with bugs",
            f"  Bugs        {r.bug_count}",
            f"  Priorities  {self._format_priority_breakdown(priority_counts(r))}",
            f"  Threshold   {r.threshold or 'unknown'} / effort {r.effort or 'unknown'}",
            f"  Errors      {len(r.analysis_errors)} analysis / {len(r.missing_classes)} missing classes",
            f"  Sources     {len(r.source_dirs)} dir(s)",
        ]
        if self._output_path is not None:
            lines.append(f"  Output      {self._output_path}")
        if self._verbose:
            lines.extend(self._render_class_lines())
        lines.append("")
        return "\n".join(lines)

    def _format_priority_breakdown(self, counts: Counter[str]) -> str:
        if not counts:
            return "none"
        # Known priorities first in severity order, anything else after.
        ordered = [name for name in PRIORITY_NAMES.values() if name in counts]
        ordered.extend(sorted(name for name in counts if name not in ordered))
        parts: list[str] = []
        for name in ordered:
            label = f"{name} {counts[name]}"
            color = PRIORITY_COLORS.get(name)
            parts.append(_colorize(label, color) if self._color and color else label)
        return ", ".join(parts)

    def _render_class_lines(self) -> list[str]:
        lines = ["", "  Classes"]
        for class_report in self._report.files:
            count = str(len(class_report.bugs))
            if self._color:
                count = _colorize(count, ANSI_DIM)
            lines.append(f"    {class_report.class_name}  {count}")
        return lines

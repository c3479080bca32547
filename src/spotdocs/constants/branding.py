"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SPOTDOCS"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SPOTDOCS",
    "     // spotbugs results as xdocs",
)
REPORT_SUMMARY_TITLE: str = "Report summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} report generator"))

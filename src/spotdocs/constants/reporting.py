"""Constants for XDocs element names, atomic writing, and stdout formatting."""

from __future__ import annotations

ROOT_ELEMENT: str = "BugCollection"
FILE_ELEMENT: str = "file"
BUG_ELEMENT: str = "BugInstance"
ERROR_ELEMENT: str = "Error"
ANALYSIS_ERROR_ELEMENT: str = "AnalysisError"
MISSING_CLASS_ELEMENT: str = "MissingClass"
PROJECT_ELEMENT: str = "Project"
SRC_DIR_ELEMENT: str = "SrcDir"

NO_LINE_NUMBER: int = -1
XML_INDENT: str = "  "

DEFAULT_OUTPUT_FILENAME: str = "spotbugs.xml"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".xml"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

PRIORITY_COLORS: dict[str, str] = {
    "High": ANSI_RED,
    "Normal": ANSI_YELLOW,
    "Low": ANSI_GREEN,
}

"""Priority, threshold and effort display-name tables."""

from __future__ import annotations

INVALID_PRIORITY_NAME: str = "Invalid Priority"

PRIORITY_NAMES: dict[str, str] = {
    "1": "High",
    "2": "Normal",
    "3": "Low",
    "4": "Exp",
    "5": "Ignore",
}

# Numeric codes share the priority table; named aliases mirror the build plugin settings.
DEFAULT_THRESHOLD_NAMES: dict[str, str] = {
    **PRIORITY_NAMES,
    "High": "High",
    "Default": "Normal",
    "Medium": "Normal",
    "Low": "Low",
    "Exp": "Exp",
}

DEFAULT_EFFORT_NAMES: dict[str, str] = {
    "Min": "min",
    "Less": "less",
    "Default": "default",
    "More": "more",
    "Max": "max",
}

"""Config data model for report generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from spotdocs.constants.config import DEFAULT_EFFORT, DEFAULT_OUTPUT_ENCODING, DEFAULT_THRESHOLD
from spotdocs.constants.severity import DEFAULT_EFFORT_NAMES, DEFAULT_THRESHOLD_NAMES


@dataclass(frozen=True)
class ReportConfig:
    """Resolved report config, immutable for the duration of one run."""

    threshold: str = DEFAULT_THRESHOLD
    effort: str = DEFAULT_EFFORT
    output_encoding: str = DEFAULT_OUTPUT_ENCODING
    source_roots: tuple[str, ...] = ()
    test_source_roots: tuple[str, ...] = ()
    threshold_names: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_THRESHOLD_NAMES))
    effort_names: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_EFFORT_NAMES))

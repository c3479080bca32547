"""Display names for bug priorities, thresholds and efforts."""

from __future__ import annotations

import logging

from spotdocs.config.model import ReportConfig
from spotdocs.constants.severity import (
    DEFAULT_EFFORT_NAMES,
    DEFAULT_THRESHOLD_NAMES,
    INVALID_PRIORITY_NAME,
    PRIORITY_NAMES,
)
from spotdocs.types import NameTable, PriorityCode

logger = logging.getLogger(__name__)


def name_for_priority(code: PriorityCode) -> str:
    """Return the display name for a numeric priority code.

    Unrecognized codes map to ``"Invalid Priority"`` instead of raising.
    """
    return PRIORITY_NAMES.get(code.strip(), INVALID_PRIORITY_NAME)


class SeverityMapper:
    """Resolves priority codes and configured threshold/effort values to display names."""

    def __init__(
        self,
        threshold_names: NameTable | None = None,
        effort_names: NameTable | None = None,
    ) -> None:
        self._threshold_names = dict(DEFAULT_THRESHOLD_NAMES if threshold_names is None else threshold_names)
        self._effort_names = dict(DEFAULT_EFFORT_NAMES if effort_names is None else effort_names)

    @classmethod
    def from_config(cls, config: ReportConfig) -> SeverityMapper:
        """Build a mapper from the name tables carried by a report config."""
        return cls(threshold_names=config.threshold_names, effort_names=config.effort_names)

    def priority_name(self, code: PriorityCode) -> str:
        return name_for_priority(code)

    def threshold_name(self, code: str) -> str | None:
        """Return the threshold display name, or ``None`` when the code is unknown."""
        name = self._threshold_names.get(code)
        if name is None:
            logger.warning("Unknown threshold %r; omitting threshold name", code)
        return name

    def effort_name(self, effort: str) -> str | None:
        """Return the effort display name, or ``None`` when the effort is unknown."""
        name = self._effort_names.get(effort)
        if name is None:
            logger.warning("Unknown effort %r; omitting effort name", effort)
        return name

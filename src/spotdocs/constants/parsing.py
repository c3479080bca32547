"""Element and attribute names read from SpotBugs XML result documents."""

from __future__ import annotations

BUG_INSTANCE_TAG: str = "BugInstance"
CLASS_TAG: str = "Class"
SOURCE_LINE_TAG: str = "SourceLine"
LONG_MESSAGE_TAG: str = "LongMessage"
CLASS_STATS_PATH: str = "./FindBugsSummary/PackageStats/ClassStats"
SUMMARY_TAG: str = "FindBugsSummary"

# SpotBugs layout: <Errors><Error><ErrorMessage/></Error><MissingClass/></Errors>
ERRORS_MESSAGE_PATH: str = "./Errors/Error/ErrorMessage"
ERRORS_MISSING_CLASS_PATH: str = "./Errors/MissingClass"

# Legacy FindBugs layout: <Error><analysisError><message/></analysisError><MissingClass/></Error>
LEGACY_ERROR_MESSAGE_PATH: str = "./Error/analysisError/message"
LEGACY_MISSING_CLASS_PATH: str = "./Error/MissingClass"

PRIMARY_TRUE: str = "true"

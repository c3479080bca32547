"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest

from spotdocs.model import AnalysisResult, BugInstance, ClassStats


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def spotbugs_result_path(fixtures_root: Path) -> Path:
    """Return the SpotBugs XML result fixture."""
    return fixtures_root / "results" / "spotbugsXml.xml"


@pytest.fixture(scope="session")
def legacy_result_path(fixtures_root: Path) -> Path:
    """Return the legacy FindBugs XML result fixture."""
    return fixtures_root / "results" / "legacy_findbugs.xml"


@pytest.fixture()
def foo_result() -> AnalysisResult:
    """One class with two bugs, one of them carrying an unknown priority."""
    return AnalysisResult(
        class_stats=(ClassStats(class_name="com.example.Foo", bug_count="2"),),
        bug_instances=(
            BugInstance(
                type="NP_NULL_ON_SOME_PATH",
                category="CORRECTNESS",
                long_message="Possible null pointer dereference",
                priority="1",
                primary_class_name="com.example.Foo",
                start_line="13",
            ),
            BugInstance(
                type="SE_BAD_FIELD",
                category="BAD_PRACTICE",
                long_message="Non-serializable field",
                priority="9",
                primary_class_name="com.example.Foo",
            ),
        ),
        tool_version="4.8.3",
    )

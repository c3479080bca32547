"""Tests for atomic output and hashing helpers."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from spotdocs.exceptions import SerializationError
from spotdocs.io import atomic_output, file_sha256


def _leftovers(directory: Path) -> list[Path]:
    return [item for item in directory.iterdir() if item.name.startswith(".tmp-")]


def test_atomic_output_replaces_destination(tmp_path: Path) -> None:
    out_path = tmp_path / "site" / "spotbugs.xml"

    with atomic_output(out_path, temp_prefix=".tmp-", temp_suffix=".xml") as sink:
        sink.write(b"<BugCollection/>")

    assert out_path.read_bytes() == b"<BugCollection/>"
    assert not _leftovers(out_path.parent)


def test_atomic_output_accepts_sink_closed_inside_block(tmp_path: Path) -> None:
    out_path = tmp_path / "spotbugs.xml"

    with atomic_output(out_path, temp_prefix=".tmp-", temp_suffix=".xml") as sink:
        sink.write(b"done")
        sink.close()

    assert out_path.read_bytes() == b"done"


def test_atomic_output_keeps_previous_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "spotbugs.xml"
    out_path.write_bytes(b"previous")

    with pytest.raises(RuntimeError):
        with atomic_output(out_path, temp_prefix=".tmp-", temp_suffix=".xml") as sink:
            sink.write(b"partial")
            raise RuntimeError("boom")

    assert out_path.read_bytes() == b"previous"
    assert not _leftovers(tmp_path)


def test_file_sha256(tmp_path: Path) -> None:
    path = tmp_path / "data.bin"
    path.write_bytes(b"spotbugs")

    assert file_sha256(path) == hashlib.sha256(b"spotbugs").hexdigest()


def test_atomic_output_unusable_parent_raises_serialization_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"not a directory")

    with pytest.raises(SerializationError, match="Cannot create output file"):
        with atomic_output(blocker / "spotbugs.xml", temp_prefix=".tmp-", temp_suffix=".xml"):
            pytest.fail("block must not run")

    assert blocker.read_bytes() == b"not a directory"


def test_atomic_output_failed_rename_removes_temp_file(tmp_path: Path) -> None:
    out_path = tmp_path / "spotbugs.xml"
    out_path.mkdir()
    (out_path / "keep.txt").write_text("occupied", encoding="utf-8")

    with pytest.raises(SerializationError, match="Cannot write output file"):
        with atomic_output(out_path, temp_prefix=".tmp-", temp_suffix=".xml") as sink:
            sink.write(b"<BugCollection/>")

    assert out_path.is_dir()
    assert not _leftovers(tmp_path)

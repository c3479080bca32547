"""Atomic file output for report documents."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import BinaryIO

from spotdocs.exceptions import SerializationError


@contextmanager
def atomic_output(
    path: Path,
    *,
    temp_prefix: str,
    temp_suffix: str,
) -> Iterator[BinaryIO]:
    """Yield a binary sink whose content replaces ``path`` only on success.

    The sink may be closed inside the block; it is closed here otherwise.
    When the block raises, the temp file is removed and ``path`` is left
    untouched.  Failures to create, close or rename the temp file raise
    :class:`SerializationError`.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handle = tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        )
    except OSError as exc:
        raise SerializationError(f"Cannot create output file next to {path}: {exc}") from exc

    temp_name = handle.name
    try:
        yield handle
        handle.close()
        os.replace(temp_name, path)
    except BaseException as exc:
        with suppress(OSError):
            handle.close()
        with suppress(FileNotFoundError):
            Path(temp_name).unlink()
        if isinstance(exc, OSError) and not isinstance(exc, SerializationError):
            raise SerializationError(f"Cannot write output file {path}: {exc}") from exc
        raise

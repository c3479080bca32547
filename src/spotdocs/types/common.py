"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import BinaryIO, TypeAlias

PriorityCode: TypeAlias = str
NameTable: TypeAlias = Mapping[str, str]
BinarySink: TypeAlias = BinaryIO

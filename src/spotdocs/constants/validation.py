"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # unknown output encoding
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # root directory or input file not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "threshold",
        "effort",
        "output_encoding",
        "source_roots",
        "test_source_roots",
        "threshold_names",
        "effort_names",
    }
)

LIST_OF_STRINGS_KEYS: tuple[str, ...] = ("source_roots", "test_source_roots")
NAME_TABLE_KEYS: tuple[str, ...] = ("threshold_names", "effort_names")

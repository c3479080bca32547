"""Config loading and normalization for report runs."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

import yaml

from spotdocs.config.model import ReportConfig
from spotdocs.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_EFFORT,
    DEFAULT_OUTPUT_ENCODING,
    DEFAULT_THRESHOLD,
)
from spotdocs.constants.severity import DEFAULT_EFFORT_NAMES, DEFAULT_THRESHOLD_NAMES
from spotdocs.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> ReportConfig:
    """Load and validate report config from ``spotdocs.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ReportConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    return ReportConfig(
        threshold=_ensure_code(raw.get("threshold", DEFAULT_THRESHOLD), "threshold"),
        effort=_ensure_code(raw.get("effort", DEFAULT_EFFORT), "effort"),
        output_encoding=normalize_encoding(raw.get("output_encoding", DEFAULT_OUTPUT_ENCODING)),
        source_roots=tuple(_ensure_string_list(raw.get("source_roots", []), "source_roots")),
        test_source_roots=tuple(_ensure_string_list(raw.get("test_source_roots", []), "test_source_roots")),
        threshold_names=_ensure_name_table(raw.get("threshold_names"), "threshold_names", DEFAULT_THRESHOLD_NAMES),
        effort_names=_ensure_name_table(raw.get("effort_names"), "effort_names", DEFAULT_EFFORT_NAMES),
    )


def normalize_encoding(value: Any) -> str:
    """Check that ``value`` names a byte encoding Python can write with."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("output_encoding must be a non-empty string")
    encoding = value.strip()
    if encoding.lower() == "unicode":
        raise ConfigError("output_encoding must name a byte encoding, not 'unicode'")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown output_encoding: {encoding!r}") from exc
    return encoding


def _ensure_code(value: Any, key_name: str) -> str:
    """Accept a string or integer code and return it as a string."""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ConfigError(f"{key_name} must be a string or integer")
    return str(value).strip()


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _ensure_name_table(value: Any, key_name: str, default: dict[str, str]) -> dict[str, str]:
    """Return a code-to-display-name table, falling back to ``default`` when unset."""
    if value is None:
        return dict(default)
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    table: dict[str, str] = {}
    for code, name in value.items():
        if isinstance(code, bool) or not isinstance(code, (str, int)) or not isinstance(name, str):
            raise ConfigError(f"{key_name} must map string codes to string names")
        table[str(code)] = name
    return table

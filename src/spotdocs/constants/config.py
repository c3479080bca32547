"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "spotdocs.yaml"

DEFAULT_THRESHOLD: str = "2"
DEFAULT_EFFORT: str = "Default"
DEFAULT_OUTPUT_ENCODING: str = "UTF-8"

"""Config file validation for report runs."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from spotdocs.config.loader import normalize_encoding
from spotdocs.constants.config import CONFIG_FILENAME
from spotdocs.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG009,
    LIST_OF_STRINGS_KEYS,
    NAME_TABLE_KEYS,
)
from spotdocs.exceptions import ConfigError
from spotdocs.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a spotdocs.yaml file and return all validation errors.

    This is the collect-all entry point used by both ``spotdocs validate-config``
    and ``spotdocs generate`` preflight.  It never raises; all problems are
    returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for key in ("threshold", "effort"):
        if key in raw:
            val = raw[key]
            if isinstance(val, bool) or not isinstance(val, (str, int)):
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        field=key,
                        message=f"invalid type for `{key}`",
                        hint="expected a string or integer code",
                    )
                )

    if "output_encoding" in raw:
        val = raw["output_encoding"]
        if not isinstance(val, str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="output_encoding",
                    message="invalid type for `output_encoding`",
                    hint="expected an encoding name such as UTF-8",
                )
            )
        else:
            try:
                normalize_encoding(val)
            except ConfigError as exc:
                errors.append(
                    ValidationError(
                        code=CFG006,
                        path=path_str,
                        field="output_encoding",
                        message=str(exc),
                    )
                )

    for key in LIST_OF_STRINGS_KEYS:
        if key in raw:
            val = raw[key]
            if val is not None and (not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val)):
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        field=key,
                        message=f"invalid type for `{key}`",
                        hint="expected a list of strings",
                    )
                )

    for key in NAME_TABLE_KEYS:
        _validate_name_table(raw, key, path_str, errors)

    return errors


def _validate_name_table(
    raw: dict[str, Any],
    key: str,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate a code-to-display-name mapping such as ``threshold_names``."""
    if key not in raw:
        return
    table = raw[key]
    if table is None:
        return
    if not isinstance(table, dict):
        errors.append(
            ValidationError(
                code=CFG009,
                path=path_str,
                field=key,
                message=f"`{key}` must be a mapping",
            )
        )
        return

    for code, name in table.items():
        if isinstance(code, bool) or not isinstance(code, (str, int)) or not isinstance(name, str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{key}.{code}",
                    message=f"invalid entry in `{key}`",
                    hint="expected a string or integer code mapped to a string name",
                )
            )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""

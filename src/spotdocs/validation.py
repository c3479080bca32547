"""Preflight validation orchestrator.

Combines input-file and config-file validation into a single entry point
that both ``spotdocs validate-config`` and ``spotdocs generate`` share.
"""

from __future__ import annotations

from pathlib import Path

from spotdocs.config import validate_config_file
from spotdocs.constants.validation import CFG010
from spotdocs.exceptions.validation import ValidationError, sort_errors


def preflight_validate(
    root: Path,
    config_path: Path | None = None,
    *,
    input_path: Path | None = None,
) -> list[ValidationError]:
    """Run all preflight validation checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    errors: list[ValidationError] = []
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        errors.append(
            ValidationError(
                code=CFG010,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        )
        return sort_errors(errors)

    if input_path is not None and not input_path.is_file():
        errors.append(
            ValidationError(
                code=CFG010,
                path=str(input_path),
                field="",
                message=f"analysis result not found: {input_path}",
            )
        )

    config_explicit = config_path is not None
    errors.extend(validate_config_file(root, config_path, config_explicit=config_explicit))
    return sort_errors(errors)

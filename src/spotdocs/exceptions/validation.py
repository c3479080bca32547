"""Validation error records reported by ``validate-config`` and preflight checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One configuration or input problem, keyed by a stable ``CFG0xx`` code."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Format as ``[CODE] path field: message (hint)`` on one line."""
        location = f"{self.path} {self.field}:" if self.field else f"{self.path}:"
        text = f"[{self.code}] {location} {self.message}"
        if self.hint:
            text = f"{text} ({self.hint})"
        return text


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Order errors by code, then path, then field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    """Render errors one per line in deterministic order."""
    return "\n".join(error.format() for error in sort_errors(errors))

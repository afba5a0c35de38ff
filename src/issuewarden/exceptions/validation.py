"""Structured validation error model for triage configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single configuration problem with a stable code and its origin.

    ``source`` is either a config file path or ``env:<VARIABLE>`` for values
    that came from the environment.
    """

    code: str
    source: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = f"{self.source}:{self.field}" if self.field else self.source
        parts = [f"[{self.code}]", location, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort validation errors deterministically by code, source, field."""
    return sorted(errors, key=lambda e: (e.code, e.source, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    """Format a list of validation errors as a multi-line string."""
    return "\n".join(e.format() for e in sort_errors(errors))

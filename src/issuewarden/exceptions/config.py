"""Configuration-related exceptions."""

from __future__ import annotations

from issuewarden.exceptions.base import IssueWardenError


class ConfigError(IssueWardenError, ValueError):
    """Raised when triage configuration is invalid."""

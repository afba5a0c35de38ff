"""Event payload parsing exceptions."""

from __future__ import annotations

from issuewarden.exceptions.base import IssueWardenError


class EventParseError(IssueWardenError, ValueError):
    """Raised when a webhook event payload cannot be decoded."""

"""Exceptions raised by the tracker and web gateways."""

from __future__ import annotations

from issuewarden.exceptions.base import IssueWardenError


class TrackerError(IssueWardenError):
    """Raised when an issue-tracker operation fails."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class WebClientError(IssueWardenError):
    """Raised when an outbound HTTP request cannot be completed."""

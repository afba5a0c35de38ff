"""Root exception type for issuewarden."""

from __future__ import annotations


class IssueWardenError(Exception):
    """Base class for all issuewarden errors."""

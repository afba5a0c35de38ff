"""Shared exception hierarchy for issuewarden."""

from __future__ import annotations

from .base import IssueWardenError
from .config import ConfigError
from .gateway import TrackerError, WebClientError
from .parsing import EventParseError

__all__ = [
    "ConfigError",
    "EventParseError",
    "IssueWardenError",
    "TrackerError",
    "WebClientError",
]

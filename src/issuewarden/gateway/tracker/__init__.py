"""Issue-tracker gateway: abstract interface, GitHub implementation and fake."""

from .abc import IssueTracker
from .fake import FakeIssueTracker, RecordedCall
from .real import GitHubTracker

__all__ = ["FakeIssueTracker", "GitHubTracker", "IssueTracker", "RecordedCall"]

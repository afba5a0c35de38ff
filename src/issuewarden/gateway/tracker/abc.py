"""Issue-tracker operations used by triage rules and the dispatcher.

Implementations act on a single repository fixed at construction time and
raise :class:`issuewarden.exceptions.TrackerError` for any failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from issuewarden.constants.github import MINIMIZE_CLASSIFIER_OFF_TOPIC
from issuewarden.model import Label


class IssueTracker(ABC):
    """Abstract issue-tracker operations for dependency injection."""

    @abstractmethod
    def close_issue(self, issue_number: int) -> None:
        """Close an issue."""

    @abstractmethod
    def add_labels(self, issue_number: int, labels: tuple[str, ...]) -> None:
        """Add labels to an issue, keeping the ones it already has."""

    @abstractmethod
    def create_comment(self, issue_number: int, body: str) -> int:
        """Post a comment on an issue.

        Returns:
            The id of the created comment.
        """

    @abstractmethod
    def update_comment(self, comment_id: int, body: str) -> None:
        """Replace the body of an existing comment."""

    @abstractmethod
    def lock_issue(self, issue_number: int) -> None:
        """Lock an issue's conversation."""

    @abstractmethod
    def minimize_comment(self, node_id: str, classifier: str = MINIMIZE_CLASSIFIER_OFF_TOPIC) -> None:
        """Hide a comment behind a classifier such as ``OFF_TOPIC``."""

    @abstractmethod
    def list_repo_labels(self) -> list[Label]:
        """Return every label defined in the repository, in listing order."""

    @abstractmethod
    def delete_issue(self, node_id: str) -> None:
        """Permanently delete an issue."""

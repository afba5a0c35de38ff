"""In-memory :class:`IssueTracker` that records calls.

Used by tests and by ``issuewarden run --dry-run``. Failures are configured
per operation name at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass

from issuewarden.constants.github import MINIMIZE_CLASSIFIER_OFF_TOPIC
from issuewarden.exceptions import TrackerError
from issuewarden.gateway.tracker.abc import IssueTracker
from issuewarden.model import Label


@dataclass(frozen=True)
class RecordedCall:
    """One tracker operation and its arguments."""

    operation: str
    args: tuple[object, ...]


class FakeIssueTracker(IssueTracker):
    """Tracker that records every call and never touches the network."""

    def __init__(
        self,
        *,
        labels: list[Label] | None = None,
        fail_on: frozenset[str] = frozenset(),
        first_comment_id: int = 1,
    ) -> None:
        """Create a fake tracker.

        Args:
            labels: Repository labels returned by ``list_repo_labels``.
            fail_on: Operation names (e.g. ``"lock_issue"``) that raise TrackerError.
            first_comment_id: Id handed out to the first created comment.
        """
        self._labels = list(labels or [])
        self._fail_on = fail_on
        self._next_comment_id = first_comment_id
        self.calls: list[RecordedCall] = []

    @property
    def operations(self) -> list[str]:
        """Names of the recorded operations, in call order."""
        return [call.operation for call in self.calls]

    def close_issue(self, issue_number: int) -> None:
        self._record("close_issue", issue_number)

    def add_labels(self, issue_number: int, labels: tuple[str, ...]) -> None:
        self._record("add_labels", issue_number, tuple(labels))

    def create_comment(self, issue_number: int, body: str) -> int:
        self._record("create_comment", issue_number, body)
        comment_id = self._next_comment_id
        self._next_comment_id += 1
        return comment_id

    def update_comment(self, comment_id: int, body: str) -> None:
        self._record("update_comment", comment_id, body)

    def lock_issue(self, issue_number: int) -> None:
        self._record("lock_issue", issue_number)

    def minimize_comment(self, node_id: str, classifier: str = MINIMIZE_CLASSIFIER_OFF_TOPIC) -> None:
        self._record("minimize_comment", node_id, classifier)

    def list_repo_labels(self) -> list[Label]:
        self._record("list_repo_labels")
        return list(self._labels)

    def delete_issue(self, node_id: str) -> None:
        self._record("delete_issue", node_id)

    def _record(self, operation: str, *args: object) -> None:
        self.calls.append(RecordedCall(operation=operation, args=args))
        if operation in self._fail_on:
            raise TrackerError(f"{operation} failed (configured)")

"""Side effects a matching rule asks the dispatcher to perform.

Each action carries everything needed to execute it, so the dispatcher needs
no knowledge of the rule that produced it. ``optional`` steps do not halt the
rest of their verdict when they fail.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar
from urllib.parse import urlparse

from issuewarden.constants.github import MINIMIZE_CLASSIFIER_OFF_TOPIC
from issuewarden.types.common import ActionKind, JsonObject


@dataclass(frozen=True, kw_only=True)
class Action(ABC):
    """Base class for dispatchable actions."""

    kind: ClassVar[ActionKind]

    optional: bool = False

    @property
    @abstractmethod
    def target(self) -> str:
        """Short, log-safe description of what the action touches."""


@dataclass(frozen=True, kw_only=True)
class CloseIssue(Action):
    kind: ClassVar[ActionKind] = "close_issue"

    issue_number: int

    @property
    def target(self) -> str:
        return f"issue #{self.issue_number}"


@dataclass(frozen=True, kw_only=True)
class AddLabels(Action):
    kind: ClassVar[ActionKind] = "add_labels"

    issue_number: int
    labels: tuple[str, ...]

    @property
    def target(self) -> str:
        return f"issue #{self.issue_number}"


@dataclass(frozen=True, kw_only=True)
class CreateComment(Action):
    kind: ClassVar[ActionKind] = "create_comment"

    issue_number: int
    body: str

    @property
    def target(self) -> str:
        return f"issue #{self.issue_number}"


@dataclass(frozen=True, kw_only=True)
class LockIssue(Action):
    kind: ClassVar[ActionKind] = "lock_issue"

    issue_number: int

    @property
    def target(self) -> str:
        return f"issue #{self.issue_number}"


@dataclass(frozen=True, kw_only=True)
class UpdateComment(Action):
    kind: ClassVar[ActionKind] = "update_comment"

    comment_id: int
    body: str

    @property
    def target(self) -> str:
        return f"comment {self.comment_id}"


@dataclass(frozen=True, kw_only=True)
class MinimizeComment(Action):
    kind: ClassVar[ActionKind] = "minimize_comment"

    node_id: str
    classifier: str = MINIMIZE_CLASSIFIER_OFF_TOPIC

    @property
    def target(self) -> str:
        return f"comment node {self.node_id}"


@dataclass(frozen=True, kw_only=True)
class DeleteIssue(Action):
    kind: ClassVar[ActionKind] = "delete_issue"

    node_id: str
    issue_number: int

    @property
    def target(self) -> str:
        return f"issue #{self.issue_number}"


@dataclass(frozen=True, kw_only=True)
class PostWebhook(Action):
    """POST a JSON payload to a webhook.

    ``outcome_fields`` maps payload keys to action kinds; before sending, the
    dispatcher sets each key to whether an earlier step of that kind in the
    same verdict succeeded.
    """

    kind: ClassVar[ActionKind] = "post_webhook"

    url: str
    payload: JsonObject = field(default_factory=dict)
    outcome_fields: tuple[tuple[str, ActionKind], ...] = ()

    @property
    def target(self) -> str:
        # Webhook URLs often embed credentials in the path; only the host is logged.
        return f"webhook {urlparse(self.url).hostname or '<invalid url>'}"

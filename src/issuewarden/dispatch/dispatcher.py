"""Sequential execution of the actions in a verdict.

Actions run in order. A failing required action stops the remaining actions
of the same verdict, which are recorded as skipped; nothing already done is
rolled back. Failing ``optional`` actions are recorded and execution
continues.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from issuewarden.exceptions import TrackerError, WebClientError
from issuewarden.gateway.tracker import IssueTracker
from issuewarden.gateway.web import WebClient
from issuewarden.model import (
    Action,
    ActionOutcome,
    AddLabels,
    CloseIssue,
    CreateComment,
    DeleteIssue,
    LockIssue,
    MinimizeComment,
    PostWebhook,
    UpdateComment,
)
from issuewarden.types.common import ActionKind

logger = logging.getLogger(__name__)


class Dispatcher:
    """Run actions through an :class:`IssueTracker` and a :class:`WebClient`."""

    def __init__(self, *, tracker: IssueTracker, web: WebClient) -> None:
        self._tracker = tracker
        self._web = web
        self._handlers: dict[ActionKind, Callable[[Action, tuple[ActionOutcome, ...]], None]] = {
            "close_issue": self._close_issue,
            "add_labels": self._add_labels,
            "create_comment": self._create_comment,
            "lock_issue": self._lock_issue,
            "update_comment": self._update_comment,
            "minimize_comment": self._minimize_comment,
            "delete_issue": self._delete_issue,
            "post_webhook": self._post_webhook,
        }

    def dispatch(self, actions: tuple[Action, ...]) -> tuple[ActionOutcome, ...]:
        """Execute ``actions`` in order and return one outcome per action."""
        outcomes: list[ActionOutcome] = []
        halted = False
        for action in actions:
            if halted:
                outcomes.append(ActionOutcome(kind=action.kind, target=action.target, status="skipped"))
                continue

            outcome = self._execute(action, tuple(outcomes))
            outcomes.append(outcome)
            if not outcome.ok and not action.optional:
                halted = True
        return tuple(outcomes)

    def _execute(self, action: Action, previous: tuple[ActionOutcome, ...]) -> ActionOutcome:
        handler = self._handlers[action.kind]
        try:
            handler(action, previous)
        except (TrackerError, WebClientError) as exc:
            level = logging.WARNING if action.optional else logging.ERROR
            logger.log(level, "Action %s on %s failed: %s", action.kind, action.target, exc)
            return ActionOutcome(kind=action.kind, target=action.target, status="failed", error=str(exc))
        logger.debug("Action %s on %s done", action.kind, action.target)
        return ActionOutcome(kind=action.kind, target=action.target, status="ok")

    def _close_issue(self, action: Action, previous: tuple[ActionOutcome, ...]) -> None:
        assert isinstance(action, CloseIssue)
        self._tracker.close_issue(action.issue_number)

    def _add_labels(self, action: Action, previous: tuple[ActionOutcome, ...]) -> None:
        assert isinstance(action, AddLabels)
        self._tracker.add_labels(action.issue_number, action.labels)

    def _create_comment(self, action: Action, previous: tuple[ActionOutcome, ...]) -> None:
        assert isinstance(action, CreateComment)
        self._tracker.create_comment(action.issue_number, action.body)

    def _lock_issue(self, action: Action, previous: tuple[ActionOutcome, ...]) -> None:
        assert isinstance(action, LockIssue)
        self._tracker.lock_issue(action.issue_number)

    def _update_comment(self, action: Action, previous: tuple[ActionOutcome, ...]) -> None:
        assert isinstance(action, UpdateComment)
        self._tracker.update_comment(action.comment_id, action.body)

    def _minimize_comment(self, action: Action, previous: tuple[ActionOutcome, ...]) -> None:
        assert isinstance(action, MinimizeComment)
        self._tracker.minimize_comment(action.node_id, action.classifier)

    def _delete_issue(self, action: Action, previous: tuple[ActionOutcome, ...]) -> None:
        assert isinstance(action, DeleteIssue)
        self._tracker.delete_issue(action.node_id)

    def _post_webhook(self, action: Action, previous: tuple[ActionOutcome, ...]) -> None:
        assert isinstance(action, PostWebhook)
        payload = dict(action.payload)
        for field, kind in action.outcome_fields:
            payload[field] = any(outcome.kind == kind and outcome.ok for outcome in previous)
        if not self._web.post_json(action.url, payload):
            raise WebClientError("webhook did not accept the payload")

"""Tests for sequential action dispatch."""

from __future__ import annotations

import pytest

from issuewarden.dispatch import Dispatcher
from issuewarden.gateway.tracker import FakeIssueTracker
from issuewarden.gateway.web import FakeWebClient
from issuewarden.model import (
    AddLabels,
    CloseIssue,
    CreateComment,
    DeleteIssue,
    LockIssue,
    MinimizeComment,
    PostWebhook,
    UpdateComment,
)

INVALID_REPRO = (
    CloseIssue(issue_number=1),
    AddLabels(issue_number=1, labels=("invalid-reproduction",)),
    CreateComment(issue_number=1, body="hello"),
    LockIssue(issue_number=1),
)


def test_actions_run_in_order() -> None:
    tracker = FakeIssueTracker()

    outcomes = Dispatcher(tracker=tracker, web=FakeWebClient()).dispatch(INVALID_REPRO)

    assert tracker.operations == ["close_issue", "add_labels", "create_comment", "lock_issue"]
    assert [outcome.status for outcome in outcomes] == ["ok", "ok", "ok", "ok"]
    assert outcomes[0].target == "issue #1"


def test_required_failure_skips_remaining_steps(caplog: pytest.LogCaptureFixture) -> None:
    tracker = FakeIssueTracker(fail_on=frozenset({"add_labels"}))

    with caplog.at_level("ERROR"):
        outcomes = Dispatcher(tracker=tracker, web=FakeWebClient()).dispatch(INVALID_REPRO)

    assert tracker.operations == ["close_issue", "add_labels"]
    assert [outcome.status for outcome in outcomes] == ["ok", "failed", "skipped", "skipped"]
    assert outcomes[1].error == "add_labels failed (configured)"
    assert "Action add_labels on issue #1 failed" in caplog.text


def test_optional_failure_continues() -> None:
    tracker = FakeIssueTracker(fail_on=frozenset({"update_comment"}))
    actions = (
        UpdateComment(comment_id=4, body="x", optional=True),
        MinimizeComment(node_id="IC_4"),
    )

    outcomes = Dispatcher(tracker=tracker, web=FakeWebClient()).dispatch(actions)

    assert [outcome.status for outcome in outcomes] == ["failed", "ok"]
    assert tracker.calls[-1].args == ("IC_4", "OFF_TOPIC")


@pytest.mark.parametrize(
    ("fail_on", "deleted"),
    [(frozenset(), True), (frozenset({"delete_issue"}), False)],
    ids=["delete_ok", "delete_failed"],
)
def test_webhook_reports_delete_outcome(fail_on: frozenset[str], deleted: bool) -> None:
    web = FakeWebClient()
    actions = (
        DeleteIssue(node_id="I_1", issue_number=1, optional=True),
        PostWebhook(
            url="https://hooks.example.com/x",
            payload={"deleted": False},
            outcome_fields=(("deleted", "delete_issue"),),
        ),
    )

    outcomes = Dispatcher(tracker=FakeIssueTracker(fail_on=fail_on), web=web).dispatch(actions)

    assert outcomes[1].ok
    assert web.posted == [("https://hooks.example.com/x", {"deleted": deleted})]


def test_webhook_without_delete_step_reports_false() -> None:
    web = FakeWebClient()
    action = PostWebhook(url="https://hooks.example.com/x", payload={}, outcome_fields=(("deleted", "delete_issue"),))

    Dispatcher(tracker=FakeIssueTracker(), web=web).dispatch((action,))

    assert web.posted[0][1] == {"deleted": False}


@pytest.mark.parametrize(
    "web",
    [FakeWebClient(post_ok=False), FakeWebClient(post_raises=True)],
    ids=["rejected", "error"],
)
def test_webhook_failure_is_recorded(web: FakeWebClient) -> None:
    action = PostWebhook(url="https://hooks.example.com/x")

    outcomes = Dispatcher(tracker=FakeIssueTracker(), web=web).dispatch((action,))

    assert outcomes[0].status == "failed"
    assert outcomes[0].target == "webhook hooks.example.com"


def test_action_payload_is_not_mutated() -> None:
    payload = {"deleted": False}
    action = PostWebhook(
        url="https://hooks.example.com/x",
        payload=payload,
        outcome_fields=(("deleted", "delete_issue"),),
    )
    dispatcher = Dispatcher(tracker=FakeIssueTracker(), web=FakeWebClient())

    dispatcher.dispatch((DeleteIssue(node_id="n", issue_number=1), action))

    assert payload == {"deleted": False}

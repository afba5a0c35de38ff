"""Run the rules for one event and dispatch every matching verdict."""

from __future__ import annotations

import logging
import time

from issuewarden.config import WardenConfig
from issuewarden.dispatch import Dispatcher
from issuewarden.gateway.tracker import IssueTracker
from issuewarden.gateway.web import WebClient
from issuewarden.model import Event, NoMatch, RuleOutcome, TriageResult
from issuewarden.rules import Rule, RuleContext, build_rules

logger = logging.getLogger(__name__)


def triage_event(
    event: Event,
    *,
    config: WardenConfig,
    tracker: IssueTracker,
    web: WebClient,
    rules: list[Rule] | None = None,
    dry_run: bool = False,
) -> TriageResult:
    """Classify ``event`` and act on it.

    Rules run one at a time in their fixed order and each verdict is
    dispatched before the next rule is evaluated. Once an issue has been
    deleted the remaining rules are skipped.
    """
    started_at = time.perf_counter()
    context = RuleContext(config=config, tracker=tracker, web=web)
    dispatcher = Dispatcher(tracker=tracker, web=web)
    selected = rules if rules is not None else build_rules(event.kind)

    outcomes: list[RuleOutcome] = []
    skipped: list[str] = []
    notes: list[str] = []
    issue_deleted = False

    for rule in selected:
        if rule.applies_to != event.kind:
            continue
        if not rule.enabled(config):
            logger.debug("Rule %s is disabled by configuration", rule.rule_id)
            continue
        if issue_deleted:
            skipped.append(rule.rule_id)
            continue

        verdict = rule.evaluate(event=event, context=context)
        if isinstance(verdict, NoMatch):
            logger.debug("Rule %s: no match (%s)", rule.rule_id, verdict.reason)
            outcomes.append(RuleOutcome(rule_id=rule.rule_id, matched=False, reason=verdict.reason))
            continue

        action_outcomes = dispatcher.dispatch(verdict.actions)
        outcome = RuleOutcome(
            rule_id=rule.rule_id,
            matched=True,
            reason=verdict.reason,
            actions=action_outcomes,
        )
        outcomes.append(outcome)
        if outcome.failed_actions:
            notes.append(f"{rule.rule_id}: {outcome.failed_actions} action(s) failed")
        if any(action.kind == "delete_issue" and action.ok for action in action_outcomes):
            logger.info("Issue #%d was deleted; remaining rules are skipped", event.issue.number)
            issue_deleted = True

    return TriageResult(
        event_kind=event.kind,
        repository=event.repository.full_name,
        issue_number=event.issue.number,
        outcomes=tuple(outcomes),
        skipped_rules=tuple(skipped),
        duration_seconds=time.perf_counter() - started_at,
        dry_run=dry_run,
        notes=tuple(notes),
    )

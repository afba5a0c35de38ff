"""Route publicly filed vulnerability reports to a private webhook."""

from __future__ import annotations

import logging

from issuewarden.config import WardenConfig
from issuewarden.constants.webhook import DELETED_FIELD, VULNERABILITY_REPORT_TYPE
from issuewarden.model import Action, DeleteIssue, Event, IssueOpened, Match, NoMatch, PostWebhook, Verdict
from issuewarden.rules.base import Rule, RuleContext
from issuewarden.types.common import JsonObject

logger = logging.getLogger(__name__)


class VulnerabilityRule(Rule):
    """Forward issues that look like security disclosures, optionally deleting them."""

    rule_id = "VULNERABILITY_DISCLOSURE"
    applies_to = "issue_opened"

    def enabled(self, config: WardenConfig) -> bool:
        return config.vulnerability.enabled

    def evaluate(self, *, event: Event, context: RuleContext) -> Verdict:
        assert isinstance(event, IssueOpened)
        settings = context.config.vulnerability
        if not settings.enabled or settings.webhook_url is None:
            return NoMatch(reason="webhook not configured")

        issue = event.issue
        found = settings.disclosure_pattern.search(f"{issue.title} {issue.body}")
        if found is None:
            return NoMatch(reason="no disclosure keywords")

        logger.info("Issue #%d looks like a vulnerability report (matched %r)", issue.number, found.group(0))
        payload: JsonObject = {
            "type": VULNERABILITY_REPORT_TYPE,
            "repository_url": event.repository.html_url,
            "issue_number": issue.number,
            "title": issue.title,
            "body": issue.body,
            DELETED_FIELD: False,
            "reporter_url": issue.author_url,
            "secret": settings.webhook_secret,
        }
        actions: list[Action] = []
        if settings.delete_report:
            actions.append(DeleteIssue(node_id=issue.node_id, issue_number=issue.number, optional=True))
        actions.append(
            PostWebhook(
                url=settings.webhook_url,
                payload=payload,
                outcome_fields=((DELETED_FIELD, "delete_issue"),),
            )
        )
        return Match(actions=tuple(actions), reason="disclosure keywords found")

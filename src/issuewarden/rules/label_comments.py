"""Comment on issues when a mapped label is added."""

from __future__ import annotations

import logging

from issuewarden.config import WardenConfig
from issuewarden.io.templates import read_comment_template
from issuewarden.model import CreateComment, Event, IssueLabeled, Match, NoMatch, Verdict
from issuewarden.rules.base import Rule, RuleContext

logger = logging.getLogger(__name__)


class LabelCommentRule(Rule):
    """Post the comment mapped to a newly added label."""

    rule_id = "LABEL_COMMENT"
    applies_to = "issue_labeled"

    def enabled(self, config: WardenConfig) -> bool:
        return bool(config.label_comments.mapping)

    def evaluate(self, *, event: Event, context: RuleContext) -> Verdict:
        assert isinstance(event, IssueLabeled)
        mapping = context.config.label_comments.mapping
        if not mapping:
            return NoMatch(reason="no label comments configured")

        added = event.added_label.name
        if added not in mapping and not any(name in mapping for name in event.issue.label_names):
            logger.info("Not manually or already labeled")
            return NoMatch(reason="no mapped label")
        if added not in mapping:
            logger.info("Added label %r has no comment mapped; skipping", added)
            return NoMatch(reason="added label is not mapped")

        body = read_comment_template(mapping[added], context.config.workspace)
        logger.info("Commenting on issue #%d for label %r", event.issue.number, added)
        return Match(
            actions=(CreateComment(issue_number=event.issue.number, body=body),),
            reason=f"label {added!r} added",
        )

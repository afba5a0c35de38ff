"""Label new issues by the product area named in their body."""

from __future__ import annotations

import logging

from issuewarden.config import WardenConfig
from issuewarden.exceptions import TrackerError
from issuewarden.model import AddLabels, Event, IssueOpened, Label, Match, NoMatch, Verdict
from issuewarden.rules.base import Rule, RuleContext
from issuewarden.rules.extract import extract_section
from issuewarden.types.config import AreaLabelConfig

logger = logging.getLogger(__name__)


class AreaLabelRule(Rule):
    """Add every ``area:`` label whose name or description appears in the area section."""

    rule_id = "AREA_LABELS"
    applies_to = "issue_opened"

    def enabled(self, config: WardenConfig) -> bool:
        return config.area_labels.section is not None

    def evaluate(self, *, event: Event, context: RuleContext) -> Verdict:
        assert isinstance(event, IssueOpened)
        issue = event.issue
        settings = context.config.area_labels
        if settings.section is None:
            return NoMatch(reason="area section not configured")

        section = extract_section(issue.body, settings.section)
        if section is None:
            logger.info("Issue #%d has no area section", issue.number)
            return NoMatch(reason="no area section")

        try:
            repo_labels = context.tracker.list_repo_labels()
        except TrackerError as exc:
            logger.warning("Could not list repository labels: %s", exc)
            return NoMatch(reason="could not list labels")

        matched = match_area_labels(section, repo_labels, settings)
        if not matched:
            logger.info("No area labels matched issue #%d", issue.number)
            return NoMatch(reason="no area labels matched")

        logger.info("Issue #%d matches area labels: %s", issue.number, ", ".join(matched))
        return Match(actions=(AddLabels(issue_number=issue.number, labels=matched),), reason="area labels matched")


def match_area_labels(section: str, labels: list[Label], settings: AreaLabelConfig) -> tuple[str, ...]:
    """Return names of prefixed labels whose criterion occurs in ``section``, in listing order."""
    matched: list[str] = []
    for label in labels:
        if not label.name.startswith(settings.prefix):
            continue
        criterion = label.name if settings.match == "name" else label.description
        if not criterion:
            continue
        if criterion in section and label.name not in matched:
            matched.append(label.name)
    return tuple(matched)

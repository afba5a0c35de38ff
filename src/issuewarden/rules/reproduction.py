"""Close issues that do not link to a reachable reproduction."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from issuewarden.constants.github import (
    CODESANDBOX_API_TEMPLATE,
    CODESANDBOX_DEVBOX_PATH,
    CODESANDBOX_HOST,
    PROBE_CLIENT_ERROR_MIN,
    PROBE_SERVER_ERROR_MIN,
)
from issuewarden.exceptions import WebClientError
from issuewarden.gateway.web import WebClient
from issuewarden.io.templates import read_comment_template
from issuewarden.model import (
    AddLabels,
    CloseIssue,
    CreateComment,
    Event,
    IssueOpened,
    LockIssue,
    Match,
    NoMatch,
    Verdict,
)
from issuewarden.rules.base import Rule, RuleContext
from issuewarden.rules.extract import extract_section
from issuewarden.types.config import ReproductionConfig

logger = logging.getLogger(__name__)


class ReproductionRule(Rule):
    """Close, label, comment on and lock issues without a valid reproduction link."""

    rule_id = "INVALID_REPRODUCTION"
    applies_to = "issue_opened"

    def evaluate(self, *, event: Event, context: RuleContext) -> Verdict:
        assert isinstance(event, IssueOpened)
        issue = event.issue
        settings = context.config.reproduction

        if not settings.applies_to_labels(issue.label_names):
            return NoMatch(reason="issue labels are not in scope")
        if not issue.body:
            logger.info("Could not get the body of issue #%d, nothing to classify", issue.number)
            return NoMatch(reason="issue has no body")

        problem = find_reproduction_problem(issue.body, settings, context.web)
        if problem is None:
            logger.info("Issue #%d contains a valid reproduction", issue.number)
            return NoMatch(reason="valid reproduction")

        logger.info("Issue #%d has an invalid reproduction (%s); it will be closed", issue.number, problem)
        body = read_comment_template(settings.comment, context.config.workspace)
        return Match(
            actions=(
                CloseIssue(issue_number=issue.number),
                AddLabels(issue_number=issue.number, labels=(settings.invalid_label,)),
                CreateComment(issue_number=issue.number, body=body),
                LockIssue(issue_number=issue.number),
            ),
            reason=problem,
        )


def find_reproduction_problem(body: str, settings: ReproductionConfig, web: WebClient) -> str | None:
    """Return why the reproduction link in ``body`` is invalid, or None when it is valid."""
    link = extract_section(body, settings.link_section)
    if link is None:
        logger.info("Missing reproduction link")
        logger.debug("Link section pattern: %r", settings.link_section.pattern)
        return "missing link"

    try:
        parts = urlsplit(link)
    except ValueError:
        logger.info("Invalid URL: %s", link)
        return "invalid url"
    host = parts.hostname
    if not parts.scheme or not host:
        logger.info("Invalid URL: %s", link)
        return "invalid url"

    if host not in settings.hosts:
        logger.info("Link host %s is not an allowed reproduction host", host)
        return "host not allowed"

    for pattern in settings.blocklist:
        if pattern.search(link):
            logger.info("Link %s matches blocklist entry %r", link, pattern.pattern)
            return "blocklisted link"

    # urlsplit drops tabs and newlines, so a link wrapped onto a second line is probed as one URL.
    probe_url = probe_url_for(parts.geturl())
    try:
        status = web.fetch_status(probe_url)
    except WebClientError as exc:
        logger.info("Link fetching errored: %s", exc)
        return "link unreachable"

    # Server errors are tolerated in case the host is having downtime.
    if PROBE_CLIENT_ERROR_MIN <= status < PROBE_SERVER_ERROR_MIN:
        logger.info("Link returned status %d", status)
        return f"link returned {status}"
    return None


def probe_url_for(link: str) -> str:
    """Map a reproduction link to the URL whose status tells if it exists.

    CodeSandbox answers 200 for any devbox page, so devbox links are checked
    against the sandbox API instead. The sandbox id is the slug after its
    last ``-``.
    """
    parts = urlsplit(link)
    if parts.hostname != CODESANDBOX_HOST:
        return link
    match = CODESANDBOX_DEVBOX_PATH.match(parts.path)
    if match is None:
        return link
    sandbox_id = match.group("slug").rsplit("-", 1)[-1]
    return CODESANDBOX_API_TEMPLATE.format(sandbox_id=sandbox_id)

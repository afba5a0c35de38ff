"""Decode GitHub webhook payloads into triage events."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from issuewarden.exceptions import EventParseError
from issuewarden.io.json_io import load_json_object
from issuewarden.model import (
    Comment,
    CommentCreated,
    Event,
    Issue,
    IssueLabeled,
    IssueOpened,
    Label,
    Repository,
)

logger = logging.getLogger(__name__)


def load_event(path: Path, event_name: str, *, repository: str | None = None) -> Event | None:
    """Read the payload file at ``path`` and decode it.

    Returns None for events the pipeline does not handle.
    """
    try:
        payload = load_json_object(path)
    except FileNotFoundError as exc:
        raise EventParseError(f"event payload not found: {path}") from exc
    except (OSError, ValueError) as exc:
        raise EventParseError(f"could not read event payload {path}: {exc}") from exc
    return parse_event(payload, event_name, repository=repository)


def parse_event(
    payload: Mapping[str, Any],
    event_name: str,
    *,
    repository: str | None = None,
) -> Event | None:
    """Map a webhook payload to an event, or None when there is nothing to classify.

    ``repository`` (``owner/repo``) is used when the payload carries no
    repository object.
    """
    action = payload.get("action")
    if (event_name, action) not in {("issues", "opened"), ("issues", "labeled"), ("issue_comment", "created")}:
        logger.info("Event %s/%s is not triaged", event_name, action)
        return None

    issue = _parse_issue(payload.get("issue"))
    repo = _parse_repository(payload.get("repository"), fallback=repository)

    if action == "opened":
        return IssueOpened(repository=repo, issue=issue)
    if action == "labeled":
        label = payload.get("label")
        if not isinstance(label, dict):
            raise EventParseError("labeled event has no label")
        return IssueLabeled(repository=repo, issue=issue, added_label=_parse_label(label))
    return CommentCreated(repository=repo, issue=issue, comment=_parse_comment(payload.get("comment")))


def _parse_issue(raw: object) -> Issue:
    if not isinstance(raw, dict):
        raise EventParseError("event payload has no issue")
    number = raw.get("number")
    if not isinstance(number, int) or isinstance(number, bool):
        raise EventParseError("issue has no number")
    labels = raw.get("labels") or []
    if not isinstance(labels, list):
        raise EventParseError(f"issue #{number} labels must be a list")
    user = raw.get("user") if isinstance(raw.get("user"), dict) else {}
    return Issue(
        number=number,
        title=_text(raw.get("title")),
        body=_text(raw.get("body")),
        labels=tuple(_parse_label(label) for label in labels if isinstance(label, dict)),
        author_association=_text(raw.get("author_association")) or "NONE",
        node_id=_text(raw.get("node_id")),
        author_login=_text(user.get("login")),
        author_url=_text(user.get("html_url")),
        html_url=_text(raw.get("html_url")),
    )


def _parse_label(raw: Mapping[str, Any]) -> Label:
    name = raw.get("name")
    if not isinstance(name, str):
        raise EventParseError("label has no name")
    description = raw.get("description")
    return Label(name=name, description=description if isinstance(description, str) and description else None)


def _parse_comment(raw: object) -> Comment:
    if not isinstance(raw, dict):
        raise EventParseError("comment event has no comment")
    comment_id = raw.get("id")
    if not isinstance(comment_id, int) or isinstance(comment_id, bool):
        raise EventParseError("comment has no id")
    return Comment(
        id=comment_id,
        node_id=_text(raw.get("node_id")),
        body=_text(raw.get("body")),
        author_association=_text(raw.get("author_association")) or "NONE",
    )


def _parse_repository(raw: object, *, fallback: str | None) -> Repository:
    if isinstance(raw, dict) and isinstance(raw.get("full_name"), str):
        full_name = raw["full_name"]
        return Repository(full_name=full_name, html_url=_text(raw.get("html_url")) or f"https://github.com/{full_name}")
    if fallback:
        return Repository(full_name=fallback, html_url=f"https://github.com/{fallback}")
    raise EventParseError("event payload has no repository")


def _text(value: object) -> str:
    return value if isinstance(value, str) else ""

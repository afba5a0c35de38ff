"""Closed union of the events the triage pipeline understands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from issuewarden.model.entities import Comment, Issue, Label, Repository
from issuewarden.types.common import EventKind


@dataclass(frozen=True)
class IssueOpened:
    """An issue was opened."""

    kind: ClassVar[EventKind] = "issue_opened"

    repository: Repository
    issue: Issue


@dataclass(frozen=True)
class IssueLabeled:
    """A label was added to an issue."""

    kind: ClassVar[EventKind] = "issue_labeled"

    repository: Repository
    issue: Issue
    added_label: Label


@dataclass(frozen=True)
class CommentCreated:
    """A comment was created on an issue."""

    kind: ClassVar[EventKind] = "comment_created"

    repository: Repository
    issue: Issue
    comment: Comment


Event: TypeAlias = IssueOpened | IssueLabeled | CommentCreated

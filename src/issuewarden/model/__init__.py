"""Core data models for issuewarden."""

from .actions import (
    Action,
    AddLabels,
    CloseIssue,
    CreateComment,
    DeleteIssue,
    LockIssue,
    MinimizeComment,
    PostWebhook,
    UpdateComment,
)
from .entities import Comment, Issue, Label, Repository
from .events import CommentCreated, Event, IssueLabeled, IssueOpened
from .results import ActionOutcome, ActionStatus, Match, NoMatch, RuleOutcome, TriageResult, Verdict

__all__ = [
    "Action",
    "ActionOutcome",
    "ActionStatus",
    "AddLabels",
    "CloseIssue",
    "Comment",
    "CommentCreated",
    "CreateComment",
    "DeleteIssue",
    "Event",
    "Issue",
    "IssueLabeled",
    "IssueOpened",
    "Label",
    "LockIssue",
    "Match",
    "MinimizeComment",
    "NoMatch",
    "PostWebhook",
    "Repository",
    "RuleOutcome",
    "TriageResult",
    "UpdateComment",
    "Verdict",
]

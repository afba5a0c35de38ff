"""Shared pytest fixtures for triage tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from issuewarden.config import WardenConfig
from issuewarden.gateway.tracker import FakeIssueTracker
from issuewarden.gateway.web import FakeWebClient
from issuewarden.model import Comment, CommentCreated, Issue, IssueLabeled, IssueOpened, Label, Repository
from issuewarden.rules import RuleContext

REPRO_BODY: str = (
    "### Describe the bug\n\nIt crashes.\n\n"
    "### Link to reproduction\n\n{link}\n\n"
    "### To reproduce\n\n1. npm run dev\n"
)


@pytest.fixture()
def repository() -> Repository:
    return Repository(full_name="acme/widgets", html_url="https://github.com/acme/widgets")


@pytest.fixture()
def tracker() -> FakeIssueTracker:
    return FakeIssueTracker()


@pytest.fixture()
def web() -> FakeWebClient:
    return FakeWebClient()


@pytest.fixture()
def repro_body() -> Callable[[str], str]:
    """Return a builder for an issue body whose reproduction section holds ``link``."""
    return lambda link: REPRO_BODY.format(link=link)


@pytest.fixture()
def opened(repository: Repository) -> Callable[..., IssueOpened]:
    def _make(
        body: str = "",
        *,
        title: str = "Widget crashes",
        number: int = 12,
        labels: tuple[str, ...] = (),
    ) -> IssueOpened:
        issue = Issue(
            number=number,
            title=title,
            body=body,
            labels=tuple(Label(name=name) for name in labels),
            node_id=f"I_node{number}",
            author_login="octocat",
            author_url="https://github.com/octocat",
            html_url=f"{repository.html_url}/issues/{number}",
        )
        return IssueOpened(repository=repository, issue=issue)

    return _make


@pytest.fixture()
def labeled(repository: Repository) -> Callable[..., IssueLabeled]:
    def _make(added: str, *, current: tuple[str, ...] | None = None, number: int = 7) -> IssueLabeled:
        names = current if current is not None else (added,)
        issue = Issue(number=number, title="t", body="b", labels=tuple(Label(name=n) for n in names))
        return IssueLabeled(repository=repository, issue=issue, added_label=Label(name=added))

    return _make


@pytest.fixture()
def commented(repository: Repository) -> Callable[..., CommentCreated]:
    def _make(body: str, *, association: str = "NONE", comment_id: int = 99) -> CommentCreated:
        issue = Issue(number=3, title="t", body="b")
        comment = Comment(id=comment_id, node_id=f"IC_node{comment_id}", body=body, author_association=association)
        return CommentCreated(repository=repository, issue=issue, comment=comment)

    return _make


@pytest.fixture()
def make_context(tmp_path: Path, tracker: FakeIssueTracker, web: FakeWebClient) -> Callable[..., RuleContext]:
    """Build a rule context over the shared fakes with ``tmp_path`` as workspace."""

    def _make(
        config: WardenConfig | None = None,
        *,
        tracker_override: FakeIssueTracker | None = None,
        web_override: FakeWebClient | None = None,
    ) -> RuleContext:
        return RuleContext(
            config=config or WardenConfig(workspace=tmp_path),
            tracker=tracker_override or tracker,
            web=web_override or web,
        )

    return _make

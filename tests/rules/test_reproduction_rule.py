"""Tests for the reproduction link validator."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

import httpx
import pytest

from issuewarden.config import WardenConfig
from issuewarden.gateway.web import FakeWebClient, HttpxWebClient
from issuewarden.model import AddLabels, CloseIssue, CreateComment, IssueOpened, LockIssue, Match, NoMatch
from issuewarden.rules import ReproductionRule, RuleContext
from issuewarden.rules.reproduction import probe_url_for
from issuewarden.types.config import ReproductionConfig

LINK = "https://github.com/acme/repro"


def _config(tmp_path: Path, **overrides: object) -> WardenConfig:
    return WardenConfig(workspace=tmp_path, reproduction=replace(ReproductionConfig(), **overrides))


def test_valid_reproduction_is_no_match(
    opened: Callable[..., IssueOpened],
    repro_body: Callable[[str], str],
    make_context: Callable[..., RuleContext],
    web: FakeWebClient,
) -> None:
    verdict = ReproductionRule().evaluate(event=opened(repro_body(LINK)), context=make_context())

    assert isinstance(verdict, NoMatch)
    assert web.fetched == [LINK]


def test_missing_link_section_closes_labels_comments_and_locks(
    opened: Callable[..., IssueOpened],
    make_context: Callable[..., RuleContext],
    web: FakeWebClient,
) -> None:
    verdict = ReproductionRule().evaluate(event=opened("Just a description"), context=make_context())

    assert isinstance(verdict, Match)
    assert [type(action) for action in verdict.actions] == [CloseIssue, AddLabels, CreateComment, LockIssue]
    assert verdict.actions[1] == AddLabels(issue_number=12, labels=("invalid-reproduction",))
    assert web.fetched == []


def test_comment_is_read_from_workspace_file(
    tmp_path: Path,
    opened: Callable[..., IssueOpened],
    make_context: Callable[..., RuleContext],
) -> None:
    template = tmp_path / ".github" / "invalid-reproduction.md"
    template.parent.mkdir()
    template.write_text("Please add a reproduction.\n", encoding="utf-8")

    verdict = ReproductionRule().evaluate(event=opened("no link"), context=make_context())

    assert isinstance(verdict, Match)
    assert verdict.actions[2] == CreateComment(issue_number=12, body="Please add a reproduction.\n")


def test_literal_comment_is_used_when_no_file_exists(
    tmp_path: Path,
    opened: Callable[..., IssueOpened],
    make_context: Callable[..., RuleContext],
) -> None:
    config = _config(tmp_path, comment="We need a minimal reproduction to help you.")

    verdict = ReproductionRule().evaluate(event=opened("no link"), context=make_context(config))

    assert isinstance(verdict, Match)
    assert verdict.actions[2] == CreateComment(issue_number=12, body="We need a minimal reproduction to help you.")


@pytest.mark.parametrize(
    "link",
    ["not a url", "github.com/acme/repro", "https://gitlab.com/acme/repro", "https://GITHUB.example/x"],
    ids=["garbage", "no_scheme", "wrong_host", "lookalike_host"],
)
def test_invalid_links_match_without_probing(
    link: str,
    opened: Callable[..., IssueOpened],
    repro_body: Callable[[str], str],
    make_context: Callable[..., RuleContext],
    web: FakeWebClient,
) -> None:
    verdict = ReproductionRule().evaluate(event=opened(repro_body(link)), context=make_context())

    assert isinstance(verdict, Match)
    assert web.fetched == []


def test_blocklisted_link_matches(
    tmp_path: Path,
    opened: Callable[..., IssueOpened],
    repro_body: Callable[[str], str],
    make_context: Callable[..., RuleContext],
) -> None:
    config = _config(tmp_path, blocklist=(re.compile(r"github\.com/acme/widgets/?$"),))

    verdict = ReproductionRule().evaluate(
        event=opened(repro_body("https://github.com/acme/widgets")),
        context=make_context(config),
    )

    assert isinstance(verdict, Match)
    assert verdict.reason == "blocklisted link"


@pytest.mark.parametrize(
    ("status", "matched"),
    [(200, False), (302, False), (399, False), (403, True), (404, True), (500, False), (503, False)],
)
def test_probe_status_decides_reachability(
    status: int,
    matched: bool,
    opened: Callable[..., IssueOpened],
    repro_body: Callable[[str], str],
    make_context: Callable[..., RuleContext],
) -> None:
    web = FakeWebClient(default_status=status)

    verdict = ReproductionRule().evaluate(event=opened(repro_body(LINK)), context=make_context(web_override=web))

    assert verdict.matched is matched


def test_network_failure_is_invalid(
    opened: Callable[..., IssueOpened],
    repro_body: Callable[[str], str],
    make_context: Callable[..., RuleContext],
) -> None:
    web = FakeWebClient(unreachable=frozenset({LINK}))

    verdict = ReproductionRule().evaluate(event=opened(repro_body(LINK)), context=make_context(web_override=web))

    assert isinstance(verdict, Match)
    assert verdict.reason == "link unreachable"


def test_empty_body_is_nothing_to_classify(
    opened: Callable[..., IssueOpened],
    make_context: Callable[..., RuleContext],
) -> None:
    verdict = ReproductionRule().evaluate(event=opened(""), context=make_context())

    assert isinstance(verdict, NoMatch)


@pytest.mark.parametrize(
    ("issue_labels", "labels", "applies"),
    [
        (frozenset(), (), True),
        (frozenset({"bug"}), ("bug", "ui"), True),
        (frozenset({"bug"}), ("question",), False),
        (frozenset({"bug"}), (), False),
        (frozenset({"bug", ""}), (), True),
    ],
    ids=["all", "listed_label", "other_label", "unlabeled_excluded", "unlabeled_included"],
)
def test_issue_label_scope(
    tmp_path: Path,
    issue_labels: frozenset[str],
    labels: tuple[str, ...],
    applies: bool,
    opened: Callable[..., IssueOpened],
    make_context: Callable[..., RuleContext],
) -> None:
    config = _config(tmp_path, issue_labels=issue_labels)

    verdict = ReproductionRule().evaluate(event=opened("no link", labels=labels), context=make_context(config))

    assert verdict.matched is applies


def test_codesandbox_devbox_is_probed_through_the_api(
    tmp_path: Path,
    opened: Callable[..., IssueOpened],
    repro_body: Callable[[str], str],
    make_context: Callable[..., RuleContext],
) -> None:
    web = FakeWebClient(statuses={"https://codesandbox.io/api/v1/sandboxes/x7k2p9": 404})
    config = _config(tmp_path, hosts=("codesandbox.io",))

    verdict = ReproductionRule().evaluate(
        event=opened(repro_body("https://codesandbox.io/p/devbox/my-next-app-x7k2p9")),
        context=make_context(config, web_override=web),
    )

    assert isinstance(verdict, Match)
    assert web.fetched == ["https://codesandbox.io/api/v1/sandboxes/x7k2p9"]


@pytest.mark.parametrize(
    ("link", "expected"),
    [
        ("https://codesandbox.io/p/devbox/abc123", "https://codesandbox.io/api/v1/sandboxes/abc123"),
        ("https://codesandbox.io/p/devbox/a-b-c?file=/x.ts", "https://codesandbox.io/api/v1/sandboxes/c"),
        ("https://codesandbox.io/s/abc123", "https://codesandbox.io/s/abc123"),
        ("https://github.com/p/devbox/abc", "https://github.com/p/devbox/abc"),
    ],
)
def test_probe_url_for(link: str, expected: str) -> None:
    assert probe_url_for(link) == expected


def test_link_followed_by_text_on_next_line_is_probed_as_one_url(
    opened: Callable[..., IssueOpened],
    repro_body: Callable[[str], str],
    make_context: Callable[..., RuleContext],
    web: FakeWebClient,
) -> None:
    body = repro_body("https://github.com/acme/demo\nRun npm dev to see it.")

    verdict = ReproductionRule().evaluate(event=opened(body), context=make_context())

    assert isinstance(verdict, NoMatch)
    assert web.fetched == ["https://github.com/acme/demoRun npm dev to see it."]


def test_link_followed_by_text_does_not_crash_real_client(
    opened: Callable[..., IssueOpened],
    repro_body: Callable[[str], str],
    make_context: Callable[..., RuleContext],
) -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(404)

    web = HttpxWebClient(client=httpx.Client(transport=httpx.MockTransport(handler)))
    body = repro_body("https://github.com/acme/demo\nRun npm dev to see it.")

    verdict = ReproductionRule().evaluate(event=opened(body), context=make_context(web_override=web))

    assert isinstance(verdict, Match)
    assert verdict.reason == "link returned 404"
    assert len(requested) == 1
    assert requested[0].startswith("https://github.com/acme/demoRun")

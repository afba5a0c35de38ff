"""Tests for the label-triggered commenter."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from issuewarden.config import WardenConfig
from issuewarden.model import CreateComment, IssueLabeled, Match, NoMatch
from issuewarden.rules import LabelCommentRule, RuleContext
from issuewarden.types.config import LabelCommentConfig


def _config(tmp_path: Path, mapping: dict[str, str]) -> WardenConfig:
    return WardenConfig(workspace=tmp_path, label_comments=LabelCommentConfig(mapping=mapping))


def test_mapped_label_posts_file_contents(
    tmp_path: Path,
    labeled: Callable[..., IssueLabeled],
    make_context: Callable[..., RuleContext],
) -> None:
    (tmp_path / "needs-repro.md").write_text("Please share a reproduction.", encoding="utf-8")
    config = _config(tmp_path, {"needs repro": "needs-repro.md"})

    verdict = LabelCommentRule().evaluate(event=labeled("needs repro"), context=make_context(config))

    assert isinstance(verdict, Match)
    assert verdict.actions == (CreateComment(issue_number=7, body="Please share a reproduction."),)


def test_literal_comment_round_trips_unchanged(
    tmp_path: Path,
    labeled: Callable[..., IssueLabeled],
    make_context: Callable[..., RuleContext],
) -> None:
    text = "Thanks! This is now tracked on the roadmap.\n\nSee the discussion for details."
    config = _config(tmp_path, {"roadmap": text})

    verdict = LabelCommentRule().evaluate(event=labeled("roadmap"), context=make_context(config))

    assert isinstance(verdict, Match)
    assert verdict.actions[0] == CreateComment(issue_number=7, body=text)


def test_unmapped_labels_are_no_match(
    tmp_path: Path,
    labeled: Callable[..., IssueLabeled],
    make_context: Callable[..., RuleContext],
) -> None:
    config = _config(tmp_path, {"needs repro": "x"})

    verdict = LabelCommentRule().evaluate(event=labeled("bug", current=("bug", "ui")), context=make_context(config))

    assert isinstance(verdict, NoMatch)
    assert verdict.reason == "no mapped label"


def test_unmapped_added_label_on_mapped_issue_posts_nothing(
    tmp_path: Path,
    labeled: Callable[..., IssueLabeled],
    make_context: Callable[..., RuleContext],
) -> None:
    config = _config(tmp_path, {"needs repro": "x"})

    verdict = LabelCommentRule().evaluate(
        event=labeled("bug", current=("needs repro", "bug")),
        context=make_context(config),
    )

    assert isinstance(verdict, NoMatch)
    assert verdict.reason == "added label is not mapped"


def test_rule_is_disabled_with_empty_mapping(tmp_path: Path) -> None:
    assert LabelCommentRule().enabled(_config(tmp_path, {})) is False
    assert LabelCommentRule().enabled(WardenConfig(workspace=tmp_path)) is True

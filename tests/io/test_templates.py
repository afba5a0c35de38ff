"""Tests for file-or-literal comment templates."""

from __future__ import annotations

from pathlib import Path

import pytest

from issuewarden.io import read_comment_template


def test_reads_file_relative_to_workspace(tmp_path: Path) -> None:
    (tmp_path / ".github").mkdir()
    (tmp_path / ".github" / "comment.md").write_text("# Hello\n", encoding="utf-8")

    assert read_comment_template(".github/comment.md", tmp_path) == "# Hello\n"


@pytest.mark.parametrize(
    "literal",
    [
        "Please provide a reproduction.",
        "See https://nextjs.org/docs/community/contribution-guide for details",
        "x" * 600,
        "Line one\n\nLine two",
    ],
    ids=["sentence", "with_url", "too_long_for_a_filename", "multiline"],
)
def test_literal_text_round_trips(tmp_path: Path, literal: str) -> None:
    assert read_comment_template(literal, tmp_path) == literal


def test_other_read_errors_propagate(tmp_path: Path) -> None:
    (tmp_path / "folder").mkdir()

    with pytest.raises(IsADirectoryError):
        read_comment_template("folder", tmp_path)


def test_leading_slash_is_relative_to_workspace(tmp_path: Path) -> None:
    (tmp_path / "comment.md").write_text("From the workspace\n", encoding="utf-8")

    assert read_comment_template("/comment.md", tmp_path) == "From the workspace\n"


@pytest.mark.parametrize(
    "literal",
    ["/etc/hostname", "/ please add a reproduction", "Nul\x00byte"],
    ids=["absolute_system_path", "leading_slash_sentence", "nul_byte"],
)
def test_values_outside_workspace_are_literal(tmp_path: Path, literal: str) -> None:
    assert read_comment_template(literal, tmp_path) == literal


def test_undecodable_file_propagates(tmp_path: Path) -> None:
    (tmp_path / "comment.md").write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(UnicodeDecodeError):
        read_comment_template("comment.md", tmp_path)

"""Tests for the stdout summary."""

from __future__ import annotations

from issuewarden.model import ActionOutcome, RuleOutcome, TriageResult
from issuewarden.reporting import StdoutReporter


def _result(**overrides: object) -> TriageResult:
    values: dict[str, object] = {
        "event_kind": "issue_opened",
        "repository": "acme/widgets",
        "issue_number": 12,
        "outcomes": (
            RuleOutcome(rule_id="VULNERABILITY_DISCLOSURE", matched=False, reason="no disclosure keywords"),
            RuleOutcome(
                rule_id="INVALID_REPRODUCTION",
                matched=True,
                reason="missing link",
                actions=(
                    ActionOutcome(kind="close_issue", target="issue #12", status="ok"),
                    ActionOutcome(kind="add_labels", target="issue #12", status="failed", error="rate limit"),
                    ActionOutcome(kind="create_comment", target="issue #12", status="skipped"),
                ),
            ),
        ),
        "duration_seconds": 0.25,
    }
    values.update(overrides)
    return TriageResult(**values)  # type: ignore[arg-type]


def test_render_without_color() -> None:
    output = StdoutReporter(_result(), color=False).render()

    assert "Triage summary" in output
    assert "Event       issue_opened" in output
    assert "Issue       #12" in output
    assert "Matched     INVALID_REPRODUCTION" in output
    assert "no match (no disclosure keywords)" in output
    assert "failed: rate limit" in output
    assert "skipped" in output
    assert "\033[" not in output


def test_render_with_color_uses_ansi() -> None:
    output = StdoutReporter(_result(), color=True).render()

    assert "\033[31mfailed\033[0m" in output


def test_render_shows_dry_run_and_skipped_rules() -> None:
    output = StdoutReporter(_result(dry_run=True, skipped_rules=("AREA_LABELS",)), color=False).render()

    assert "Mode        dry run" in output
    assert "Skipped     AREA_LABELS" in output


def test_render_empty_result() -> None:
    output = StdoutReporter(TriageResult(event_kind=None), color=False).render()

    assert "Event       none" in output
    assert "Matched     none" in output
    assert "Rules\n" not in output

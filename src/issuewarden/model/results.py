"""Rule verdicts and the outcome records of a triage run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Literal, TypeAlias

from issuewarden.model.actions import Action
from issuewarden.types.common import ActionKind, EventKind

ActionStatus: TypeAlias = Literal["ok", "failed", "skipped"]


@dataclass(frozen=True)
class NoMatch:
    """The rule did not fire; nothing is dispatched."""

    matched: ClassVar[bool] = False

    reason: str = ""


@dataclass(frozen=True)
class Match:
    """The rule fired; ``actions`` are dispatched in order."""

    matched: ClassVar[bool] = True

    actions: tuple[Action, ...]
    reason: str = ""


Verdict: TypeAlias = NoMatch | Match


@dataclass(frozen=True)
class ActionOutcome:
    """What happened to one dispatched action."""

    kind: ActionKind
    target: str
    status: ActionStatus
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> dict[str, object]:
        return {"kind": self.kind, "target": self.target, "status": self.status, "error": self.error}


@dataclass(frozen=True)
class RuleOutcome:
    """Verdict of one rule plus the outcomes of its dispatched actions."""

    rule_id: str
    matched: bool
    reason: str = ""
    actions: tuple[ActionOutcome, ...] = ()

    @property
    def failed_actions(self) -> int:
        return sum(1 for outcome in self.actions if outcome.status == "failed")

    def to_dict(self) -> dict[str, object]:
        return {
            "rule_id": self.rule_id,
            "matched": self.matched,
            "reason": self.reason,
            "actions": [outcome.to_dict() for outcome in self.actions],
        }


@dataclass(frozen=True)
class TriageResult:
    """Aggregated result of triaging a single event."""

    event_kind: EventKind | None
    repository: str = ""
    issue_number: int | None = None
    outcomes: tuple[RuleOutcome, ...] = ()
    skipped_rules: tuple[str, ...] = ()
    duration_seconds: float = 0.0
    dry_run: bool = False
    notes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def matched_rules(self) -> tuple[str, ...]:
        return tuple(outcome.rule_id for outcome in self.outcomes if outcome.matched)

    def to_dict(self) -> dict[str, object]:
        return {
            "event_kind": self.event_kind,
            "repository": self.repository,
            "issue_number": self.issue_number,
            "dry_run": self.dry_run,
            "duration_seconds": round(self.duration_seconds, 3),
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
            "skipped_rules": list(self.skipped_rules),
            "notes": list(self.notes),
        }

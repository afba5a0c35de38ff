"""Triage rules and the per-event rule order."""

from __future__ import annotations

from issuewarden.rules.area_labels import AreaLabelRule
from issuewarden.rules.base import Rule, RuleContext
from issuewarden.rules.extract import extract_section
from issuewarden.rules.label_comments import LabelCommentRule
from issuewarden.rules.reproduction import ReproductionRule
from issuewarden.rules.unhelpful import UnhelpfulCommentRule
from issuewarden.rules.vulnerability import VulnerabilityRule
from issuewarden.types.common import EventKind

RULE_CLASSES: tuple[type[Rule], ...] = (
    VulnerabilityRule,
    ReproductionRule,
    AreaLabelRule,
    LabelCommentRule,
    UnhelpfulCommentRule,
)


def build_rules(kind: EventKind) -> list[Rule]:
    """Instantiate the rules for one event kind, in evaluation order."""
    return [rule_class() for rule_class in RULE_CLASSES if rule_class.applies_to == kind]


__all__ = [
    "RULE_CLASSES",
    "AreaLabelRule",
    "LabelCommentRule",
    "ReproductionRule",
    "Rule",
    "RuleContext",
    "UnhelpfulCommentRule",
    "VulnerabilityRule",
    "build_rules",
    "extract_section",
]

"""Stable validation error codes and allowed-key sets for triage configuration."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level or section value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # regular expression does not compile
CFG009: str = "CFG009"  # invalid JSON in environment input
CFG010: str = "CFG010"  # workspace directory not found

ALLOWED_SECTION_KEYS: dict[str, frozenset[str]] = {
    "reproduction": frozenset(
        {"comment", "hosts", "blocklist", "invalid_label", "issue_labels", "link_section"}
    ),
    "comments": frozenset(
        {
            "unhelpful_weight",
            "add_explainer",
            "exempt_associations",
            "noise_pattern",
            "still_happening_pattern",
            "link_pattern",
        }
    ),
    "area_labels": frozenset({"prefix", "section", "match"}),
    "vulnerability": frozenset({"webhook_url", "webhook_secret", "delete_report", "disclosure_pattern"}),
}

# label_comments is a free-form label -> comment mapping, not a keyed section.
ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({*ALLOWED_SECTION_KEYS, "label_comments"})

PATTERN_KEYS: tuple[tuple[str, str], ...] = (
    ("reproduction", "link_section"),
    ("comments", "noise_pattern"),
    ("comments", "still_happening_pattern"),
    ("comments", "link_pattern"),
    ("area_labels", "section"),
    ("vulnerability", "disclosure_pattern"),
)

STRING_KEYS: tuple[tuple[str, str], ...] = (
    ("reproduction", "comment"),
    ("reproduction", "invalid_label"),
    ("area_labels", "prefix"),
    ("vulnerability", "webhook_url"),
    ("vulnerability", "webhook_secret"),
)

LIST_OF_STRINGS_KEYS: tuple[tuple[str, str], ...] = (
    ("reproduction", "hosts"),
    ("reproduction", "blocklist"),
    ("reproduction", "issue_labels"),
    ("comments", "exempt_associations"),
)

BOOLEAN_KEYS: tuple[tuple[str, str], ...] = (
    ("comments", "add_explainer"),
    ("vulnerability", "delete_report"),
)

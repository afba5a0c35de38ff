"""Typed per-rule configuration records.

Every regex-bearing field holds an already compiled pattern; the loader
compiles them eagerly so an invalid pattern surfaces as a configuration error
before any event is classified.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from re import Pattern

from issuewarden.constants.config import (
    DEFAULT_ADD_EXPLAINER,
    DEFAULT_AREA_MATCH,
    DEFAULT_AREA_PREFIX,
    DEFAULT_DELETE_REPORT,
    DEFAULT_EXEMPT_ASSOCIATIONS,
    DEFAULT_INVALID_LABEL,
    DEFAULT_LABEL_COMMENTS,
    DEFAULT_LINK_SECTION,
    DEFAULT_REPRODUCTION_COMMENT,
    DEFAULT_REPRODUCTION_HOSTS,
    DEFAULT_UNHELPFUL_WEIGHT,
    UNLABELED_SENTINEL,
)
from issuewarden.constants.patterns import (
    DISCLOSURE_PATTERN,
    LINK_PATTERN,
    NOISE_TOKEN_PATTERN,
    STILL_HAPPENING_PATTERN,
)
from issuewarden.types.common import AreaMatchMode

SECTION_FLAGS: int = re.IGNORECASE | re.DOTALL


@dataclass(frozen=True)
class ReproductionConfig:
    """Settings for the reproduction-link validator."""

    comment: str = DEFAULT_REPRODUCTION_COMMENT
    hosts: tuple[str, ...] = DEFAULT_REPRODUCTION_HOSTS
    blocklist: tuple[Pattern[str], ...] = ()
    invalid_label: str = DEFAULT_INVALID_LABEL
    link_section: Pattern[str] = re.compile(DEFAULT_LINK_SECTION, SECTION_FLAGS)
    issue_labels: frozenset[str] = frozenset()

    @property
    def includes_unlabeled(self) -> bool:
        """Whether issues without any label are in scope."""
        return UNLABELED_SENTINEL in self.issue_labels

    def applies_to_labels(self, label_names: tuple[str, ...]) -> bool:
        """Return True when an issue with these labels should be validated."""
        if not self.issue_labels:
            return True
        if not label_names:
            return self.includes_unlabeled
        return any(name in self.issue_labels for name in label_names)


@dataclass(frozen=True)
class CommentConfig:
    """Settings for the unhelpful-comment detector."""

    unhelpful_weight: float = DEFAULT_UNHELPFUL_WEIGHT
    add_explainer: bool = DEFAULT_ADD_EXPLAINER
    exempt_associations: frozenset[str] = frozenset(DEFAULT_EXEMPT_ASSOCIATIONS)
    noise_pattern: Pattern[str] = re.compile(NOISE_TOKEN_PATTERN, re.IGNORECASE)
    still_happening_pattern: Pattern[str] = re.compile(STILL_HAPPENING_PATTERN, re.IGNORECASE)
    link_pattern: Pattern[str] = re.compile(LINK_PATTERN, re.IGNORECASE)


@dataclass(frozen=True)
class AreaLabelConfig:
    """Settings for the area auto-labeler. Disabled when ``section`` is None."""

    section: Pattern[str] | None = None
    prefix: str = DEFAULT_AREA_PREFIX
    match: AreaMatchMode = DEFAULT_AREA_MATCH  # type: ignore[assignment]


@dataclass(frozen=True)
class LabelCommentConfig:
    """Label name -> comment file path or literal comment text, in insertion order."""

    mapping: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LABEL_COMMENTS))


@dataclass(frozen=True)
class VulnerabilityConfig:
    """Settings for the public vulnerability-disclosure detector."""

    webhook_url: str | None = None
    webhook_secret: str | None = None
    delete_report: bool = DEFAULT_DELETE_REPORT
    disclosure_pattern: Pattern[str] = re.compile(DISCLOSURE_PATTERN, re.IGNORECASE)

    @property
    def enabled(self) -> bool:
        """Detection only runs when both webhook URL and secret are configured."""
        return bool(self.webhook_url) and bool(self.webhook_secret)

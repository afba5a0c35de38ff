"""Config data model for issuewarden runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from issuewarden.types.config import (
    AreaLabelConfig,
    CommentConfig,
    LabelCommentConfig,
    ReproductionConfig,
    VulnerabilityConfig,
)

_REDACTED: str = "***"


@dataclass(frozen=True)
class WardenConfig:
    """Resolved triage config, built once per process and read-only afterwards."""

    workspace: Path = Path(".")
    reproduction: ReproductionConfig = ReproductionConfig()
    comments: CommentConfig = CommentConfig()
    area_labels: AreaLabelConfig = AreaLabelConfig()
    label_comments: LabelCommentConfig = LabelCommentConfig()
    vulnerability: VulnerabilityConfig = VulnerabilityConfig()

    def describe(self) -> dict[str, object]:
        """Return a log-safe summary of the effective configuration."""
        area_section = self.area_labels.section.pattern if self.area_labels.section is not None else None
        return {
            "workspace": str(self.workspace),
            "reproduction": {
                "comment": self.reproduction.comment,
                "hosts": list(self.reproduction.hosts),
                "blocklist": [pattern.pattern for pattern in self.reproduction.blocklist],
                "invalid_label": self.reproduction.invalid_label,
                "issue_labels": sorted(self.reproduction.issue_labels),
                "link_section": self.reproduction.link_section.pattern,
            },
            "comments": {
                "unhelpful_weight": self.comments.unhelpful_weight,
                "add_explainer": self.comments.add_explainer,
                "exempt_associations": sorted(self.comments.exempt_associations),
            },
            "label_comments": dict(self.label_comments.mapping),
            "area_labels": {
                "prefix": self.area_labels.prefix,
                "section": area_section,
                "match": self.area_labels.match,
            },
            "vulnerability": {
                "webhook_url": _REDACTED if self.vulnerability.webhook_url else None,
                "webhook_secret": _REDACTED if self.vulnerability.webhook_secret else None,
                "delete_report": self.vulnerability.delete_report,
            },
        }

"""Shared type aliases and configuration records for issuewarden."""

from .common import ActionKind, AreaMatchMode, EventKind, JsonObject, JsonScalar, JsonValue
from .config import (
    AreaLabelConfig,
    CommentConfig,
    LabelCommentConfig,
    ReproductionConfig,
    VulnerabilityConfig,
)

__all__ = [
    "ActionKind",
    "AreaLabelConfig",
    "AreaMatchMode",
    "CommentConfig",
    "EventKind",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "LabelCommentConfig",
    "ReproductionConfig",
    "VulnerabilityConfig",
]

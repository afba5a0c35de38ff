"""Config loading and normalization for issuewarden runs."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from issuewarden.config.model import WardenConfig
from issuewarden.config.validator import RawConfig, resolve_raw_config
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
)
from issuewarden.constants.patterns import (
    DISCLOSURE_PATTERN,
    LINK_PATTERN,
    NOISE_TOKEN_PATTERN,
    STILL_HAPPENING_PATTERN,
)
from issuewarden.exceptions import ConfigError
from issuewarden.exceptions.validation import format_errors
from issuewarden.types.config import (
    SECTION_FLAGS,
    AreaLabelConfig,
    CommentConfig,
    LabelCommentConfig,
    ReproductionConfig,
    VulnerabilityConfig,
)

logger = logging.getLogger(__name__)


def load_config(
    workspace: Path,
    config_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> WardenConfig:
    """Load, validate and compile triage config.

    Reads ``issuewarden.yaml`` from the workspace (or an explicit path) and
    applies ``INPUT_*`` overrides from ``environ`` (``os.environ`` when
    omitted). Every pattern is compiled here, so any problem surfaces as a
    single :class:`ConfigError` before an event is classified.
    """
    env = os.environ if environ is None else environ
    raw, errors = resolve_raw_config(
        workspace,
        config_path,
        config_explicit=config_path is not None,
        environ=env,
    )
    if errors:
        raise ConfigError(format_errors(errors))

    config = build_config(raw, workspace=workspace.resolve())
    logger.debug("Effective config: %s", config.describe())
    return config


def build_config(raw: RawConfig, *, workspace: Path) -> WardenConfig:
    """Build a :class:`WardenConfig` from an already validated raw mapping."""
    reproduction = raw.get("reproduction", {})
    comments = raw.get("comments", {})
    area = raw.get("area_labels", {})
    vulnerability = raw.get("vulnerability", {})
    label_comments = raw.get("label_comments")

    area_section = _optional_str(area.get("section"))

    return WardenConfig(
        workspace=workspace,
        reproduction=ReproductionConfig(
            comment=_str_or(reproduction.get("comment"), DEFAULT_REPRODUCTION_COMMENT),
            hosts=tuple(h.strip() for h in _list_or(reproduction.get("hosts"), DEFAULT_REPRODUCTION_HOSTS) if h.strip()),
            blocklist=tuple(_compile(entry) for entry in reproduction.get("blocklist") or () if entry.strip()),
            invalid_label=_str_or(reproduction.get("invalid_label"), DEFAULT_INVALID_LABEL),
            link_section=_compile(_str_or(reproduction.get("link_section"), DEFAULT_LINK_SECTION), SECTION_FLAGS),
            issue_labels=frozenset(label.strip() for label in reproduction.get("issue_labels") or ()),
        ),
        comments=CommentConfig(
            unhelpful_weight=float(_value_or(comments.get("unhelpful_weight"), DEFAULT_UNHELPFUL_WEIGHT)),
            add_explainer=bool(_value_or(comments.get("add_explainer"), DEFAULT_ADD_EXPLAINER)),
            exempt_associations=frozenset(
                association.upper()
                for association in _list_or(comments.get("exempt_associations"), DEFAULT_EXEMPT_ASSOCIATIONS)
            ),
            noise_pattern=_compile(_str_or(comments.get("noise_pattern"), NOISE_TOKEN_PATTERN), re.IGNORECASE),
            still_happening_pattern=_compile(
                _str_or(comments.get("still_happening_pattern"), STILL_HAPPENING_PATTERN),
                re.IGNORECASE,
            ),
            link_pattern=_compile(_str_or(comments.get("link_pattern"), LINK_PATTERN), re.IGNORECASE),
        ),
        area_labels=AreaLabelConfig(
            section=_compile(area_section, SECTION_FLAGS) if area_section else None,
            prefix=_value_or(area.get("prefix"), DEFAULT_AREA_PREFIX),
            match=_value_or(area.get("match"), DEFAULT_AREA_MATCH),
        ),
        label_comments=LabelCommentConfig(
            mapping=dict(label_comments) if label_comments is not None else dict(DEFAULT_LABEL_COMMENTS)
        ),
        vulnerability=VulnerabilityConfig(
            webhook_url=_optional_str(vulnerability.get("webhook_url")),
            webhook_secret=_optional_str(vulnerability.get("webhook_secret")),
            delete_report=bool(_value_or(vulnerability.get("delete_report"), DEFAULT_DELETE_REPORT)),
            disclosure_pattern=_compile(
                _str_or(vulnerability.get("disclosure_pattern"), DISCLOSURE_PATTERN),
                re.IGNORECASE,
            ),
        ),
    )


def _compile(pattern: str, flags: int = 0) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise ConfigError(f"invalid regular expression {pattern!r}: {exc}") from exc


def _value_or(value: Any, default: Any) -> Any:
    return default if value is None else value


def _str_or(value: str | None, default: str) -> str:
    """Fall back to ``default`` for unset or blank strings."""
    if value is None or not value.strip():
        return default
    return value


def _list_or(value: list[str] | None, default: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(default) if value is None else tuple(value)


def _optional_str(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()

"""GitHub Action style ``INPUT_*`` environment overrides.

Values arrive as plain strings. They are converted here into the same shapes
``issuewarden.yaml`` uses so both layers go through one validation path.
Empty inputs are treated as unset.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from issuewarden.constants.config import (
    ENV_COMMENT_ADD_EXPLAINER,
    ENV_COMMENT_UNHELPFUL_WEIGHT,
    ENV_DELETE_VULNERABILITY_REPORT,
    ENV_LABEL_AREA_MATCH,
    ENV_LABEL_AREA_PREFIX,
    ENV_LABEL_AREA_SECTION,
    ENV_LABEL_COMMENTS,
    ENV_REPRODUCTION_BLOCKLIST,
    ENV_REPRODUCTION_COMMENT,
    ENV_REPRODUCTION_HOSTS,
    ENV_REPRODUCTION_INVALID_LABEL,
    ENV_REPRODUCTION_ISSUE_LABELS,
    ENV_REPRODUCTION_LINK_SECTION,
    ENV_WEBHOOK_SECRET,
    ENV_WEBHOOK_URL,
    FALSE_STRINGS,
    TRUE_STRINGS,
)
from issuewarden.constants.validation import CFG005, CFG009
from issuewarden.exceptions.validation import ValidationError

# (env var, section, key) for inputs copied through as plain strings.
_STRING_INPUTS: tuple[tuple[str, str, str], ...] = (
    (ENV_REPRODUCTION_COMMENT, "reproduction", "comment"),
    (ENV_REPRODUCTION_INVALID_LABEL, "reproduction", "invalid_label"),
    (ENV_REPRODUCTION_LINK_SECTION, "reproduction", "link_section"),
    (ENV_LABEL_AREA_PREFIX, "area_labels", "prefix"),
    (ENV_LABEL_AREA_SECTION, "area_labels", "section"),
    (ENV_WEBHOOK_URL, "vulnerability", "webhook_url"),
    (ENV_WEBHOOK_SECRET, "vulnerability", "webhook_secret"),
)

_BOOLEAN_INPUTS: tuple[tuple[str, str, str], ...] = (
    (ENV_COMMENT_ADD_EXPLAINER, "comments", "add_explainer"),
    (ENV_DELETE_VULNERABILITY_REPORT, "vulnerability", "delete_report"),
)

_LIST_INPUTS: tuple[tuple[str, str, str], ...] = (
    (ENV_REPRODUCTION_HOSTS, "reproduction", "hosts"),
    (ENV_REPRODUCTION_BLOCKLIST, "reproduction", "blocklist"),
)


def env_source(name: str) -> str:
    """Return the validation ``source`` label for an environment variable."""
    return f"env:{name}"


def read_environment_inputs(
    environ: Mapping[str, str],
) -> tuple[dict[str, Any], dict[tuple[str, str], str], list[ValidationError]]:
    """Convert ``INPUT_*`` variables into a raw config layer.

    Returns the layer, the originating variable per ``(section, key)``, and any
    conversion errors.
    """
    layer: dict[str, Any] = {}
    origins: dict[tuple[str, str], str] = {}
    errors: list[ValidationError] = []

    def _set(name: str, section: str, key: str, value: Any) -> None:
        layer.setdefault(section, {})[key] = value
        origins[(section, key)] = env_source(name)

    for name, section, key in _STRING_INPUTS:
        value = environ.get(name, "")
        if value.strip():
            _set(name, section, key, value)

    for name, section, key in _LIST_INPUTS:
        value = environ.get(name, "")
        if value.strip():
            _set(name, section, key, _split_csv(value))

    issue_labels = environ.get(ENV_REPRODUCTION_ISSUE_LABELS, "")
    if issue_labels.strip():
        # A trailing comma leaves an empty entry, which is the "unlabeled" sentinel.
        _set(
            ENV_REPRODUCTION_ISSUE_LABELS,
            "reproduction",
            "issue_labels",
            [part.strip() for part in issue_labels.split(",")],
        )

    for name, section, key in _BOOLEAN_INPUTS:
        value = environ.get(name, "")
        if not value.strip():
            continue
        parsed = parse_bool(value)
        if parsed is None:
            errors.append(
                ValidationError(
                    code=CFG005,
                    source=env_source(name),
                    field="",
                    message=f"expected a boolean, got {value!r}",
                    hint="use true or false",
                )
            )
            continue
        _set(name, section, key, parsed)

    weight = environ.get(ENV_COMMENT_UNHELPFUL_WEIGHT, "")
    if weight.strip():
        try:
            _set(ENV_COMMENT_UNHELPFUL_WEIGHT, "comments", "unhelpful_weight", float(weight))
        except ValueError:
            errors.append(
                ValidationError(
                    code=CFG005,
                    source=env_source(ENV_COMMENT_UNHELPFUL_WEIGHT),
                    field="",
                    message=f"expected a number, got {weight!r}",
                )
            )

    area_match = environ.get(ENV_LABEL_AREA_MATCH, "")
    if area_match.strip():
        _set(ENV_LABEL_AREA_MATCH, "area_labels", "match", area_match.strip().lower())

    label_comments = environ.get(ENV_LABEL_COMMENTS, "")
    if label_comments.strip():
        try:
            layer["label_comments"] = json.loads(label_comments)
            origins[("label_comments", "")] = env_source(ENV_LABEL_COMMENTS)
        except json.JSONDecodeError as exc:
            errors.append(
                ValidationError(
                    code=CFG009,
                    source=env_source(ENV_LABEL_COMMENTS),
                    field="",
                    message=f"could not parse JSON: {exc.msg}",
                )
            )

    return layer, origins, errors


def parse_bool(value: str) -> bool | None:
    """Parse an action-style boolean string; ``None`` when unrecognised."""
    lowered = value.strip().lower()
    if lowered in TRUE_STRINGS:
        return True
    if lowered in FALSE_STRINGS:
        return False
    return None


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]

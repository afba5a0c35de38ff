"""Collect-all validation of ``issuewarden.yaml`` and environment inputs."""

from __future__ import annotations

import difflib
import re
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeAlias

import yaml

from issuewarden.config.environment import read_environment_inputs
from issuewarden.constants.config import CONFIG_FILENAME, VALID_AREA_MATCH_MODES
from issuewarden.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_SECTION_KEYS,
    BOOLEAN_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG010,
    LIST_OF_STRINGS_KEYS,
    PATTERN_KEYS,
    STRING_KEYS,
)
from issuewarden.exceptions.validation import ValidationError, sort_errors

RawConfig: TypeAlias = dict[str, Any]


def validate_config_file(
    workspace: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
    environ: Mapping[str, str] | None = None,
) -> list[ValidationError]:
    """Validate the config file and environment inputs, returning every problem.

    This is the entry point behind ``issuewarden validate-config`` and the
    preflight of :func:`issuewarden.config.load_config`. It never raises.
    """
    _, errors = resolve_raw_config(
        workspace,
        config_path,
        config_explicit=config_explicit,
        environ=environ,
    )
    return sort_errors(errors)


def resolve_raw_config(
    workspace: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
    environ: Mapping[str, str] | None = None,
) -> tuple[RawConfig, list[ValidationError]]:
    """Merge the config file with environment inputs and check every value."""
    errors: list[ValidationError] = []
    workspace = workspace.resolve()
    if not workspace.is_dir():
        errors.append(
            ValidationError(
                code=CFG010,
                source=str(workspace),
                field="",
                message=f"workspace directory does not exist: {workspace}",
            )
        )
        return {}, errors

    path = config_path.resolve() if config_path else (workspace / CONFIG_FILENAME)
    path_str = str(path)
    file_layer = _read_config_file(path, config_explicit=config_explicit, errors=errors)
    _check_structure(file_layer, path_str, errors)

    env_layer, env_origins, env_errors = read_environment_inputs(environ or {})
    errors.extend(env_errors)

    merged: RawConfig = {}
    for section in ALLOWED_SECTION_KEYS:
        values = file_layer.get(section)
        merged[section] = dict(values) if isinstance(values, dict) else {}
        merged[section].update(env_layer.get(section, {}))
    if "label_comments" in env_layer:
        merged["label_comments"] = env_layer["label_comments"]
    elif "label_comments" in file_layer:
        merged["label_comments"] = file_layer["label_comments"]

    def _origin(section: str, key: str) -> str:
        return env_origins.get((section, key), path_str)

    _check_values(merged, _origin, errors)
    return merged, errors


def _read_config_file(path: Path, *, config_explicit: bool, errors: list[ValidationError]) -> RawConfig:
    path_str = str(path)
    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    source=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return {}

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, source=path_str, field="", message=f"invalid YAML: {exc}"))
        return {}

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                source=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return {}
    return raw


def _check_structure(raw: RawConfig, path_str: str, errors: list[ValidationError]) -> None:
    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    source=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for section, allowed in ALLOWED_SECTION_KEYS.items():
        if section not in raw or raw[section] is None:
            continue
        values = raw[section]
        if not isinstance(values, dict):
            errors.append(
                ValidationError(
                    code=CFG003,
                    source=path_str,
                    field=section,
                    message=f"`{section}` must be a mapping, got {type(values).__name__}",
                )
            )
            raw[section] = {}
            continue
        for key in sorted(values.keys(), key=str):
            if key not in allowed:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        source=path_str,
                        field=f"{section}.{key}",
                        message=f"unknown key `{key}` in `{section}`",
                        hint=_suggest_key(str(key), allowed),
                    )
                )


def _check_values(
    merged: RawConfig,
    origin: Callable[[str, str], str],
    errors: list[ValidationError],
) -> None:
    for section, key in STRING_KEYS:
        value = merged[section].get(key)
        if value is not None and not isinstance(value, str):
            errors.append(_type_error(origin(section, key), section, key, "a string", value))

    for section, key in LIST_OF_STRINGS_KEYS:
        value = merged[section].get(key)
        if value is not None and (
            not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value)
        ):
            errors.append(_type_error(origin(section, key), section, key, "a list of strings", value))
        elif section == "reproduction" and key == "blocklist" and value:
            for index, entry in enumerate(value):
                _check_pattern(entry, origin(section, key), f"{section}.{key}[{index}]", errors)

    for section, key in BOOLEAN_KEYS:
        value = merged[section].get(key)
        if value is not None and not isinstance(value, bool):
            errors.append(_type_error(origin(section, key), section, key, "a boolean", value))

    for section, key in PATTERN_KEYS:
        value = merged[section].get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            errors.append(_type_error(origin(section, key), section, key, "a regular expression string", value))
            continue
        _check_pattern(value, origin(section, key), f"{section}.{key}", errors)

    weight = merged["comments"].get("unhelpful_weight")
    weight_source = origin("comments", "unhelpful_weight")
    if weight is not None:
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            errors.append(_type_error(weight_source, "comments", "unhelpful_weight", "a number", weight))
        elif not 0.0 <= float(weight) <= 1.0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    source=weight_source,
                    field="comments.unhelpful_weight",
                    message="`unhelpful_weight` must be between 0 and 1",
                    hint=f"got: {weight!r}",
                )
            )

    match_mode = merged["area_labels"].get("match")
    if match_mode is not None and (not isinstance(match_mode, str) or match_mode not in VALID_AREA_MATCH_MODES):
        errors.append(
            ValidationError(
                code=CFG006,
                source=origin("area_labels", "match"),
                field="area_labels.match",
                message="invalid value for `match`",
                hint=f"expected one of: {', '.join(sorted(VALID_AREA_MATCH_MODES))}; got: {match_mode!r}",
            )
        )

    label_comments = merged.get("label_comments")
    if label_comments is not None and (
        not isinstance(label_comments, dict)
        or not all(isinstance(k, str) and isinstance(v, str) for k, v in label_comments.items())
    ):
        expected = "a mapping of label to comment"
        errors.append(_type_error(origin("label_comments", ""), "label_comments", "", expected, label_comments))


def _check_pattern(value: str, source: str, field: str, errors: list[ValidationError]) -> None:
    try:
        re.compile(value)
    except re.error as exc:
        errors.append(
            ValidationError(
                code=CFG008,
                source=source,
                field=field,
                message=f"invalid regular expression {value!r}: {exc}",
            )
        )


def _type_error(source: str, section: str, key: str, expected: str, value: Any) -> ValidationError:
    field = f"{section}.{key}" if key else section
    return ValidationError(
        code=CFG005,
        source=source,
        field=field,
        message=f"`{field}` must be {expected}",
        hint=f"got: {type(value).__name__}",
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""

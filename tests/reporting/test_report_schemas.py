"""Tests for JSON Schema validation of report and webhook payloads."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from issuewarden.config import WardenConfig
from issuewarden.constants.reporting import SCHEMA_VERSION
from issuewarden.gateway.tracker import FakeIssueTracker
from issuewarden.gateway.web import FakeWebClient
from issuewarden.model import IssueOpened, TriageResult
from issuewarden.reporting import build_report, write_report
from issuewarden.triage import triage_event
from issuewarden.types.config import VulnerabilityConfig

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"


def _load_schema(name: str) -> dict[str, Any]:
    return json.loads((SCHEMAS_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture()
def report_schema() -> dict[str, Any]:
    return _load_schema("report.schema.json")


@pytest.fixture()
def webhook_schema() -> dict[str, Any]:
    return _load_schema("webhook.schema.json")


@pytest.fixture()
def vulnerability_result(
    tmp_path: Path,
    opened: Callable[..., IssueOpened],
) -> tuple[TriageResult, FakeWebClient]:
    web = FakeWebClient()
    config = WardenConfig(
        workspace=tmp_path,
        vulnerability=VulnerabilityConfig(
            webhook_url="https://hooks.example.test/x",
            webhook_secret="s3cret",
            delete_report=True,
        ),
    )
    tracker = FakeIssueTracker(fail_on=frozenset({"delete_issue"}))
    result = triage_event(opened("exploit details", title="CVE-2024-0001"), config=config, tracker=tracker, web=web)
    return result, web


def test_schemas_are_valid_json_schema(report_schema: dict[str, Any], webhook_schema: dict[str, Any]) -> None:
    jsonschema.Draft202012Validator.check_schema(report_schema)
    jsonschema.Draft202012Validator.check_schema(webhook_schema)


def test_written_report_matches_schema(
    tmp_path: Path,
    report_schema: dict[str, Any],
    vulnerability_result: tuple[TriageResult, FakeWebClient],
) -> None:
    result, _ = vulnerability_result
    path = tmp_path / "out" / "report.json"

    write_report(path, result)

    payload = json.loads(path.read_text(encoding="utf-8"))
    jsonschema.validate(instance=payload, schema=report_schema)
    assert payload["schema_version"] == SCHEMA_VERSION
    assert payload["matched_rules"] == ["VULNERABILITY_DISCLOSURE", "INVALID_REPRODUCTION"]


def test_empty_report_matches_schema(report_schema: dict[str, Any]) -> None:
    jsonschema.validate(instance=build_report(TriageResult(event_kind=None)), schema=report_schema)


def test_webhook_payload_matches_schema(
    webhook_schema: dict[str, Any],
    vulnerability_result: tuple[TriageResult, FakeWebClient],
) -> None:
    _, web = vulnerability_result

    assert len(web.posted) == 1
    jsonschema.validate(instance=web.posted[0][1], schema=webhook_schema)
    assert web.posted[0][1]["deleted"] is False

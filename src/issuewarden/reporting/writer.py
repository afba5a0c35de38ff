"""JSON report artifact for a triage run."""

from __future__ import annotations

from pathlib import Path

from issuewarden import __version__
from issuewarden.constants.reporting import SCHEMA_VERSION
from issuewarden.io import write_json_atomic
from issuewarden.model import TriageResult


def build_report(result: TriageResult) -> dict[str, object]:
    """Return the JSON document written for ``result``."""
    return {
        "schema_version": SCHEMA_VERSION,
        "tool_version": __version__,
        **result.to_dict(),
        "matched_rules": list(result.matched_rules),
    }


def write_report(path: Path, result: TriageResult) -> None:
    """Write the report for ``result`` to ``path`` atomically."""
    write_json_atomic(path=path, payload=build_report(result))

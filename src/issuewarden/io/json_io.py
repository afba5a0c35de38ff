"""JSON helpers for webhook payloads and report files."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Any

from issuewarden.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX


def load_json_object(path: Path) -> dict[str, Any]:
    """Read ``path`` and return its top-level JSON object.

    Raises ``ValueError`` (``json.JSONDecodeError`` included) when the file is
    not JSON or holds something other than an object.
    """
    decoded = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(decoded, dict):
        raise ValueError(f"expected a JSON object, got {type(decoded).__name__}")
    return decoded


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str = REPORT_TEMP_PREFIX,
    temp_suffix: str = REPORT_TEMP_SUFFIX,
) -> None:
    """Dump ``payload`` beside ``path`` and rename it over the target.

    Readers never observe a half-written report; the temp file is removed
    when serialization or the rename fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, sort_keys=True, ensure_ascii=False)
            handle.write("\n")
        os.replace(temp_name, path)
    except BaseException:
        with suppress(FileNotFoundError):
            Path(temp_name).unlink()
        raise

"""Constants for report files and stdout formatting."""

from __future__ import annotations

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_DIM: str = "\033[2m"
ANSI_RESET: str = "\033[0m"

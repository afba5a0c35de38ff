"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "ISSUEWARDEN"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ ISSUEWARDEN",
    "     // triage for tried and tired maintainers",
)
RUN_SUMMARY_TITLE: str = "Triage summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} issue triage"))

"""Webhook notification payload constants."""

from __future__ import annotations

VULNERABILITY_REPORT_TYPE: str = "vulnerability_report"
DELETED_FIELD: str = "deleted"

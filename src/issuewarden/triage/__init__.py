"""Per-event triage orchestration."""

from .orchestrator import triage_event

__all__ = ["triage_event"]

"""Human-readable and JSON reports of triage runs."""

from .stdout import StdoutReporter
from .writer import build_report, write_report

__all__ = ["StdoutReporter", "build_report", "write_report"]

"""Stdout reporter for triage results."""

from __future__ import annotations

from issuewarden.constants.branding import ASCII_LOGO_LINES, RUN_SUMMARY_TITLE
from issuewarden.constants.reporting import ANSI_DIM, ANSI_GREEN, ANSI_RED, ANSI_RESET, ANSI_YELLOW
from issuewarden.model import ActionOutcome, RuleOutcome, TriageResult

_STATUS_COLORS: dict[str, str] = {
    "ok": ANSI_GREEN,
    "failed": ANSI_RED,
    "skipped": ANSI_DIM,
}


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats a triage result as human-readable stdout output."""

    def __init__(self, result: TriageResult, *, color: bool = True) -> None:
        self._result = result
        self._color = color

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_rules()]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38
        issue = f"#{r.issue_number}" if r.issue_number is not None else "-"
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {RUN_SUMMARY_TITLE}",
            sep,
            "",
            f"  Event       {r.event_kind or 'none'}",
            f"  Repository  {r.repository or '-'}",
            f"  Issue       {issue}",
            f"  Rules run   {len(r.outcomes)}",
            f"  Matched     {', '.join(r.matched_rules) if r.matched_rules else 'none'}",
        ]
        if r.skipped_rules:
            lines.append(f"  Skipped     {', '.join(r.skipped_rules)}")
        if r.dry_run:
            mode = _colorize("dry run", ANSI_YELLOW) if self._color else "dry run"
            lines.append(f"  Mode        {mode}")
        for note in r.notes:
            lines.append(f"  Note        {note}")
        lines.append(f"  Duration    {r.duration_seconds:.3f}s")
        lines.append("")
        return "\n".join(lines)

    def _render_rules(self) -> str:
        if not self._result.outcomes:
            return ""
        lines = ["  Rules"]
        for outcome in self._result.outcomes:
            lines.append(self._format_rule(outcome))
            lines.extend(self._format_action(action) for action in outcome.actions)
        lines.append("")
        return "\n".join(lines)

    def _format_rule(self, outcome: RuleOutcome) -> str:
        verdict = "match" if outcome.matched else "no match"
        if self._color:
            verdict = _colorize(verdict, ANSI_YELLOW if outcome.matched else ANSI_DIM)
        reason = f" ({outcome.reason})" if outcome.reason else ""
        return f"  {outcome.rule_id:<26} {verdict}{reason}"

    def _format_action(self, action: ActionOutcome) -> str:
        status = action.status
        if self._color:
            status = _colorize(status, _STATUS_COLORS.get(status, ""))
        error = f": {action.error}" if action.error else ""
        return f"    - {action.kind:<18} {action.target:<24} {status}{error}"

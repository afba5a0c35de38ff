"""Rule interface for the triage pipeline."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from issuewarden.config import WardenConfig
from issuewarden.gateway.tracker import IssueTracker
from issuewarden.gateway.web import WebClient
from issuewarden.model import Event, Verdict
from issuewarden.types.common import EventKind

_RULE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z][A-Z0-9_]+$")


@dataclass(frozen=True)
class RuleContext:
    """Read-only collaborators available while a rule classifies an event."""

    config: WardenConfig
    tracker: IssueTracker
    web: WebClient


class Rule(ABC):
    """Abstract base class for triage rules.

    A rule inspects one event and returns a verdict. It never performs side
    effects itself; reads through the context (label listing, link probes)
    are allowed.
    """

    rule_id: ClassVar[str]
    applies_to: ClassVar[EventKind]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate rule subclasses define an UPPER_SNAKE_CASE `rule_id` and an event kind."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        rule_id = getattr(cls, "rule_id", None)
        if not isinstance(rule_id, str) or not rule_id.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `rule_id`")
        if not _RULE_ID_PATTERN.match(rule_id):
            raise TypeError(f"{cls.__name__}.rule_id must be UPPER_SNAKE_CASE (got {rule_id!r})")
        if getattr(cls, "applies_to", None) is None:
            raise TypeError(f"{cls.__name__} must define a class attribute `applies_to`")

    def enabled(self, config: WardenConfig) -> bool:
        """Whether the rule is switched on by configuration."""
        return True

    @abstractmethod
    def evaluate(self, *, event: Event, context: RuleContext) -> Verdict:
        """Classify ``event``; only called for events of kind ``applies_to``."""

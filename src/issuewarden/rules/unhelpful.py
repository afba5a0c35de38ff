"""Hide comments that add no information to an issue."""

from __future__ import annotations

import logging
import unicodedata

from issuewarden.constants.patterns import EXPLAINER_TEXT
from issuewarden.model import (
    Action,
    CommentCreated,
    Event,
    Match,
    MinimizeComment,
    NoMatch,
    UpdateComment,
    Verdict,
)
from issuewarden.rules.base import Rule, RuleContext
from issuewarden.types.config import CommentConfig

logger = logging.getLogger(__name__)

_ZERO_WIDTH_JOINER: int = 0x200D
_VARIATION_SELECTORS: tuple[range, ...] = (range(0xFE00, 0xFE10), range(0xE0100, 0xE01F0))
_SKIN_TONE_MODIFIERS: range = range(0x1F3FB, 0x1F400)
_REGIONAL_INDICATORS: range = range(0x1F1E6, 0x1F200)
_PICTOGRAPHIC_RANGES: tuple[range, ...] = (range(0x2190, 0x2C00), range(0x1F000, 0x1FB00))


class UnhelpfulCommentRule(Rule):
    """Minimize "+1" and "still happening" comments from non-maintainers."""

    rule_id = "UNHELPFUL_COMMENT"
    applies_to = "comment_created"

    def evaluate(self, *, event: Event, context: RuleContext) -> Verdict:
        assert isinstance(event, CommentCreated)
        comment = event.comment
        settings = context.config.comments

        if comment.author_association.upper() in settings.exempt_associations:
            return NoMatch(reason=f"author association {comment.author_association} is exempt")

        reason = unhelpful_reason(comment.body, settings)
        if reason is None:
            return NoMatch(reason="comment adds information")

        logger.info("Comment %d on issue #%d is unhelpful (%s)", comment.id, event.issue.number, reason)
        actions: list[Action] = []
        if settings.add_explainer:
            actions.append(
                UpdateComment(
                    comment_id=comment.id,
                    body=f"{comment.body}\n\n{EXPLAINER_TEXT}",
                    optional=True,
                )
            )
        actions.append(MinimizeComment(node_id=comment.node_id))
        return Match(actions=tuple(actions), reason=reason)


def unhelpful_reason(body: str, settings: CommentConfig) -> str | None:
    """Return which heuristic flags ``body`` as unhelpful, or None."""
    ratio = noise_ratio(body, settings)
    if ratio < settings.unhelpful_weight:
        logger.debug("Comment signal ratio %.2f is below %.2f", ratio, settings.unhelpful_weight)
        return "noise"
    if settings.still_happening_pattern.search(body) and not settings.link_pattern.search(body):
        return "still happening without a link"
    return None


def noise_ratio(body: str, settings: CommentConfig) -> float:
    """Share of visible characters left after removing noise tokens, in [0, 1]."""
    total = visible_length(body)
    if total == 0:
        return 0.0
    remaining = visible_length(settings.noise_pattern.sub("", body))
    return min(remaining / total, 1.0)


def visible_length(text: str) -> int:
    """Count user-perceived characters (grapheme clusters), ignoring whitespace.

    Combining marks, variation selectors and emoji skin-tone modifiers extend
    the previous character. A zero-width joiner between two pictographs makes
    one emoji, and two regional indicators form a single flag.
    """
    count = 0
    last_pictographic = joined = open_flag = False
    for char in text:
        code = ord(char)
        if char.isspace():
            last_pictographic = joined = open_flag = False
            continue
        if code == _ZERO_WIDTH_JOINER:
            joined = last_pictographic
            continue
        if _extends_previous(char, code):
            continue
        pictographic = any(code in block for block in _PICTOGRAPHIC_RANGES)
        if joined and pictographic:
            joined = False
            continue
        joined = False
        last_pictographic = pictographic
        if code in _REGIONAL_INDICATORS:
            if open_flag:
                open_flag = False
                continue
            open_flag = True
        else:
            open_flag = False
        count += 1
    return count


def _extends_previous(char: str, code: int) -> bool:
    if unicodedata.combining(char) or code in _SKIN_TONE_MODIFIERS:
        return True
    return any(code in selectors for selectors in _VARIATION_SELECTORS)

"""Section extraction from issue bodies."""

from __future__ import annotations

import logging
import re
from re import Pattern

from issuewarden.types.config import SECTION_FLAGS

logger = logging.getLogger(__name__)


def extract_section(text: str, pattern: str | Pattern[str]) -> str | None:
    """Return the first capture group of ``pattern`` in ``text``, stripped.

    String patterns are compiled case-insensitive with ``.`` matching newlines.
    Returns None when there is no match, the pattern has no group, or the
    captured text is blank.
    """
    compiled = re.compile(pattern, SECTION_FLAGS) if isinstance(pattern, str) else pattern
    if compiled.groups < 1:
        logger.debug("Section pattern %r has no capture group", compiled.pattern)
        return None
    match = compiled.search(text)
    if match is None:
        logger.debug("Section pattern %r did not match", compiled.pattern)
        return None
    captured = match.group(1)
    if captured is None:
        return None
    return captured.strip() or None

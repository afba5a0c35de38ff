"""Comment bodies configured as either a workspace file or literal text."""

from __future__ import annotations

import errno
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_comment_template(value: str, workspace: Path) -> str:
    """Return the comment body for a configured value.

    ``value`` is first tried as a path relative to ``workspace``, even when it
    starts with ``/``. When no such file exists, or the value cannot be a path
    at all, the value itself is the comment text. Any other read failure
    (permissions, a directory, undecodable bytes) propagates.
    """
    if "\x00" in value:
        return value
    path = workspace / value.lstrip("/")
    try:
        body = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No comment file at %s, using the configured text", path)
        return value
    except OSError as exc:
        # Literal text can be too long for a file name or run through an existing file.
        if exc.errno in (errno.ENAMETOOLONG, errno.ENOTDIR):
            return value
        raise
    logger.debug("Read comment body from %s", path)
    return body

"""Gateways for ``--dry-run``: reads go through, writes are only recorded."""

from __future__ import annotations

import logging

from issuewarden.gateway.tracker import FakeIssueTracker, IssueTracker
from issuewarden.gateway.web import WebClient
from issuewarden.model import Label
from issuewarden.types.common import JsonObject

logger = logging.getLogger(__name__)


class DryRunTracker(FakeIssueTracker):
    """Records mutations; label listing is delegated to ``reader`` when given."""

    def __init__(self, *, reader: IssueTracker | None = None) -> None:
        super().__init__()
        self._reader = reader

    def list_repo_labels(self) -> list[Label]:
        self._record("list_repo_labels")
        if self._reader is None:
            logger.info("Dry run without a token: repository labels are not available")
            return []
        return self._reader.list_repo_labels()


class DryRunWebClient(WebClient):
    """Probes links for real and records webhook posts instead of sending them."""

    def __init__(self, inner: WebClient) -> None:
        self._inner = inner
        self.posted: list[tuple[str, JsonObject]] = []

    def fetch_status(self, url: str) -> int:
        return self._inner.fetch_status(url)

    def post_json(self, url: str, body: JsonObject) -> bool:
        self.posted.append((url, body))
        logger.info("Dry run: webhook post recorded, not sent")
        return True

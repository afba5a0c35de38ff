"""``httpx`` implementation of :class:`WebClient`."""

from __future__ import annotations

import logging

import httpx

from issuewarden.constants.github import PROBE_TIMEOUT_SECONDS
from issuewarden.exceptions import WebClientError
from issuewarden.gateway.web.abc import WebClient
from issuewarden.types.common import JsonObject

logger = logging.getLogger(__name__)


class HttpxWebClient(WebClient):
    """Web client over a shared synchronous ``httpx.Client``."""

    def __init__(self, *, client: httpx.Client | None = None, timeout: float = PROBE_TIMEOUT_SECONDS) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout, follow_redirects=True)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxWebClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch_status(self, url: str) -> int:
        # InvalidURL is raised while building the request and is not an HTTPError.
        try:
            resp = self._client.get(url, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise WebClientError(f"GET {url} failed: {exc}") from exc
        logger.debug("GET %s -> %d", url, resp.status_code)
        return resp.status_code

    def post_json(self, url: str, body: JsonObject) -> bool:
        try:
            resp = self._client.post(url, json=body)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise WebClientError(f"POST failed: {type(exc).__name__}") from exc
        if not resp.is_success:
            logger.warning("Webhook responded with status %d", resp.status_code)
        return resp.is_success

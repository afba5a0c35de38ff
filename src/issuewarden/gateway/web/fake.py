"""In-memory :class:`WebClient` with canned responses."""

from __future__ import annotations

from collections.abc import Mapping

from issuewarden.exceptions import WebClientError
from issuewarden.gateway.web.abc import WebClient
from issuewarden.types.common import JsonObject


class FakeWebClient(WebClient):
    """Web client returning configured statuses and recording webhook posts.

    All state is provided via the constructor.
    """

    def __init__(
        self,
        *,
        statuses: Mapping[str, int] | None = None,
        default_status: int = 200,
        unreachable: frozenset[str] = frozenset(),
        post_ok: bool = True,
        post_raises: bool = False,
    ) -> None:
        """Create FakeWebClient.

        Args:
            statuses: Status code per exact URL.
            default_status: Status for URLs not in ``statuses``.
            unreachable: URLs whose fetch raises WebClientError.
            post_ok: Return value of ``post_json``.
            post_raises: Make ``post_json`` raise WebClientError instead.
        """
        self._statuses = dict(statuses or {})
        self._default_status = default_status
        self._unreachable = unreachable
        self._post_ok = post_ok
        self._post_raises = post_raises
        self.fetched: list[str] = []
        self.posted: list[tuple[str, JsonObject]] = []

    def fetch_status(self, url: str) -> int:
        self.fetched.append(url)
        if url in self._unreachable:
            raise WebClientError(f"GET {url} failed: connection refused")
        return self._statuses.get(url, self._default_status)

    def post_json(self, url: str, body: JsonObject) -> bool:
        self.posted.append((url, body))
        if self._post_raises:
            raise WebClientError("POST failed: ConnectError")
        return self._post_ok

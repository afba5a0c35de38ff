"""Outbound HTTP operations used by triage rules and the dispatcher."""

from __future__ import annotations

from abc import ABC, abstractmethod

from issuewarden.types.common import JsonObject


class WebClient(ABC):
    """Abstract web client for dependency injection."""

    @abstractmethod
    def fetch_status(self, url: str) -> int:
        """Fetch ``url`` (following redirects) and return the final status code.

        Raises:
            WebClientError: when no response could be obtained at all.
        """

    @abstractmethod
    def post_json(self, url: str, body: JsonObject) -> bool:
        """POST ``body`` as JSON. Returns True on a 2xx response."""

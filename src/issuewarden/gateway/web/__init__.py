"""Outbound HTTP gateway: reachability probes and webhook posts."""

from .abc import WebClient
from .fake import FakeWebClient
from .real import HttpxWebClient

__all__ = ["FakeWebClient", "HttpxWebClient", "WebClient"]

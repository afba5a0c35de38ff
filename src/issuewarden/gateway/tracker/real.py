"""GitHub implementation of :class:`IssueTracker` over REST and GraphQL."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from issuewarden.constants.github import (
    API_ACCEPT_HEADER,
    API_VERSION_HEADER,
    DEFAULT_API_URL,
    DELETE_ISSUE_MUTATION,
    LABELS_PAGE_SIZE,
    MINIMIZE_CLASSIFIER_OFF_TOPIC,
    MINIMIZE_COMMENT_MUTATION,
    REQUEST_TIMEOUT_SECONDS,
)
from issuewarden.exceptions import TrackerError
from issuewarden.gateway.tracker.abc import IssueTracker
from issuewarden.model import Label

logger = logging.getLogger(__name__)


class GitHubTracker(IssueTracker):
    """Issue tracker backed by the GitHub API for one ``owner/repo``."""

    def __init__(
        self,
        *,
        token: str,
        repository: str,
        api_url: str = DEFAULT_API_URL,
        client: httpx.Client | None = None,
    ) -> None:
        self._repository = repository
        self._api_url = api_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": API_ACCEPT_HEADER,
            "X-GitHub-Api-Version": API_VERSION_HEADER,
        }
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=REQUEST_TIMEOUT_SECONDS)

    def close(self) -> None:
        """Release the underlying HTTP client if this tracker created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GitHubTracker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close_issue(self, issue_number: int) -> None:
        self._request("PATCH", self._issue_url(issue_number), json={"state": "closed"})

    def add_labels(self, issue_number: int, labels: tuple[str, ...]) -> None:
        self._request("POST", f"{self._issue_url(issue_number)}/labels", json={"labels": list(labels)})

    def create_comment(self, issue_number: int, body: str) -> int:
        resp = self._request("POST", f"{self._issue_url(issue_number)}/comments", json={"body": body})
        return int(_json(resp).get("id", 0))

    def update_comment(self, comment_id: int, body: str) -> None:
        self._request("PATCH", f"{self._repo_url}/issues/comments/{comment_id}", json={"body": body})

    def lock_issue(self, issue_number: int) -> None:
        self._request("PUT", f"{self._issue_url(issue_number)}/lock")

    def minimize_comment(self, node_id: str, classifier: str = MINIMIZE_CLASSIFIER_OFF_TOPIC) -> None:
        self._graphql(MINIMIZE_COMMENT_MUTATION, {"subjectId": node_id, "classifier": classifier})

    def list_repo_labels(self) -> list[Label]:
        url: str | None = f"{self._repo_url}/labels"
        params: dict[str, int] | None = {"per_page": LABELS_PAGE_SIZE}
        labels: list[Label] = []
        while url:
            resp = self._request("GET", url, params=params)
            payload = resp.json()
            if not isinstance(payload, list):
                raise TrackerError(f"unexpected labels payload from {url}")
            labels.extend(
                Label(name=str(item["name"]), description=item.get("description") or None)
                for item in payload
                if isinstance(item, dict) and "name" in item
            )
            url = resp.links.get("next", {}).get("url")
            params = None  # the next link already carries the query
        logger.debug("Listed %d labels for %s", len(labels), self._repository)
        return labels

    def delete_issue(self, node_id: str) -> None:
        self._graphql(DELETE_ISSUE_MUTATION, {"issueId": node_id})

    @property
    def _repo_url(self) -> str:
        return f"{self._api_url}/repos/{self._repository}"

    def _issue_url(self, issue_number: int) -> str:
        return f"{self._repo_url}/issues/{issue_number}"

    def _graphql(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        resp = self._request("POST", f"{self._api_url}/graphql", json={"query": query, "variables": variables})
        payload = _json(resp)
        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(error.get("message", error)) for error in errors if isinstance(error, dict))
            raise TrackerError(f"GraphQL error: {messages or errors}")
        return payload

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s", method, url)
        try:
            resp = self._client.request(method, url, headers=self._headers, **kwargs)
        except httpx.HTTPError as exc:
            raise TrackerError(f"{method} {url} failed: {exc}") from exc
        if resp.status_code >= 400:
            raise _api_error(resp)
        return resp


def _api_error(resp: httpx.Response) -> TrackerError:
    if resp.status_code == 403 and resp.headers.get("X-RateLimit-Remaining") == "0":
        reset = resp.headers.get("X-RateLimit-Reset", "unknown")
        return TrackerError(f"rate limit exceeded, resets at {reset}", status_code=resp.status_code)
    if resp.status_code == 404:
        return TrackerError(f"resource not found: {resp.request.url}", status_code=resp.status_code)
    return TrackerError(f"GitHub API error {resp.status_code}: {resp.text}", status_code=resp.status_code)


def _json(resp: httpx.Response) -> dict[str, Any]:
    try:
        payload = resp.json()
    except ValueError as exc:
        raise TrackerError(f"invalid JSON from {resp.request.url}") from exc
    if not isinstance(payload, dict):
        raise TrackerError(f"unexpected response shape from {resp.request.url}")
    return payload

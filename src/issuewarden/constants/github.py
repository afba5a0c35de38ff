"""GitHub API endpoints, GraphQL documents and provider-specific URL rules."""

from __future__ import annotations

import re
from re import Pattern

DEFAULT_API_URL: str = "https://api.github.com"
API_ACCEPT_HEADER: str = "application/vnd.github+json"
API_VERSION_HEADER: str = "2022-11-28"
REQUEST_TIMEOUT_SECONDS: float = 30.0
PROBE_TIMEOUT_SECONDS: float = 15.0
LABELS_PAGE_SIZE: int = 100

MINIMIZE_CLASSIFIER_OFF_TOPIC: str = "OFF_TOPIC"

MINIMIZE_COMMENT_MUTATION: str = (
    "mutation($subjectId: ID!, $classifier: ReportedContentClassifiers!) {"
    " minimizeComment(input: {subjectId: $subjectId, classifier: $classifier}) { clientMutationId } }"
)
DELETE_ISSUE_MUTATION: str = (
    "mutation($issueId: ID!) { deleteIssue(input: {issueId: $issueId}) { clientMutationId } }"
)

# CodeSandbox serves 200 for any devbox UI path, existing or not; probe the API instead.
CODESANDBOX_HOST: str = "codesandbox.io"
CODESANDBOX_DEVBOX_PATH: Pattern[str] = re.compile(r"^/p/devbox/(?P<slug>[^/?#]+)")
CODESANDBOX_API_TEMPLATE: str = "https://codesandbox.io/api/v1/sandboxes/{sandbox_id}"

# Probe statuses at or above this are unreachable, unless they are server errors.
PROBE_CLIENT_ERROR_MIN: int = 400
PROBE_SERVER_ERROR_MIN: int = 500

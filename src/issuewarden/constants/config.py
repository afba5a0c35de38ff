"""Configuration defaults, filenames and environment input names."""

from __future__ import annotations

CONFIG_FILENAME: str = "issuewarden.yaml"

DEFAULT_REPRODUCTION_COMMENT: str = ".github/invalid-reproduction.md"
DEFAULT_REPRODUCTION_HOSTS: tuple[str, ...] = ("github.com",)
DEFAULT_INVALID_LABEL: str = "invalid-reproduction"
DEFAULT_LINK_SECTION: str = "### Link to reproduction(.*)### To reproduce"

DEFAULT_UNHELPFUL_WEIGHT: float = 0.3
DEFAULT_ADD_EXPLAINER: bool = True
DEFAULT_EXEMPT_ASSOCIATIONS: tuple[str, ...] = ("MEMBER", "OWNER")

DEFAULT_LABEL_COMMENTS: dict[str, str] = {"invalid reproduction": ".github/invalid-reproduction.md"}

DEFAULT_AREA_PREFIX: str = "area:"
DEFAULT_AREA_MATCH: str = "description"
VALID_AREA_MATCH_MODES: frozenset[str] = frozenset({"name", "description"})

DEFAULT_DELETE_REPORT: bool = False

# Sentinel entry in the applicable-labels set meaning "also issues without labels".
UNLABELED_SENTINEL: str = ""

TRUE_STRINGS: frozenset[str] = frozenset({"true", "1", "yes", "on"})
FALSE_STRINGS: frozenset[str] = frozenset({"false", "0", "no", "off"})

ENV_REPRODUCTION_COMMENT: str = "INPUT_REPRODUCTION_COMMENT"
ENV_REPRODUCTION_HOSTS: str = "INPUT_REPRODUCTION_HOSTS"
ENV_REPRODUCTION_BLOCKLIST: str = "INPUT_REPRODUCTION_BLOCKLIST"
ENV_REPRODUCTION_INVALID_LABEL: str = "INPUT_REPRODUCTION_INVALID_LABEL"
ENV_REPRODUCTION_ISSUE_LABELS: str = "INPUT_REPRODUCTION_ISSUE_LABELS"
ENV_REPRODUCTION_LINK_SECTION: str = "INPUT_REPRODUCTION_LINK_SECTION"
ENV_COMMENT_UNHELPFUL_WEIGHT: str = "INPUT_COMMENT_UNHELPFUL_WEIGHT"
ENV_COMMENT_ADD_EXPLAINER: str = "INPUT_COMMENT_ADD_EXPLAINER"
ENV_LABEL_COMMENTS: str = "INPUT_LABEL_COMMENTS"
ENV_LABEL_AREA_PREFIX: str = "INPUT_LABEL_AREA_PREFIX"
ENV_LABEL_AREA_SECTION: str = "INPUT_LABEL_AREA_SECTION"
ENV_LABEL_AREA_MATCH: str = "INPUT_LABEL_AREA_MATCH"
ENV_WEBHOOK_URL: str = "INPUT_WEBHOOK_URL"
ENV_WEBHOOK_SECRET: str = "INPUT_WEBHOOK_SECRET"
ENV_DELETE_VULNERABILITY_REPORT: str = "INPUT_DELETE_VULNERABILITY_REPORT"

ENV_INPUTS: tuple[str, ...] = (
    ENV_REPRODUCTION_COMMENT,
    ENV_REPRODUCTION_HOSTS,
    ENV_REPRODUCTION_BLOCKLIST,
    ENV_REPRODUCTION_INVALID_LABEL,
    ENV_REPRODUCTION_ISSUE_LABELS,
    ENV_REPRODUCTION_LINK_SECTION,
    ENV_COMMENT_UNHELPFUL_WEIGHT,
    ENV_COMMENT_ADD_EXPLAINER,
    ENV_LABEL_COMMENTS,
    ENV_LABEL_AREA_PREFIX,
    ENV_LABEL_AREA_SECTION,
    ENV_LABEL_AREA_MATCH,
    ENV_WEBHOOK_URL,
    ENV_WEBHOOK_SECRET,
    ENV_DELETE_VULNERABILITY_REPORT,
)

ENV_GITHUB_TOKEN: str = "GITHUB_TOKEN"
ENV_GITHUB_WORKSPACE: str = "GITHUB_WORKSPACE"
ENV_GITHUB_EVENT_PATH: str = "GITHUB_EVENT_PATH"
ENV_GITHUB_EVENT_NAME: str = "GITHUB_EVENT_NAME"
ENV_GITHUB_REPOSITORY: str = "GITHUB_REPOSITORY"
ENV_GITHUB_API_URL: str = "GITHUB_API_URL"

"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

EventKind: TypeAlias = Literal["issue_opened", "issue_labeled", "comment_created"]
AreaMatchMode: TypeAlias = Literal["name", "description"]
ActionKind: TypeAlias = Literal[
    "close_issue",
    "add_labels",
    "create_comment",
    "lock_issue",
    "update_comment",
    "minimize_comment",
    "post_webhook",
    "delete_issue",
]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]

"""Tracker entities as delivered with an inbound event."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Label:
    """A repository label."""

    name: str
    description: str | None = None


@dataclass(frozen=True)
class Repository:
    """The repository an event belongs to."""

    full_name: str
    html_url: str


@dataclass(frozen=True)
class Issue:
    """Snapshot of an issue; ``labels`` reflect the state after the triggering change."""

    number: int
    title: str
    body: str
    labels: tuple[Label, ...] = ()
    author_association: str = "NONE"
    node_id: str = ""
    author_login: str = ""
    author_url: str = ""
    html_url: str = ""

    @property
    def label_names(self) -> tuple[str, ...]:
        """Names of the labels currently on the issue, in delivery order."""
        return tuple(label.name for label in self.labels)


@dataclass(frozen=True)
class Comment:
    """An issue comment."""

    id: int
    node_id: str
    body: str
    author_association: str = "NONE"

"""Enumerated query and body parameters accepted by the pulls API."""

from __future__ import annotations

import enum


class State(enum.StrEnum):
    """Pull request state filter and update target."""

    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class Direction(enum.StrEnum):
    """Sort direction for listings."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class Sort(enum.StrEnum):
    """Sort keys for pull request listings."""

    CREATED = "created"
    UPDATED = "updated"
    POPULARITY = "popularity"
    LONG_RUNNING = "long-running"


class CommentSort(enum.StrEnum):
    """Sort keys for comment listings."""

    CREATED = "created"
    UPDATED = "updated"


class MergeMethod(enum.StrEnum):
    """Strategy GitHub uses to merge a pull request."""

    MERGE = "merge"
    SQUASH = "squash"
    REBASE = "rebase"

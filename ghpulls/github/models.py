"""Typed models for pull request REST payloads.

Only the fields ghpulls callers rely on are declared. msgspec ignores any
additional keys GitHub sends, so new API fields never break decoding.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003

import msgspec


class User(msgspec.Struct, kw_only=True, frozen=True):
    """GitHub account reference embedded in other payloads."""

    login: str
    id: int
    type: str | None = None
    html_url: str | None = None
    avatar_url: str | None = None


class Team(msgspec.Struct, kw_only=True, frozen=True):
    """Team reference, as listed in ``requested_teams``."""

    id: int
    slug: str
    name: str | None = None


class Label(msgspec.Struct, kw_only=True, frozen=True):
    """Issue label attached to a pull request."""

    name: str
    id: int | None = None
    color: str | None = None


class RepositoryRef(msgspec.Struct, kw_only=True, frozen=True):
    """Minimal repository reference carried by a branch ref."""

    id: int
    name: str
    full_name: str


class BranchRef(msgspec.Struct, kw_only=True, frozen=True):
    """Head or base side of a pull request."""

    ref: str
    sha: str
    label: str | None = None
    user: User | None = None
    repo: RepositoryRef | None = None


class PullRequest(msgspec.Struct, kw_only=True, frozen=True):
    """A pull request as returned by the single and list endpoints.

    ``body_html`` and ``body_text`` are only populated when the handler
    requested the matching media type.
    """

    id: int
    number: int
    state: str
    title: str | None = None
    body: str | None = None
    body_html: str | None = None
    body_text: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    user: User | None = None
    head: BranchRef | None = None
    base: BranchRef | None = None
    draft: bool | None = None
    locked: bool | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    mergeable_state: str | None = None
    merge_commit_sha: str | None = None
    maintainer_can_modify: bool | None = None
    labels: tuple[Label, ...] = ()
    assignees: tuple[User, ...] = ()
    requested_reviewers: tuple[User, ...] = ()
    requested_teams: tuple[Team, ...] = ()
    comments: int | None = None
    review_comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    closed_at: dt.datetime | None = None
    merged_at: dt.datetime | None = None


class Review(msgspec.Struct, kw_only=True, frozen=True):
    """A submitted or pending pull request review."""

    id: int
    state: str
    user: User | None = None
    body: str | None = None
    body_html: str | None = None
    body_text: str | None = None
    commit_id: str | None = None
    html_url: str | None = None
    author_association: str | None = None
    submitted_at: dt.datetime | None = None


class FileDiff(msgspec.Struct, kw_only=True, frozen=True):
    """One changed file of a pull request."""

    filename: str
    status: str
    additions: int
    deletions: int
    changes: int
    sha: str | None = None
    blob_url: str | None = None
    raw_url: str | None = None
    contents_url: str | None = None
    patch: str | None = None
    previous_filename: str | None = None


class Comment(msgspec.Struct, kw_only=True, frozen=True):
    """A comment from either the repository-wide or per-pull listing.

    Review comments fill the diff-position fields; conversation comments
    from the repository-wide listing leave them unset and carry
    ``issue_url`` instead.
    """

    id: int
    body: str | None = None
    body_html: str | None = None
    body_text: str | None = None
    user: User | None = None
    html_url: str | None = None
    author_association: str | None = None
    issue_url: str | None = None
    pull_request_url: str | None = None
    pull_request_review_id: int | None = None
    in_reply_to_id: int | None = None
    path: str | None = None
    position: int | None = None
    original_position: int | None = None
    line: int | None = None
    side: str | None = None
    diff_hunk: str | None = None
    commit_id: str | None = None
    original_commit_id: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class GitActor(msgspec.Struct, kw_only=True, frozen=True):
    """Author or committer identity recorded in a git commit."""

    name: str | None = None
    email: str | None = None
    date: dt.datetime | None = None


class CommitDetail(msgspec.Struct, kw_only=True, frozen=True):
    """The git-level part of a pull request commit."""

    message: str
    author: GitActor | None = None
    committer: GitActor | None = None


class Commit(msgspec.Struct, kw_only=True, frozen=True):
    """A commit listed on a pull request."""

    sha: str
    commit: CommitDetail | None = None
    author: User | None = None
    committer: User | None = None
    html_url: str | None = None


class MergeResult(msgspec.Struct, kw_only=True, frozen=True):
    """Outcome reported by the merge endpoint."""

    merged: bool
    message: str
    sha: str | None = None

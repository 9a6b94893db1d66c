"""Minimal GitHub REST payloads for decoding tests."""

from __future__ import annotations

import typing as typ


def user_payload(login: str = "octo", user_id: int = 1) -> dict[str, typ.Any]:
    """Return a user reference payload."""
    return {"login": login, "id": user_id, "type": "User"}


def pr_payload(
    number: int = 42,
    *,
    title: str = "Fix bug",
    state: str = "open",
    **extra: typ.Any,
) -> dict[str, typ.Any]:
    """Return a pull request payload with head and base refs."""
    payload: dict[str, typ.Any] = {
        "id": 1000 + number,
        "number": number,
        "state": state,
        "title": title,
        "body": None,
        "user": user_payload(),
        "head": {"ref": "dev", "sha": "a" * 40, "label": "octo:dev"},
        "base": {"ref": "main", "sha": "b" * 40, "label": "octo:main"},
        "draft": False,
        "labels": [{"name": "bug", "id": 7}],
        "created_at": "2024-07-01T12:00:00Z",
        "updated_at": "2024-07-02T12:00:00Z",
        "closed_at": None,
        "merged_at": None,
        "node_id": "PR_kwDOA",
    }
    payload.update(extra)
    return payload


def review_payload(review_id: int, state: str = "APPROVED") -> dict[str, typ.Any]:
    """Return a pull request review payload."""
    return {
        "id": review_id,
        "state": state,
        "user": user_payload("reviewer", 2),
        "body": "Looks good",
        "commit_id": "c" * 40,
        "submitted_at": "2024-07-03T09:30:00Z",
    }


def file_payload(filename: str, status: str = "modified") -> dict[str, typ.Any]:
    """Return a changed-file payload."""
    return {
        "sha": "d" * 40,
        "filename": filename,
        "status": status,
        "additions": 3,
        "deletions": 1,
        "changes": 4,
        "patch": "@@ -1 +1 @@\n-old\n+new",
    }


def comment_payload(comment_id: int, **extra: typ.Any) -> dict[str, typ.Any]:
    """Return a comment payload."""
    payload: dict[str, typ.Any] = {
        "id": comment_id,
        "body": f"comment {comment_id}",
        "user": user_payload(),
        "created_at": "2024-07-04T10:00:00Z",
        "updated_at": "2024-07-04T10:00:00Z",
    }
    payload.update(extra)
    return payload

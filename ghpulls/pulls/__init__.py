"""Pull request resource handle and its request builders."""

from __future__ import annotations

from .comments import ListCommentsBuilder
from .create import CreatePullRequestBuilder
from .handler import PullRequestHandler
from .listing import ListPullRequestsBuilder
from .merge import MergePullRequestsBuilder
from .update import UpdatePullRequestBuilder

__all__ = [
    "CreatePullRequestBuilder",
    "ListCommentsBuilder",
    "ListPullRequestsBuilder",
    "MergePullRequestsBuilder",
    "PullRequestHandler",
    "UpdatePullRequestBuilder",
]

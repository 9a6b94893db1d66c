"""Typed async client for the GitHub pull request REST API."""

from __future__ import annotations

from ghpulls.github import (
    GitHubAPIError,
    GitHubClient,
    GitHubClientConfig,
    GitHubDecodeError,
    GitHubError,
    GitHubMergeConflictError,
    GitHubRouteError,
    GitHubTransportError,
    MediaType,
    Page,
)
from ghpulls.pulls import PullRequestHandler

__version__ = "0.1.0"
__all__ = [
    "GitHubAPIError",
    "GitHubClient",
    "GitHubClientConfig",
    "GitHubDecodeError",
    "GitHubError",
    "GitHubMergeConflictError",
    "GitHubRouteError",
    "GitHubTransportError",
    "MediaType",
    "Page",
    "PullRequestHandler",
]

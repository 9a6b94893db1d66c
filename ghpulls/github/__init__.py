"""GitHub REST client context, errors, models and decoding."""

from __future__ import annotations

from .client import GitHubClient
from .config import GitHubClientConfig
from .errors import (
    BuilderAlreadySentError,
    GitHubAPIError,
    GitHubConfigError,
    GitHubDecodeError,
    GitHubError,
    GitHubMergeConflictError,
    GitHubRouteError,
    GitHubTransportError,
)
from .media import MediaType, format_media_type
from .observability import ErrorCategory, RequestEventLogger, categorize_error
from .page import Page, parse_link_header
from .params import CommentSort, Direction, MergeMethod, Sort, State

__all__ = [
    "BuilderAlreadySentError",
    "CommentSort",
    "Direction",
    "ErrorCategory",
    "GitHubAPIError",
    "GitHubClient",
    "GitHubClientConfig",
    "GitHubConfigError",
    "GitHubDecodeError",
    "GitHubError",
    "GitHubMergeConflictError",
    "GitHubRouteError",
    "GitHubTransportError",
    "MediaType",
    "MergeMethod",
    "Page",
    "RequestEventLogger",
    "Sort",
    "State",
    "categorize_error",
    "format_media_type",
    "parse_link_header",
]

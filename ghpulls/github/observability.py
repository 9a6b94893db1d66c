"""Structured request events and error categorization.

Events are emitted through femtologging as single pre-formatted lines, e.g.
``[github.request.failed] method=GET route=repos/o/r/pulls ...``, so log
aggregators can key on the bracketed event type.
"""

from __future__ import annotations

import enum

from ghpulls.logging import get_logger, log_debug, log_warning

from .errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubDecodeError,
    GitHubMergeConflictError,
    GitHubRouteError,
    GitHubTransportError,
)

logger = get_logger(__name__)

_HTTP_SERVER_ERROR_THRESHOLD = 500
_HTTP_RATE_LIMITED = 429
_HTTP_FORBIDDEN = 403


class RequestEventType(enum.StrEnum):
    """Structured log event types for GitHub requests."""

    REQUEST_STARTED = "github.request.started"
    REQUEST_COMPLETED = "github.request.completed"
    REQUEST_FAILED = "github.request.failed"


class ErrorCategory(enum.StrEnum):
    """Categories that tell a caller what to do about a failure."""

    TRANSIENT = "transient"
    RATE_LIMITED = "rate_limited"
    CONFLICT = "conflict"
    CLIENT_ERROR = "client_error"
    SCHEMA_DRIFT = "schema_drift"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


_EXCEPTION_CATEGORY_MAP: tuple[tuple[type[BaseException], ErrorCategory], ...] = (
    (GitHubTransportError, ErrorCategory.TRANSIENT),
    (GitHubMergeConflictError, ErrorCategory.CONFLICT),
    (GitHubDecodeError, ErrorCategory.SCHEMA_DRIFT),
    (GitHubRouteError, ErrorCategory.CONFIGURATION),
    (GitHubConfigError, ErrorCategory.CONFIGURATION),
)


def _is_rate_limited(exc: GitHubAPIError) -> bool:
    if exc.status_code == _HTTP_RATE_LIMITED:
        return True
    return exc.status_code == _HTTP_FORBIDDEN and exc.rate_limit_remaining == 0


def categorize_error(exc: BaseException) -> ErrorCategory:
    """Categorize an exception raised by the client.

    Transport failures and 5xx responses are transient. A 429, or a 403
    with ``X-RateLimit-Remaining: 0`` (GitHub's primary rate limit), is rate
    limiting. Decode failures on a success response indicate schema drift.
    """
    for exc_type, category in _EXCEPTION_CATEGORY_MAP:
        if isinstance(exc, exc_type):
            return category

    if isinstance(exc, GitHubAPIError):
        if exc.status_code >= _HTTP_SERVER_ERROR_THRESHOLD:
            return ErrorCategory.TRANSIENT
        if _is_rate_limited(exc):
            return ErrorCategory.RATE_LIMITED
        return ErrorCategory.CLIENT_ERROR

    return ErrorCategory.UNKNOWN


class RequestEventLogger:
    """Emit request lifecycle events via femtologging.

    Successful traffic is logged at DEBUG; failures at WARNING, since the
    caller receives the exception and decides whether it is an error.
    """

    def log_request_started(self, *, method: str, route: str) -> None:
        """Log a request about to be handed to the transport."""
        log_debug(
            logger,
            "[%s] method=%s route=%s",
            RequestEventType.REQUEST_STARTED,
            method,
            route,
        )

    def log_request_completed(
        self,
        *,
        method: str,
        route: str,
        status_code: int,
        duration_ms: float,
    ) -> None:
        """Log a request that produced an HTTP response of any status."""
        log_debug(
            logger,
            "[%s] method=%s route=%s status=%d duration_ms=%.1f",
            RequestEventType.REQUEST_COMPLETED,
            method,
            route,
            status_code,
            duration_ms,
        )

    def log_request_failed(
        self,
        *,
        method: str,
        route: str,
        error: BaseException,
    ) -> None:
        """Log a request that failed, with the error's category."""
        log_warning(
            logger,
            "[%s] method=%s route=%s error_type=%s error_category=%s "
            "error_message=%s",
            RequestEventType.REQUEST_FAILED,
            method,
            route,
            type(error).__name__,
            categorize_error(error),
            str(error),
        )

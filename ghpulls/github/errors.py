"""Structured errors raised by the GitHub REST client.

Every failure surfaces as a :class:`GitHubError` subclass so callers can tell
apart what is worth retrying (transport), what carries a message for a user
(remote-service), and what is a bug (decode or route).
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

# Characters of response body kept on errors for diagnosis
_BODY_SNIPPET_LIMIT = 200


def body_snippet(text: str) -> str:
    """Return ``text`` truncated for inclusion in error context."""
    if len(text) > _BODY_SNIPPET_LIMIT:
        return text[:_BODY_SNIPPET_LIMIT] + "..."
    return text


class GitHubError(Exception):
    """Base class for all ghpulls client errors."""

    def __init__(self, message: str, *, route: str | None = None) -> None:
        """Initialise with a message and the route that was being requested."""
        self.message = message
        self.route = route
        super().__init__(message)


class GitHubTransportError(GitHubError):
    """Raised when the request never produced an HTTP response."""

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        route: str | None = None,
    ) -> None:
        """Initialise with the HTTP method and route of the failed request."""
        self.method = method
        super().__init__(message, route=route)

    @classmethod
    def timeout(cls, method: str, route: str) -> GitHubTransportError:
        """Return an error for a request that timed out."""
        return cls(
            f"GitHub request timed out: {method} {route}",
            method=method,
            route=route,
        )

    @classmethod
    def network_error(cls, method: str, route: str, detail: str) -> GitHubTransportError:
        """Return an error for DNS, connection or TLS failures."""
        return cls(
            f"GitHub network error for {method} {route}: {detail}",
            method=method,
            route=route,
        )


class GitHubAPIError(GitHubError):
    """Raised when GitHub answers with a non-success status.

    Attributes
    ----------
    status_code
        HTTP status returned by GitHub.
    documentation_url
        Link GitHub attaches to most error payloads, when present.
    errors
        Field-level validation errors from a 422 payload.
    body_snippet
        Leading part of the raw body, kept when it could not be parsed.
    rate_limit_remaining
        Value of the ``X-RateLimit-Remaining`` header, when GitHub sent one.

    """

    def __init__(  # noqa: PLR0913
        self,
        message: str,
        *,
        status_code: int,
        route: str | None = None,
        documentation_url: str | None = None,
        errors: cabc.Sequence[object] = (),
        body_snippet: str | None = None,
        rate_limit_remaining: int | None = None,
    ) -> None:
        """Initialise with the status code and any parsed error payload."""
        self.status_code = status_code
        self.rate_limit_remaining = rate_limit_remaining
        self.documentation_url = documentation_url
        self.errors = tuple(errors)
        self.body_snippet = body_snippet
        super().__init__(message, route=route)

    @classmethod
    def http_error(
        cls,
        status_code: int,
        *,
        route: str | None = None,
        body: str | None = None,
        rate_limit_remaining: int | None = None,
    ) -> GitHubAPIError:
        """Return an error for a status whose body carried no usable message."""
        return cls(
            f"GitHub HTTP {status_code}",
            status_code=status_code,
            route=route,
            body_snippet=body_snippet(body) if body else None,
            rate_limit_remaining=rate_limit_remaining,
        )

    @classmethod
    def unexpected_status(cls, status_code: int, *, route: str) -> GitHubAPIError:
        """Return an error for a success status the operation does not define."""
        return cls(
            f"GitHub returned undocumented status {status_code} for {route}",
            status_code=status_code,
            route=route,
        )


class GitHubMergeConflictError(GitHubAPIError):
    """Raised when a merge is refused as not mergeable or on a moved head."""


class GitHubDecodeError(GitHubError):
    """Raised when a success response does not match the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        route: str | None = None,
        body_snippet: str | None = None,
    ) -> None:
        """Initialise with the route and leading part of the offending body."""
        self.body_snippet = body_snippet
        super().__init__(message, route=route)

    @classmethod
    def invalid_body(cls, route: str, detail: str, body: str) -> GitHubDecodeError:
        """Return an error for a body that failed typed decoding."""
        return cls(
            f"Failed to decode GitHub response for {route}: {detail}",
            route=route,
            body_snippet=body_snippet(body),
        )


class GitHubRouteError(GitHubError):
    """Raised when a route cannot be resolved against the API base URL."""

    @classmethod
    def malformed(cls, route: str, reason: str) -> GitHubRouteError:
        """Return an error for a route rejected before any network activity."""
        return cls(f"Malformed GitHub route {route!r}: {reason}", route=route)


class GitHubConfigError(GitHubError):
    """Raised when client configuration is invalid."""

    @classmethod
    def empty_token(cls) -> GitHubConfigError:
        """Return an error when an explicitly supplied token is blank."""
        return cls("GitHub token must be non-empty when provided")

    @classmethod
    def invalid_api_url(cls, value: str) -> GitHubConfigError:
        """Return an error for a base URL that is not http or https."""
        return cls(f"GitHub API URL must be an http(s) URL, got {value!r}")

    @classmethod
    def invalid_timeout(cls, value: str) -> GitHubConfigError:
        """Return an error for a non-positive or non-numeric timeout."""
        return cls(
            f"Invalid GHPULLS_GITHUB_TIMEOUT_S {value!r}. Must be a positive number"
        )


class BuilderAlreadySentError(RuntimeError):
    """Raised when a request builder is used again after ``send()``."""

    @classmethod
    def for_builder(cls, builder: object) -> BuilderAlreadySentError:
        """Return an error naming the consumed builder type."""
        return cls(f"{type(builder).__name__} has already been sent")

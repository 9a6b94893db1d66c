"""Classify GitHub responses and decode them into typed values.

Every response passes through three stages in order:

1. transport failures never reach this module; :class:`GitHubClient` raises
   them while executing the request;
2. :func:`raise_for_github_error` turns any non-2xx status into a
   :class:`GitHubAPIError`, parsing the error payload on a best-effort basis;
3. the ``decode_*`` helpers convert a success body into the caller's type or
   raise :class:`GitHubDecodeError`.

Status-flag operations skip stage 3: :func:`decode_status_flag` maps the
documented statuses to ``True`` or ``False`` without reading the body.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec

from .errors import (
    GitHubAPIError,
    GitHubDecodeError,
    GitHubMergeConflictError,
)
from .page import Page

if typ.TYPE_CHECKING:
    import httpx

_SUCCESS_MIN = 200
_SUCCESS_MAX = 299
_UNDECODABLE_PREVIEW = 200

T = typ.TypeVar("T")


class GitHubErrorBody(msgspec.Struct, kw_only=True):
    """Error payload GitHub returns alongside most 4xx and 5xx statuses."""

    message: str | None = None
    documentation_url: str | None = None
    errors: list[typ.Any] = msgspec.field(default_factory=list)


class _ItemsEnvelope(msgspec.Struct, typ.Generic[T], kw_only=True):
    """Object-wrapped collection, as returned by search-style endpoints."""

    items: list[T]
    total_count: int | None = None
    incomplete_results: bool | None = None


def is_success(status_code: int) -> bool:
    """Return True for 2xx statuses."""
    return _SUCCESS_MIN <= status_code <= _SUCCESS_MAX


def _parse_error_body(content: bytes) -> GitHubErrorBody | None:
    if not content:
        return None
    try:
        return msgspec.json.decode(content, type=GitHubErrorBody)
    except msgspec.DecodeError:
        return None


def _rate_limit_remaining(response: httpx.Response) -> int | None:
    raw = response.headers.get("X-RateLimit-Remaining")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _error_type_for(
    status_code: int,
    conflict_statuses: cabc.Container[int],
) -> type[GitHubAPIError]:
    if status_code in conflict_statuses:
        return GitHubMergeConflictError
    return GitHubAPIError


def build_api_error(
    response: httpx.Response,
    route: str,
    *,
    conflict_statuses: cabc.Container[int] = (),
) -> GitHubAPIError:
    """Return the structured error for a non-success ``response``.

    The body is parsed as a GitHub error payload when possible. A body that
    is empty, not JSON, or has no message still yields an error carrying the
    status, so the failure signal is never lost.
    """
    status = response.status_code
    error_cls = _error_type_for(status, conflict_statuses)
    parsed = _parse_error_body(response.content)
    remaining = _rate_limit_remaining(response)
    if parsed is not None and parsed.message:
        return error_cls(
            f"GitHub HTTP {status}: {parsed.message}",
            status_code=status,
            route=route,
            documentation_url=parsed.documentation_url,
            errors=parsed.errors,
            rate_limit_remaining=remaining,
        )
    return error_cls.http_error(
        status,
        route=route,
        body=response.text or None,
        rate_limit_remaining=remaining,
    )


def raise_for_github_error(
    response: httpx.Response,
    route: str,
    *,
    conflict_statuses: cabc.Container[int] = (),
) -> httpx.Response:
    """Return ``response`` unchanged when successful, else raise.

    Raises
    ------
    GitHubAPIError
        For any status outside 200-299. Statuses listed in
        ``conflict_statuses`` raise :class:`GitHubMergeConflictError`.

    """
    if is_success(response.status_code):
        return response
    raise build_api_error(response, route, conflict_statuses=conflict_statuses)


def decode_json(response: httpx.Response, target: type[T], route: str) -> T:
    """Decode a success body into ``target``.

    Raises
    ------
    GitHubDecodeError
        If the body is not JSON or does not match ``target``.

    """
    try:
        return msgspec.json.decode(response.content, type=target)
    except msgspec.DecodeError as exc:
        raise GitHubDecodeError.invalid_body(route, str(exc), response.text) from exc


def decode_page(response: httpx.Response, item_type: type[T], route: str) -> Page[T]:
    """Decode a collection body into a :class:`Page` of ``item_type``.

    Plain JSON arrays and ``{"items": [...]}`` envelopes are both accepted.
    Item order is preserved.
    """
    link_header = response.headers.get("Link")
    if response.content.lstrip().startswith(b"{"):
        envelope = decode_json(response, _ItemsEnvelope[item_type], route)
        return Page.from_links(
            envelope.items,
            link_header,
            total_count=envelope.total_count,
            incomplete_results=envelope.incomplete_results,
        )
    items = decode_json(response, list[item_type], route)
    return Page.from_links(items, link_header)


def decode_text(response: httpx.Response, route: str) -> str:
    """Return a success body as text, as used for diff and patch output.

    Raises
    ------
    GitHubDecodeError
        If the body is not valid in the response's declared encoding.

    """
    try:
        return response.content.decode(response.encoding or "utf-8")
    except (UnicodeDecodeError, LookupError) as exc:
        raise GitHubDecodeError.invalid_body(
            route, str(exc), repr(response.content[:_UNDECODABLE_PREVIEW])
        ) from exc


def decode_status_flag(
    response: httpx.Response,
    route: str,
    *,
    true_status: int,
    false_statuses: cabc.Container[int],
) -> bool:
    """Map a status-only response to a boolean.

    ``true_status`` yields True and any of ``false_statuses`` yields False;
    the body is never decoded. Any other status is an error: non-2xx
    statuses are classified as usual and undocumented 2xx statuses raise
    rather than guess.
    """
    status = response.status_code
    if status == true_status:
        return True
    if status in false_statuses:
        return False
    raise_for_github_error(response, route)
    raise GitHubAPIError.unexpected_status(status, route=route)

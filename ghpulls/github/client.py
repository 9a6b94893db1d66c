"""Shared client context for the GitHub REST API.

:class:`GitHubClient` owns the pieces every resource handle needs and none of
them implements: resolving routes against the base URL, attaching
authentication, executing requests, and running responses through the error
classifier and decoder. It performs no retries, caching or backoff.
"""

from __future__ import annotations

import collections.abc as cabc
import re
import time
import typing as typ

import httpx
import msgspec

from ghpulls.common.slug import parse_repo_slug

from .config import GitHubClientConfig
from .decode import (
    decode_json,
    decode_page,
    decode_status_flag,
    decode_text,
    raise_for_github_error,
)
from .errors import GitHubError, GitHubRouteError, GitHubTransportError
from .observability import RequestEventLogger

if typ.TYPE_CHECKING:
    import types

    from ghpulls.pulls.handler import PullRequestHandler

    from .page import Page

T = typ.TypeVar("T")

_API_VERSION = "2022-11-28"
_UNSAFE_ROUTE_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


def _route_for_log(url: httpx.URL, base: httpx.URL) -> str:
    """Return ``url`` relative to ``base`` for logging, when it is beneath it."""
    text = str(url).split("?", 1)[0]
    prefix = str(base).rstrip("/") + "/"
    return text.removeprefix(prefix)


class GitHubClient:
    """Async GitHub REST client shared by resource handles.

    Parameters
    ----------
    config
        Client settings. Defaults to anonymous access to ``api.github.com``.
    http_client
        Optional ``httpx.AsyncClient``. When given, the caller owns it and
        its headers (authentication included); ``aclose`` leaves it open.
    event_logger
        Optional request event logger, mainly for tests.

    Examples
    --------
    >>> async def main() -> None:
    ...     async with GitHubClient(GitHubClientConfig.from_env()) as client:
    ...         pr = await client.pulls("octo", "reef").get(1)

    """

    def __init__(
        self,
        config: GitHubClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        event_logger: RequestEventLogger | None = None,
    ) -> None:
        """Initialise the client, creating an owned HTTP client if needed."""
        self._config = config or GitHubClientConfig()
        self._base_url = httpx.URL(self._config.api_url.rstrip("/") + "/")
        self._events = event_logger or RequestEventLogger()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=self._config.timeout_s,
            headers=self._default_headers(self._config),
        )

    @staticmethod
    def _default_headers(config: GitHubClientConfig) -> dict[str, str]:
        headers = {
            "User-Agent": config.user_agent,
            "X-GitHub-Api-Version": _API_VERSION,
        }
        if config.token is not None:
            headers["Authorization"] = f"Bearer {config.token}"
        return headers

    @property
    def config(self) -> GitHubClientConfig:
        """Read-only access to the client configuration."""
        return self._config

    @property
    def base_url(self) -> httpx.URL:
        """Base URL routes are resolved against, always ending in ``/``."""
        return self._base_url

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> GitHubClient:
        """Enter an ``async with`` block."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned resources on leaving an ``async with`` block."""
        await self.aclose()

    def pulls(self, owner: str, repo: str | None = None) -> PullRequestHandler:
        """Return a pull request handle scoped to ``owner/repo``.

        ``owner`` may instead be a full ``owner/name`` slug when ``repo`` is
        omitted.

        Raises
        ------
        ValueError
            If the slug or either segment is invalid.

        """
        # Deferred: the handler module imports this package's submodules.
        from ghpulls.pulls.handler import PullRequestHandler

        if repo is None:
            owner, repo = parse_repo_slug(owner)
        return PullRequestHandler(self, owner, repo)

    # ------------------------------------------------------------------
    # Request construction
    # ------------------------------------------------------------------

    def absolute_url(self, route: str) -> httpx.URL:
        """Resolve ``route`` against the base URL.

        Relative routes such as ``repos/octo/reef/pulls`` are appended to the
        base path. Absolute URLs, as found in ``Link`` headers, are accepted
        only when they point beneath the base URL.

        Raises
        ------
        GitHubRouteError
            If the route is empty, contains whitespace or control
            characters, contains ``..`` segments, or points elsewhere.

        """
        if not route:
            raise GitHubRouteError.malformed(route, "route is empty")
        if _UNSAFE_ROUTE_CHARS.search(route):
            raise GitHubRouteError.malformed(route, "contains whitespace")
        if ".." in route.split("?", 1)[0].split("/"):
            raise GitHubRouteError.malformed(route, "contains '..' segments")

        try:
            if "://" in route:
                url = httpx.URL(route)
                if not str(url).startswith(str(self._base_url)):
                    raise GitHubRouteError.malformed(route, "outside the API base URL")
            else:
                url = self._base_url.join(route.lstrip("/"))
        except httpx.InvalidURL as exc:
            raise GitHubRouteError.malformed(route, str(exc)) from exc

        return url

    def build_request(  # noqa: PLR0913
        self,
        method: str,
        route: str,
        *,
        params: cabc.Mapping[str, str | int] | None = None,
        body: object | None = None,
        accept: str | None = None,
    ) -> httpx.Request:
        """Assemble a request without sending it.

        Query parameters are attached only when ``params`` is non-empty, a
        JSON body only when ``body`` is not ``None``, and an ``Accept``
        header only when ``accept`` is given. Without ``accept`` the request
        carries no ``Accept`` header at all, leaving GitHub's default
        representation in force.
        """
        url = self.absolute_url(route)
        headers: dict[str, str] = {}
        content: bytes | None = None
        if body is not None:
            content = msgspec.json.encode(body)
            headers["Content-Type"] = "application/json"
        if accept is not None:
            headers["Accept"] = accept

        request = self._client.build_request(
            method,
            url,
            params=dict(params) if params else None,
            content=content,
            headers=headers,
        )
        if accept is None:
            request.headers.pop("Accept", None)
        return request

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def execute(self, request: httpx.Request) -> httpx.Response:
        """Send ``request`` and return the response of whatever status.

        Raises
        ------
        GitHubTransportError
            If no response was received (timeout, DNS, connection, TLS).

        """
        method = request.method
        route = _route_for_log(request.url, self._base_url)
        self._events.log_request_started(method=method, route=route)
        started = time.perf_counter()
        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as exc:
            error = GitHubTransportError.timeout(method, route)
            self._events.log_request_failed(method=method, route=route, error=error)
            raise error from exc
        except httpx.RequestError as exc:
            error = GitHubTransportError.network_error(method, route, str(exc))
            self._events.log_request_failed(method=method, route=route, error=error)
            raise error from exc

        self._events.log_request_completed(
            method=method,
            route=route,
            status_code=response.status_code,
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        return response

    async def _dispatch(
        self,
        request: httpx.Request,
        handle: cabc.Callable[[httpx.Response, str], T],
    ) -> T:
        response = await self.execute(request)
        route = _route_for_log(request.url, self._base_url)
        try:
            return handle(response, route)
        except GitHubError as exc:
            self._events.log_request_failed(
                method=request.method, route=route, error=exc
            )
            raise

    async def send_json(
        self,
        request: httpx.Request,
        target: type[T],
        *,
        conflict_statuses: cabc.Container[int] = (),
    ) -> T:
        """Send ``request`` and decode the success body into ``target``."""

        def _handle(response: httpx.Response, route: str) -> T:
            raise_for_github_error(response, route, conflict_statuses=conflict_statuses)
            return decode_json(response, target, route)

        return await self._dispatch(request, _handle)

    async def send_page(self, request: httpx.Request, item_type: type[T]) -> Page[T]:
        """Send ``request`` and decode the collection body into a page."""

        def _handle(response: httpx.Response, route: str) -> Page[T]:
            raise_for_github_error(response, route)
            return decode_page(response, item_type, route)

        return await self._dispatch(request, _handle)

    async def send_text(self, request: httpx.Request) -> str:
        """Send ``request`` and return the success body as text."""

        def _handle(response: httpx.Response, route: str) -> str:
            raise_for_github_error(response, route)
            return decode_text(response, route)

        return await self._dispatch(request, _handle)

    async def send_status_flag(
        self,
        request: httpx.Request,
        *,
        true_status: int,
        false_statuses: cabc.Container[int],
    ) -> bool:
        """Send ``request`` and map its status to a boolean."""

        def _handle(response: httpx.Response, route: str) -> bool:
            return decode_status_flag(
                response,
                route,
                true_status=true_status,
                false_statuses=false_statuses,
            )

        return await self._dispatch(request, _handle)

    async def get_page(self, url: str | None, item_type: type[T]) -> Page[T] | None:
        """Fetch the page at ``url``, typically ``page.next`` of a prior page.

        Returns ``None`` when ``url`` is ``None`` so callers can walk pages
        with ``while page is not None``. No ``Accept`` override is sent;
        the media type of the request that produced the first page is not
        carried over.
        """
        if url is None:
            return None
        request = self.build_request("GET", url)
        return await self.send_page(request, item_type)

"""Mock GitHub transport for client and handler tests."""

from __future__ import annotations

import dataclasses
import json
import typing as typ

import httpx

from ghpulls.github import GitHubClient, GitHubClientConfig

API_URL = "https://api.github.test"

Responder = typ.Callable[[httpx.Request], httpx.Response]


@dataclasses.dataclass(slots=True)
class RecordedGitHub:
    """A client wired to a mock transport plus the requests it received."""

    client: GitHubClient
    http_client: httpx.AsyncClient
    requests: list[httpx.Request]

    @property
    def last(self) -> httpx.Request:
        """Return the most recent request."""
        return self.requests[-1]

    def last_json(self) -> object:
        """Return the decoded JSON body of the most recent request."""
        return json.loads(self.last.content.decode("utf-8"))

    async def aclose(self) -> None:
        """Close the injected HTTP client."""
        await self.http_client.aclose()


def json_response(
    status: int,
    payload: object,
    *,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build a JSON response."""
    return httpx.Response(status_code=status, json=payload, headers=headers)


def empty_response(status: int) -> httpx.Response:
    """Build a response with no body."""
    return httpx.Response(status_code=status)


def make_github(
    responses: list[httpx.Response] | Responder,
    *,
    config: GitHubClientConfig | None = None,
) -> RecordedGitHub:
    """Return a client whose transport replays ``responses`` in order.

    ``responses`` may instead be a callable computing each response from
    the request, e.g. to raise transport errors.
    """
    requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if callable(responses):
            return responses(request)
        return responses[len(requests) - 1]

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(_handler))
    client = GitHubClient(
        config or GitHubClientConfig(api_url=API_URL),
        http_client=http_client,
    )
    return RecordedGitHub(client=client, http_client=http_client, requests=requests)

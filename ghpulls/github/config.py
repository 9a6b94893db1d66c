"""Configuration for the GitHub REST client."""

from __future__ import annotations

import dataclasses
import os

from .errors import GitHubConfigError

_DEFAULT_API_URL = "https://api.github.com"
_DEFAULT_TIMEOUT_S = 20.0
_DEFAULT_USER_AGENT = "ghpulls/0.1"
_ALLOWED_SCHEMES = ("http://", "https://")


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubClientConfig:
    """Settings for :class:`ghpulls.github.client.GitHubClient`.

    Attributes
    ----------
    token
        Bearer token sent as ``Authorization``. ``None`` makes anonymous
        requests.
    api_url
        Base URL every relative route is resolved against.
    timeout_s
        Per-request timeout applied to the owned ``httpx.AsyncClient``.
    user_agent
        ``User-Agent`` header value; GitHub rejects requests without one.

    """

    token: str | None = None
    api_url: str = _DEFAULT_API_URL
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = _DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        """Validate the token and base URL."""
        if self.token is not None and not self.token.strip():
            raise GitHubConfigError.empty_token()
        if not self.api_url.lower().startswith(_ALLOWED_SCHEMES):
            raise GitHubConfigError.invalid_api_url(self.api_url)

    @staticmethod
    def _parse_timeout_from_env() -> float:
        raw_timeout = os.environ.get("GHPULLS_GITHUB_TIMEOUT_S")
        if raw_timeout is None:
            return _DEFAULT_TIMEOUT_S

        try:
            timeout_s = float(raw_timeout)
        except ValueError as exc:
            raise GitHubConfigError.invalid_timeout(raw_timeout) from exc

        if timeout_s <= 0:
            raise GitHubConfigError.invalid_timeout(raw_timeout)
        return timeout_s

    @classmethod
    def from_env(cls) -> GitHubClientConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GHPULLS_GITHUB_TOKEN``: optional token; blank means anonymous
        - ``GHPULLS_GITHUB_API_URL``: optional base URL override
        - ``GHPULLS_GITHUB_TIMEOUT_S``: optional positive timeout in seconds

        Raises
        ------
        GitHubConfigError
            If the base URL or timeout is invalid.

        """
        token = os.environ.get("GHPULLS_GITHUB_TOKEN", "").strip() or None
        api_url = os.environ.get("GHPULLS_GITHUB_API_URL", "").strip()
        return cls(
            token=token,
            api_url=api_url or _DEFAULT_API_URL,
            timeout_s=cls._parse_timeout_from_env(),
        )

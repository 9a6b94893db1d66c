"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import typing as typ

import pytest
import pytest_asyncio

from ghpulls.github import GitHubClient, GitHubClientConfig
from tests.helpers.github_mock import API_URL


@pytest.fixture
def github_config() -> GitHubClientConfig:
    """Return a client configuration pointing at the mock API host."""
    return GitHubClientConfig(token="ghp_test", api_url=API_URL)


@pytest.fixture(autouse=True)
def _clear_github_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real GitHub settings out of the tests."""
    for name in (
        "GHPULLS_GITHUB_TOKEN",
        "GHPULLS_GITHUB_API_URL",
        "GHPULLS_GITHUB_TIMEOUT_S",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest_asyncio.fixture
async def owned_client(
    github_config: GitHubClientConfig,
) -> typ.AsyncIterator[GitHubClient]:
    """Yield a client that owns its HTTP client, closing it afterwards."""
    client = GitHubClient(github_config)
    try:
        yield client
    finally:
        await client.aclose()

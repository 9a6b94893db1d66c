"""Unit tests for repository slug utilities."""

from __future__ import annotations

import pytest

from ghpulls.common.slug import parse_repo_slug, repo_slug, validate_segment


def test_repo_slug_combines_owner_and_name() -> None:
    """repo_slug returns owner/name format."""
    assert repo_slug("octo", "reef") == "octo/reef"
    assert repo_slug("org", "repo") == "org/repo"


def test_parse_repo_slug_splits_owner_and_name() -> None:
    """parse_repo_slug returns (owner, name) for valid slugs."""
    assert parse_repo_slug("octo/reef") == ("octo", "reef")
    assert parse_repo_slug("Owner-Org/Repo_Name") == ("Owner-Org", "Repo_Name")


@pytest.mark.parametrize(
    "slug",
    [
        "",
        "   ",
        "/",
        "invalid",
        "owner/name/extra",
        r"owner\\name",
        "owner/",
        "/name",
        "owner//name",
    ],
)
def test_parse_repo_slug_rejects_invalid_slugs(slug: str) -> None:
    """parse_repo_slug raises ValueError for invalid slugs."""
    with pytest.raises(ValueError, match="Invalid repository slug"):
        parse_repo_slug(slug)


def test_validate_segment_returns_value() -> None:
    """Usable segments are returned unchanged."""
    assert validate_segment("reef.js", field="repo") == "reef.js"


@pytest.mark.parametrize(
    ("value", "match"),
    [
        ("", "repo must be a non-empty string"),
        ("  ", "repo must be a non-empty string"),
        ("octo/reef", "repo must not contain '/'"),
        (".", "repo must not be a dot segment"),
        ("..", "repo must not be a dot segment"),
        ("reef?x=1", r"repo must not contain '\?'"),
        ("reef#top", "repo must not contain '#'"),
        ("reef%2F..", "repo must not contain '%'"),
    ],
)
def test_validate_segment_rejects_unusable_values(value: str, match: str) -> None:
    """Blank, dot and URL-reserved segments are rejected."""
    with pytest.raises(ValueError, match=match):
        validate_segment(value, field="repo")


@pytest.mark.parametrize("value", ["reef.js", ".github", "a..b", "Repo_Name-2"])
def test_validate_segment_accepts_dotted_names(value: str) -> None:
    """Names containing dots are fine as long as they are not dot segments."""
    assert validate_segment(value, field="repo") == value

"""Unit tests for Link header parsing and the Page carrier."""

from __future__ import annotations

import dataclasses

import pytest

from ghpulls.github.page import Page, parse_link_header

_LINKS = (
    '<https://api.github.test/repos/o/r/pulls?page=3>; rel="next", '
    '<https://api.github.test/repos/o/r/pulls?page=5>; rel="last", '
    '<https://api.github.test/repos/o/r/pulls?page=1>; rel="first", '
    '<https://api.github.test/repos/o/r/pulls?page=1>; rel="prev"'
)


class TestParseLinkHeader:
    """Tests for parse_link_header."""

    def test_parses_all_relations(self) -> None:
        """Every relation in the header is returned."""
        links = parse_link_header(_LINKS)
        assert links == {
            "next": "https://api.github.test/repos/o/r/pulls?page=3",
            "last": "https://api.github.test/repos/o/r/pulls?page=5",
            "first": "https://api.github.test/repos/o/r/pulls?page=1",
            "prev": "https://api.github.test/repos/o/r/pulls?page=1",
        }

    @pytest.mark.parametrize("value", [None, "", "garbage", "<no-rel>"])
    def test_missing_or_malformed_header_yields_nothing(
        self, value: str | None
    ) -> None:
        """Absent or unparseable headers produce no links."""
        assert parse_link_header(value) == {}

    def test_unquoted_and_multi_valued_rel(self) -> None:
        """Unquoted rel values and space-separated names are accepted."""
        links = parse_link_header(
            '<https://x.test/a>; rel=next, <https://x.test/b>; rel="prev first"'
        )
        assert links == {
            "next": "https://x.test/a",
            "prev": "https://x.test/b",
            "first": "https://x.test/b",
        }


class TestPage:
    """Tests for the Page carrier."""

    def test_from_links_preserves_item_order(self) -> None:
        """Items are kept in response order with navigation targets."""
        page = Page.from_links([3, 1, 2], _LINKS)
        assert page.items == (3, 1, 2)
        assert list(page) == [3, 1, 2]
        assert len(page) == 3
        assert page.has_next
        assert page.last == "https://api.github.test/repos/o/r/pulls?page=5"

    def test_last_page_has_no_next(self) -> None:
        """A page without a next link reports no following page."""
        page = Page.from_links(["a"], None)
        assert not page.has_next
        assert page.next is None
        assert page.prev is None
        assert page.total_count is None

    def test_empty_page(self) -> None:
        """An empty collection is a valid page."""
        page = Page.from_links([], None)
        assert len(page) == 0
        assert page.items == ()

    def test_page_is_immutable(self) -> None:
        """Pages cannot be modified after construction."""
        page = Page.from_links([1], None)
        with pytest.raises(dataclasses.FrozenInstanceError):
            page.next = "https://x.test"  # type: ignore[misc]

"""Pagination carrier for GitHub collection endpoints.

GitHub paginates REST collections with an RFC 8288 ``Link`` header. A
:class:`Page` keeps one response's items in order together with the
``first``/``prev``/``next``/``last`` targets; fetching another page is a new
request through :meth:`ghpulls.github.client.GitHubClient.get_page`.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import re
import typing as typ

T = typ.TypeVar("T")

_LINK_PART = re.compile(r'<(?P<url>[^>]*)>\s*;\s*rel="?(?P<rel>[^";]+)"?')


def parse_link_header(value: str | None) -> dict[str, str]:
    """Return a mapping of relation name to URL from a ``Link`` header.

    Entries that do not look like ``<url>; rel="name"`` are skipped. A
    relation holding several space-separated names maps each name.

    >>> parse_link_header('<https://x.test/p?page=2>; rel="next"')
    {'next': 'https://x.test/p?page=2'}

    """
    if not value:
        return {}

    links: dict[str, str] = {}
    for part in value.split(","):
        match = _LINK_PART.search(part)
        if match is None:
            continue
        for rel in match.group("rel").split():
            links[rel] = match.group("url")
    return links


@dataclasses.dataclass(frozen=True, slots=True)
class Page(typ.Generic[T]):
    """One page of a collection response.

    Attributes
    ----------
    items
        Decoded items in the order GitHub returned them.
    next, prev, first, last
        Absolute URLs of neighbouring pages, when GitHub advertised them.
    total_count, incomplete_results
        Only set for search-shaped payloads that wrap ``items`` in an object.

    """

    items: tuple[T, ...]
    next: str | None = None
    prev: str | None = None
    first: str | None = None
    last: str | None = None
    total_count: int | None = None
    incomplete_results: bool | None = None

    @classmethod
    def from_links(
        cls,
        items: cabc.Iterable[T],
        link_header: str | None,
        *,
        total_count: int | None = None,
        incomplete_results: bool | None = None,
    ) -> Page[T]:
        """Build a page from decoded items and the raw ``Link`` header."""
        links = parse_link_header(link_header)
        return cls(
            items=tuple(items),
            next=links.get("next"),
            prev=links.get("prev"),
            first=links.get("first"),
            last=links.get("last"),
            total_count=total_count,
            incomplete_results=incomplete_results,
        )

    @property
    def has_next(self) -> bool:
        """Return True when GitHub advertised a following page."""
        return self.next is not None

    def __len__(self) -> int:
        """Return the number of items on this page."""
        return len(self.items)

    def __iter__(self) -> typ.Iterator[T]:
        """Iterate over the items on this page."""
        return iter(self.items)

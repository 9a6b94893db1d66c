"""Builder for listing pull requests."""

from __future__ import annotations

import typing as typ

from ghpulls.github.models import PullRequest

from ._builder import QueryBuilder

if typ.TYPE_CHECKING:
    from ghpulls.github.page import Page
    from ghpulls.github.params import Direction, Sort, State


class ListPullRequestsBuilder(QueryBuilder):
    """Configure and send ``GET repos/{owner}/{repo}/pulls``.

    Every filter is optional. Sent unconfigured, the request carries no
    query string and GitHub applies its own defaults (open pull requests,
    newest first, 30 per page).
    """

    def state(self, state: State) -> typ.Self:
        """Filter by open, closed or all pull requests."""
        return self._set_param("state", state.value)

    def head(self, head: str) -> typ.Self:
        """Filter by head, given as ``user:ref-name`` or ``org:ref-name``."""
        return self._set_param("head", head)

    def base(self, base: str) -> typ.Self:
        """Filter by base branch name."""
        return self._set_param("base", base)

    def sort(self, sort: Sort) -> typ.Self:
        """Choose the sort key."""
        return self._set_param("sort", sort.value)

    def direction(self, direction: Direction) -> typ.Self:
        """Choose ascending or descending order."""
        return self._set_param("direction", direction.value)

    async def send(self) -> Page[PullRequest]:
        """Fetch one page of matching pull requests."""
        self._consume()
        handler = self._handler
        request = handler.build_request(
            "GET", handler.route("pulls"), params=self._params
        )
        return await handler.client.send_page(request, PullRequest)

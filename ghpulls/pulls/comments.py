"""Builder for listing comments repository-wide or on one pull request."""

from __future__ import annotations

import datetime as dt
import typing as typ

from ghpulls.github.models import Comment

from ._builder import QueryBuilder

if typ.TYPE_CHECKING:
    from ghpulls.github.page import Page
    from ghpulls.github.params import CommentSort, Direction

    from .handler import PullRequestHandler


def _format_since(since: dt.datetime) -> str:
    if since.tzinfo is None:
        msg = "since must be timezone-aware"
        raise ValueError(msg)
    return since.astimezone(dt.UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


class ListCommentsBuilder(QueryBuilder):
    """Configure and send a comment listing.

    The builder has two routes. Given a pull request number it lists that
    pull request's review comments (``pulls/{pr}/comments``); without one
    it lists every comment in the repository (``issues/comments``).
    """

    def __init__(self, handler: PullRequestHandler, pr: int | None = None) -> None:
        """Scope the listing to pull request ``pr``, or the whole repository."""
        super().__init__(handler)
        self._pr = pr

    @property
    def number(self) -> int | None:
        """Pull request the listing is scoped to, if any."""
        return self._pr

    def route(self) -> str:
        """Return the route this listing will request."""
        if self._pr is None:
            return self._handler.route("issues", "comments")
        return self._handler.route("pulls", self._pr, "comments")

    def sort(self, sort: CommentSort) -> typ.Self:
        """Sort by creation or update time."""
        return self._set_param("sort", sort.value)

    def direction(self, direction: Direction) -> typ.Self:
        """Choose ascending or descending order."""
        return self._set_param("direction", direction.value)

    def since(self, since: dt.datetime) -> typ.Self:
        """Only list comments updated at or after ``since``.

        Raises
        ------
        ValueError
            If ``since`` is naive.

        """
        return self._set_param("since", _format_since(since))

    async def send(self) -> Page[Comment]:
        """Fetch one page of comments."""
        self._consume()
        request = self._handler.build_request("GET", self.route(), params=self._params)
        return await self._handler.client.send_page(request, Comment)

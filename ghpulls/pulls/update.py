"""Builder for a partial update of a pull request."""

from __future__ import annotations

import typing as typ

from ghpulls.github.models import PullRequest
from ghpulls.github.params import State

from ._builder import RequestBuilder

if typ.TYPE_CHECKING:
    from .handler import PullRequestHandler


class UpdatePullRequestBuilder(RequestBuilder):
    """Configure and send ``PATCH repos/{owner}/{repo}/pulls/{pr}``.

    Only fields whose setter was called are transmitted, so fields left
    alone keep whatever value GitHub already holds.
    """

    def __init__(self, handler: PullRequestHandler, pr: int) -> None:
        """Target pull request ``pr``."""
        super().__init__(handler)
        self._pr = pr
        self._fields: dict[str, str | bool] = {}

    @property
    def number(self) -> int:
        """Pull request being updated."""
        return self._pr

    def _set(self, key: str, value: str | bool) -> typ.Self:  # noqa: FBT001
        self._check_unsent()
        self._fields[key] = value
        return self

    def title(self, title: str) -> typ.Self:
        """Replace the title."""
        return self._set("title", title)

    def body(self, body: str) -> typ.Self:
        """Replace the description."""
        return self._set("body", body)

    def base(self, base: str) -> typ.Self:
        """Retarget the pull request at another base branch."""
        return self._set("base", base)

    def state(self, state: State) -> typ.Self:
        """Open or close the pull request.

        Raises
        ------
        ValueError
            If ``state`` is :attr:`State.ALL`, which is only a list filter.

        """
        if state is State.ALL:
            msg = "State.ALL is a listing filter and cannot be set on a pull request"
            raise ValueError(msg)
        return self._set("state", state.value)

    def maintainer_can_modify(self, allowed: bool) -> typ.Self:  # noqa: FBT001
        """Allow or forbid upstream maintainers pushing to the head branch."""
        return self._set("maintainer_can_modify", allowed)

    def payload(self) -> dict[str, str | bool]:
        """Return the JSON body ``send()`` will patch with."""
        return dict(self._fields)

    async def send(self) -> PullRequest:
        """Apply the update and return the updated pull request."""
        self._consume()
        handler = self._handler
        request = handler.build_request(
            "PATCH", handler.route("pulls", self._pr), body=self.payload()
        )
        return await handler.client.send_json(request, PullRequest)

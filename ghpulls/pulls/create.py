"""Builder for opening a pull request."""

from __future__ import annotations

import typing as typ

from ghpulls.github.models import PullRequest

from ._builder import RequestBuilder

if typ.TYPE_CHECKING:
    from .handler import PullRequestHandler


class CreatePullRequestBuilder(RequestBuilder):
    """Configure and send ``POST repos/{owner}/{repo}/pulls``.

    ``title``, ``head`` and ``base`` are always sent. The optional fields are
    sent only once a setter has been called for them.
    """

    def __init__(
        self,
        handler: PullRequestHandler,
        title: str,
        head: str,
        base: str,
    ) -> None:
        """Record the required fields of the new pull request."""
        super().__init__(handler)
        self._title = title
        self._head = head
        self._base = base
        self._optional: dict[str, str | bool | int] = {}

    def _set(self, key: str, value: str | bool | int) -> typ.Self:  # noqa: FBT001
        self._check_unsent()
        self._optional[key] = value
        return self

    def body(self, body: str) -> typ.Self:
        """Set the description of the pull request."""
        return self._set("body", body)

    def draft(self, draft: bool) -> typ.Self:  # noqa: FBT001
        """Open the pull request as a draft."""
        return self._set("draft", draft)

    def maintainer_can_modify(self, allowed: bool) -> typ.Self:  # noqa: FBT001
        """Allow upstream maintainers to push to the head branch."""
        return self._set("maintainer_can_modify", allowed)

    def issue(self, issue: int) -> typ.Self:
        """Convert an existing issue into this pull request."""
        return self._set("issue", issue)

    def payload(self) -> dict[str, str | bool | int]:
        """Return the JSON body ``send()`` will post."""
        return {
            "title": self._title,
            "head": self._head,
            "base": self._base,
            **self._optional,
        }

    async def send(self) -> PullRequest:
        """Create the pull request and return it as GitHub stored it."""
        self._consume()
        handler = self._handler
        request = handler.build_request(
            "POST", handler.route("pulls"), body=self.payload()
        )
        return await handler.client.send_json(request, PullRequest)

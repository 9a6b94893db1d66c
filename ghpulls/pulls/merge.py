"""Builder for merging a pull request."""

from __future__ import annotations

import typing as typ

from ghpulls.github.models import MergeResult

from ._builder import RequestBuilder

if typ.TYPE_CHECKING:
    from ghpulls.github.params import MergeMethod

    from .handler import PullRequestHandler

# 405: not mergeable; 409: head moved away from the ``sha`` precondition.
MERGE_CONFLICT_STATUSES = frozenset({405, 409})


class MergePullRequestsBuilder(RequestBuilder):
    """Configure and send ``PUT repos/{owner}/{repo}/pulls/{pr}/merge``.

    With nothing configured the body is ``{}`` and GitHub chooses the
    commit title, message and merge method.
    """

    def __init__(self, handler: PullRequestHandler, pr: int) -> None:
        """Target pull request ``pr``."""
        super().__init__(handler)
        self._pr = pr
        self._fields: dict[str, str] = {}

    def _set(self, key: str, value: str) -> typ.Self:
        self._check_unsent()
        self._fields[key] = value
        return self

    def title(self, title: str) -> typ.Self:
        """Set the title of the merge commit."""
        return self._set("commit_title", title)

    def message(self, message: str) -> typ.Self:
        """Set the extra detail appended to the merge commit message."""
        return self._set("commit_message", message)

    def sha(self, sha: str) -> typ.Self:
        """Only merge while the head commit is still ``sha``.

        GitHub enforces the precondition; a moved head is reported as
        :class:`~ghpulls.github.errors.GitHubMergeConflictError`.
        """
        return self._set("sha", sha)

    def method(self, method: MergeMethod) -> typ.Self:
        """Merge, squash or rebase."""
        return self._set("merge_method", method.value)

    def payload(self) -> dict[str, str]:
        """Return the JSON body ``send()`` will put."""
        return dict(self._fields)

    async def send(self) -> MergeResult:
        """Merge the pull request.

        Raises
        ------
        GitHubMergeConflictError
            If GitHub refuses the merge as not mergeable or because the
            ``sha`` precondition failed.
        GitHubAPIError
            For any other failure status.

        """
        self._consume()
        handler = self._handler
        request = handler.build_request(
            "PUT", handler.route("pulls", self._pr, "merge"), body=self.payload()
        )
        return await handler.client.send_json(
            request, MergeResult, conflict_statuses=MERGE_CONFLICT_STATUSES
        )

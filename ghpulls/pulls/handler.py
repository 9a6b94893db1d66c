"""Resource handle for the pull requests of one repository."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ghpulls.common.slug import repo_slug, validate_segment
from ghpulls.github.media import MediaType, format_media_type
from ghpulls.github.models import Commit, FileDiff, PullRequest, Review

from ._builder import positive_int
from .comments import ListCommentsBuilder
from .create import CreatePullRequestBuilder
from .listing import ListPullRequestsBuilder
from .merge import MergePullRequestsBuilder
from .update import UpdatePullRequestBuilder

if typ.TYPE_CHECKING:
    import httpx

    from ghpulls.github.client import GitHubClient
    from ghpulls.github.page import Page

_HTTP_NO_CONTENT = 204
_HTTP_ACCEPTED = 202
_HTTP_NOT_FOUND = 404
_HTTP_UNPROCESSABLE = 422


def pull_number(pr: int) -> int:
    """Return ``pr`` when it is a usable pull request number.

    Raises
    ------
    ValueError
        If ``pr`` is not a positive integer.

    """
    return positive_int(pr, field="pull request number")


def _login_list(names: cabc.Iterable[str], *, field: str) -> list[str]:
    # str is iterable but is never a list of logins.
    if isinstance(names, str):
        msg = f"{field} must be a sequence of names, not a string"
        raise TypeError(msg)
    return list(names)


class PullRequestHandler:
    """Entry point to the pull request API of ``owner/repo``.

    Obtain one with :meth:`GitHubClient.pulls`. The handle holds no network
    state: every operation builds a fresh request, reading the configured
    media type at the moment the request is built.

    Examples
    --------
    >>> pulls = client.pulls("octo", "reef").media_type(MediaType.FULL)
    >>> pr = await pulls.get(42)
    >>> page = await pulls.list().state(State.OPEN).per_page(50).send()

    """

    def __init__(self, client: GitHubClient, owner: str, repo: str) -> None:
        """Bind the handle to a client and a repository.

        Raises
        ------
        ValueError
            If ``owner`` or ``repo`` is blank or contains ``/``.

        """
        self._client = client
        self._owner = validate_segment(owner, field="owner")
        self._repo = validate_segment(repo, field="repo")
        self._media_type: MediaType | None = None

    def __repr__(self) -> str:
        """Return a debugging representation naming the repository."""
        return (
            f"PullRequestHandler({repo_slug(self._owner, self._repo)!r}, "
            f"media_type={self._media_type!r})"
        )

    @property
    def client(self) -> GitHubClient:
        """Client context requests are executed through."""
        return self._client

    @property
    def owner(self) -> str:
        """Repository owner."""
        return self._owner

    @property
    def repo(self) -> str:
        """Repository name."""
        return self._repo

    @property
    def configured_media_type(self) -> MediaType | None:
        """Media type sent with requests, or ``None`` for regular JSON."""
        return self._media_type

    def media_type(self, media_type: MediaType) -> typ.Self:
        """Request ``media_type`` on subsequently built requests."""
        self._media_type = media_type
        return self

    # ------------------------------------------------------------------
    # Request primitive
    # ------------------------------------------------------------------

    def route(self, *segments: str | int) -> str:
        """Return ``repos/{owner}/{repo}`` followed by ``segments``."""
        parts = ["repos", self._owner, self._repo, *(str(s) for s in segments)]
        return "/".join(parts)

    def build_request(  # noqa: PLR0913
        self,
        method: str,
        route: str,
        *,
        params: cabc.Mapping[str, str | int] | None = None,
        body: object | None = None,
        accept: str | None = None,
    ) -> httpx.Request:
        """Assemble a request for ``route`` using the handle's current state.

        An explicit ``accept`` wins over the configured media type; with
        neither, no ``Accept`` header is sent.
        """
        if accept is None and self._media_type is not None:
            accept = format_media_type(self._media_type)
        return self._client.build_request(
            method, route, params=params, body=body, accept=accept
        )

    # ------------------------------------------------------------------
    # Direct operations
    # ------------------------------------------------------------------

    async def is_merged(self, pr: int) -> bool:
        """Return whether pull request ``pr`` has been merged.

        GitHub answers 204 when merged and 404 when not; any other status
        raises :class:`~ghpulls.github.errors.GitHubAPIError`.
        """
        route = self.route("pulls", pull_number(pr), "merge")
        request = self.build_request("GET", route)
        return await self._client.send_status_flag(
            request,
            true_status=_HTTP_NO_CONTENT,
            false_statuses=(_HTTP_NOT_FOUND,),
        )

    async def update_branch(
        self, pr: int, *, expected_head_sha: str | None = None
    ) -> bool:
        """Merge the base branch into the head branch of ``pr``.

        Returns True when GitHub accepted the update (202) and False when it
        declined it as not applicable (422, e.g. nothing to update or
        ``expected_head_sha`` no longer matches).
        """
        route = self.route("pulls", pull_number(pr), "update-branch")
        body = None
        if expected_head_sha is not None:
            body = {"expected_head_sha": expected_head_sha}
        request = self.build_request("PUT", route, body=body)
        return await self._client.send_status_flag(
            request,
            true_status=_HTTP_ACCEPTED,
            false_statuses=(_HTTP_UNPROCESSABLE,),
        )

    async def get(self, pr: int) -> PullRequest:
        """Fetch pull request ``pr``."""
        request = self.build_request("GET", self.route("pulls", pull_number(pr)))
        return await self._client.send_json(request, PullRequest)

    async def get_diff(self, pr: int) -> str:
        """Fetch pull request ``pr`` as a unified diff."""
        return await self._get_text(pr, MediaType.DIFF)

    async def get_patch(self, pr: int) -> str:
        """Fetch pull request ``pr`` as a series of format-patch commits."""
        return await self._get_text(pr, MediaType.PATCH)

    async def _get_text(self, pr: int, media_type: MediaType) -> str:
        request = self.build_request(
            "GET",
            self.route("pulls", pull_number(pr)),
            accept=format_media_type(media_type),
        )
        return await self._client.send_text(request)

    async def list_reviews(self, pr: int) -> Page[Review]:
        """List the reviews on pull request ``pr``."""
        route = self.route("pulls", pull_number(pr), "reviews")
        return await self._client.send_page(self.build_request("GET", route), Review)

    async def list_files(self, pr: int) -> Page[FileDiff]:
        """List the files changed by pull request ``pr``."""
        route = self.route("pulls", pull_number(pr), "files")
        return await self._client.send_page(
            self.build_request("GET", route), FileDiff
        )

    async def list_commits(self, pr: int) -> Page[Commit]:
        """List the commits on pull request ``pr``."""
        route = self.route("pulls", pull_number(pr), "commits")
        return await self._client.send_page(self.build_request("GET", route), Commit)

    async def request_reviews(
        self,
        pr: int,
        reviewers: cabc.Iterable[str] = (),
        team_reviewers: cabc.Iterable[str] = (),
    ) -> PullRequest:
        """Request reviews on ``pr`` from users and teams.

        Both ``reviewers`` and ``team_reviewers`` are always sent, as empty
        arrays when nothing was given for them.
        """
        return await self._reviewer_request(
            "POST", pr, reviewers=reviewers, team_reviewers=team_reviewers
        )

    async def remove_requested_reviewers(
        self,
        pr: int,
        reviewers: cabc.Iterable[str] = (),
        team_reviewers: cabc.Iterable[str] = (),
    ) -> PullRequest:
        """Withdraw pending review requests on ``pr``."""
        return await self._reviewer_request(
            "DELETE", pr, reviewers=reviewers, team_reviewers=team_reviewers
        )

    async def _reviewer_request(
        self,
        method: str,
        pr: int,
        *,
        reviewers: cabc.Iterable[str],
        team_reviewers: cabc.Iterable[str],
    ) -> PullRequest:
        body = {
            "reviewers": _login_list(reviewers, field="reviewers"),
            "team_reviewers": _login_list(team_reviewers, field="team_reviewers"),
        }
        route = self.route("pulls", pull_number(pr), "requested_reviewers")
        request = self.build_request(method, route, body=body)
        return await self._client.send_json(request, PullRequest)

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def create(self, title: str, head: str, base: str) -> CreatePullRequestBuilder:
        """Start building a new pull request from ``head`` into ``base``.

        ``head`` may name a branch in another fork as ``owner:branch``; it is
        passed to GitHub verbatim.
        """
        return CreatePullRequestBuilder(self, title, head, base)

    def update(self, pr: int) -> UpdatePullRequestBuilder:
        """Start building a partial update of pull request ``pr``."""
        return UpdatePullRequestBuilder(self, pull_number(pr))

    def list(self) -> ListPullRequestsBuilder:
        """Start building a filtered listing of pull requests."""
        return ListPullRequestsBuilder(self)

    def merge(self, pr: int) -> MergePullRequestsBuilder:
        """Start building a merge of pull request ``pr``."""
        return MergePullRequestsBuilder(self, pull_number(pr))

    def list_comments(self, pr: int | None = None) -> ListCommentsBuilder:
        """Start building a comment listing.

        With ``pr`` the listing covers that pull request's review comments;
        without it, every comment in the repository.
        """
        return ListCommentsBuilder(self, None if pr is None else pull_number(pr))

"""Shared state for deferred, build-once request builders."""

from __future__ import annotations

import typing as typ

from ghpulls.github.errors import BuilderAlreadySentError

if typ.TYPE_CHECKING:
    from .handler import PullRequestHandler

MAX_PER_PAGE = 100


def positive_int(value: int, *, field: str) -> int:
    """Return ``value`` when it is an ``int`` of at least 1 (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"{field} must be a positive integer, got {value!r}"
        raise ValueError(msg)
    return value


class RequestBuilder:
    """Base for builders that accumulate optional fields until ``send()``.

    Setters only record values; nothing reaches the network until the
    subclass's ``send()`` runs, and a builder can be sent at most once.
    """

    def __init__(self, handler: PullRequestHandler) -> None:
        """Bind the builder to the handle that created it."""
        self._handler = handler
        self._sent = False

    @property
    def sent(self) -> bool:
        """Return True once ``send()`` has been called."""
        return self._sent

    def _check_unsent(self) -> None:
        if self._sent:
            raise BuilderAlreadySentError.for_builder(self)

    def _consume(self) -> None:
        self._check_unsent()
        self._sent = True


class QueryBuilder(RequestBuilder):
    """Builder whose optional fields become query parameters.

    Parameters keep the order in which they were first set; unset ones are
    omitted so an unconfigured builder sends no query string.
    """

    def __init__(self, handler: PullRequestHandler) -> None:
        """Start with an empty parameter set."""
        super().__init__(handler)
        self._params: dict[str, str | int] = {}

    def _set_param(self, key: str, value: str | int) -> typ.Self:
        self._check_unsent()
        self._params[key] = value
        return self

    @property
    def params(self) -> dict[str, str | int]:
        """Return a copy of the query parameters configured so far."""
        return dict(self._params)

    def per_page(self, per_page: int) -> typ.Self:
        """Set the number of results per page, from 1 to 100.

        Raises
        ------
        ValueError
            If ``per_page`` is not an integer between 1 and 100.

        """
        value = positive_int(per_page, field="per_page")
        if value > MAX_PER_PAGE:
            msg = f"per_page must be at most {MAX_PER_PAGE}, got {per_page!r}"
            raise ValueError(msg)
        return self._set_param("per_page", value)

    def page(self, page: int) -> typ.Self:
        """Set the 1-based page number to fetch.

        Raises
        ------
        ValueError
            If ``page`` is not a positive integer.

        """
        return self._set_param("page", positive_int(page, field="page"))

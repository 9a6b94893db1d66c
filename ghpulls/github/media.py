"""Content-negotiation variants for pull request endpoints."""

from __future__ import annotations

import enum

_MEDIA_TYPE_PREFIX = "application/vnd.github.v3"


class MediaType(enum.StrEnum):
    """Representation requested through the ``Accept`` header.

    Regular JSON has no member: a handler without a variant sends no
    ``Accept`` override at all.
    """

    RAW = "raw"
    TEXT = "text"
    HTML = "html"
    FULL = "full"
    DIFF = "diff"
    PATCH = "patch"


# Body-format variants still wrap the resource in JSON; diff and patch do not.
_JSON_WRAPPED = frozenset({MediaType.RAW, MediaType.TEXT, MediaType.HTML, MediaType.FULL})


def format_media_type(media_type: MediaType) -> str:
    """Return the ``Accept`` header value for ``media_type``.

    >>> format_media_type(MediaType.FULL)
    'application/vnd.github.v3.full+json'
    >>> format_media_type(MediaType.DIFF)
    'application/vnd.github.v3.diff'

    """
    suffix = "+json" if media_type in _JSON_WRAPPED else ""
    return f"{_MEDIA_TYPE_PREFIX}.{media_type.value}{suffix}"

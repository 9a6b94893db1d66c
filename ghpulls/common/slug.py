"""Repository slug and route segment helpers.

Slugs are GitHub identifiers in ``owner/name`` format. Each half becomes a
single path segment in REST routes, so neither may contain a ``/``.
"""

from __future__ import annotations

# Characters that would end the path or start an escape in a URL.
_RESERVED_CHARS = frozenset("/?#%")
_DOT_SEGMENTS = frozenset({".", ".."})


def _invalid_slug(slug: str) -> ValueError:
    return ValueError(f"Invalid repository slug: expected 'owner/name', got {slug!r}")


def validate_segment(value: str, *, field: str) -> str:
    """Return ``value`` when it is usable as a single route segment.

    Parameters
    ----------
    value:
        Owner or repository name.
    field:
        Name used in the error message.

    Raises
    ------
    ValueError
        If ``value`` is blank, is ``.`` or ``..``, or contains ``/``, ``?``,
        ``#`` or ``%``.

    Examples
    --------
    >>> validate_segment("reef", field="repo")
    'reef'

    """
    if not value or not value.strip():
        msg = f"{field} must be a non-empty string"
        raise ValueError(msg)
    if value in _DOT_SEGMENTS:
        msg = f"{field} must not be a dot segment: {value!r}"
        raise ValueError(msg)
    reserved = _RESERVED_CHARS.intersection(value)
    if reserved:
        msg = f"{field} must not contain {''.join(sorted(reserved))!r}: {value!r}"
        raise ValueError(msg)
    return value


def repo_slug(owner: str, name: str) -> str:
    """Build an ``owner/name`` slug.

    >>> repo_slug("octo", "reef")
    'octo/reef'

    """
    return f"{owner}/{name}"


def parse_repo_slug(slug: str) -> tuple[str, str]:
    """Split an ``owner/name`` slug into its two halves.

    Raises
    ------
    ValueError
        If the slug is not exactly two non-empty halves.

    Examples
    --------
    >>> parse_repo_slug("octo/reef")
    ('octo', 'reef')

    """
    if slug.count("/") != 1:
        raise _invalid_slug(slug)

    owner, name = slug.split("/")
    if not owner.strip() or not name.strip():
        raise _invalid_slug(slug)
    return owner, name

"""Navigation codec — maps query-string URLs to navigation state and back.

The reader's state space is flattened into three query parameters,
``edition``, ``article`` and ``view``, so deep links keep working under
static hosting. Decoding is forgiving: contradictory or garbage input falls
down a fixed precedence ladder and always yields a state. Encoding always
produces the minimal canonical parameter set.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from urllib.parse import parse_qs, unquote, urlencode, urlsplit

from periodical.models.navigation import (
    ArchiveState,
    ColumnState,
    CoverState,
    HomeState,
    IndexState,
    NavigationState,
)

EDITION = "edition"
ARTICLE = "article"
VIEW = "view"
VIEW_CONTENTS = "contents"
VIEW_ARCHIVE = "archive"

QueryInput = str | Mapping[str, str | Sequence[str] | None] | None

# Path-style links from the earlier router: /archive, /edition/<e>[/contents|/article/<c>].
_LEGACY_PATH = re.compile(
    r"(?:^|/)(?:"
    r"(?P<archive>archive)"
    r"|edition/(?P<edition>[^/]+)(?:/(?P<contents>contents)|/article/(?P<article>[^/]+))?"
    r")/?$"
)


def _first(value: str | Sequence[str] | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    if not isinstance(value, Sequence):
        return None
    for item in value:
        if isinstance(item, str) and item:
            return item
    return None


def parse_query(query: QueryInput) -> dict[str, str]:
    """Reduce a raw query string or mapping to one non-empty value per name."""
    if not query:
        return {}
    if isinstance(query, str):
        query = parse_qs(query.lstrip("?"), keep_blank_values=True)
    elif not isinstance(query, Mapping):
        return {}
    params: dict[str, str] = {}
    for name, value in query.items():
        first = _first(value)
        if first is not None:
            params[name] = first
    return params


def decode_legacy_path(path: str | None) -> NavigationState:
    """Decode a path-style link from the earlier router. Unmatched paths are home."""
    if not path:
        return HomeState()
    match = _LEGACY_PATH.search(path.split("?", 1)[0].split("#", 1)[0])
    if match is None:
        return HomeState()
    if match.group("archive"):
        return ArchiveState()
    edition = unquote(match.group("edition"))
    if match.group("article"):
        return ColumnState(edition_id=edition, column_id=unquote(match.group("article")))
    if match.group("contents"):
        return IndexState(edition_id=edition)
    return CoverState(edition_id=edition)


def decode(path: str | None, query: QueryInput) -> NavigationState:
    """Decode a URL path and query into a navigation state. Never raises.

    First match wins:

    1. ``article`` and ``edition`` present: column screen.
    2. ``view=contents`` and ``edition`` present: index screen.
    3. ``edition`` present: cover screen.
    4. ``view=archive``: archive screen.
    5. Otherwise home.

    ``path`` never changes the result, so ``decode(path, encode(s)) == s``
    for any path. Legacy path links go through ``decode_legacy_path``.
    """
    params = parse_query(query)
    edition = params.get(EDITION)
    article = params.get(ARTICLE)
    view = params.get(VIEW)

    if article and edition:
        return ColumnState(edition_id=edition, column_id=article)
    if view == VIEW_CONTENTS and edition:
        return IndexState(edition_id=edition)
    if edition:
        return CoverState(edition_id=edition)
    if view == VIEW_ARCHIVE:
        return ArchiveState()
    return HomeState()


def decode_url(url: str) -> NavigationState:
    """Decode a full or relative URL. Unparsable URLs decode to home.

    A URL without a query string is read as a legacy path link.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return HomeState()
    if not parts.query:
        return decode_legacy_path(parts.path)
    return decode(parts.path, parts.query)


def encode(state: NavigationState) -> str:
    """Encode a navigation state as its canonical query string (no leading ``?``)."""
    match state:
        case ColumnState(edition_id=edition, column_id=article):
            params = {EDITION: edition, ARTICLE: article}
        case IndexState(edition_id=edition):
            params = {EDITION: edition, VIEW: VIEW_CONTENTS}
        case CoverState(edition_id=edition):
            params = {EDITION: edition}
        case ArchiveState():
            params = {VIEW: VIEW_ARCHIVE}
        case _:
            params = {}
    return urlencode(params)


def to_url(state: NavigationState, base: str = "/") -> str:
    """Return ``base`` with the encoded state appended as its query string."""
    query = encode(state)
    return f"{base}?{query}" if query else base

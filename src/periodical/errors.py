"""Content loading errors surfaced by the registry and resolver."""

from __future__ import annotations


class ContentError(Exception):
    """Base class for failures reading declarative content."""

    def __init__(self, message: str, *, edition_id: str | None = None, column_id: str | None = None) -> None:
        super().__init__(message)
        self.edition_id = edition_id
        self.column_id = column_id


class NotFoundError(ContentError):
    """No backing data exists for the requested edition or column."""


class MalformedError(ContentError):
    """Backing data exists but does not validate into the expected shape."""

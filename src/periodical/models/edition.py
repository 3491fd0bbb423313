"""Edition and column models — one monthly issue and its authored sections."""

from __future__ import annotations

from pydantic import Field, field_validator

from periodical.models.base import ContentModel
from periodical.models.theme import ColumnTheme


class Author(ContentModel):
    name: str
    bio: str | None = None
    email: str | None = None
    avatar: str | None = None


class Column(ContentModel):
    """One authored section of an edition. The body lives in its own file."""

    id: str = Field(min_length=1)
    title: str
    author: Author
    order: int
    excerpt: str | None = None
    image: str | None = None
    theme: ColumnTheme | None = None


class Edition(ContentModel):
    """A published monthly issue, loaded from ``content/<id>/config.json``."""

    id: str = Field(min_length=1)
    title: str
    columns: tuple[Column, ...]
    year: int | None = None
    month: int | None = None
    subtitle: str | None = None
    theme_title_line1: str | None = None
    theme_title_line2: str | None = None
    cover_description: str | None = None
    cover_image: str | None = None
    cover_color: str | None = None
    editor_note: str | None = None

    @field_validator("columns")
    @classmethod
    def _sort_columns(cls, columns: tuple[Column, ...]) -> tuple[Column, ...]:
        # sorted() is stable, so equal orders keep declaration order.
        return tuple(sorted(columns, key=lambda column: column.order))

    def get_column(self, column_id: str) -> Column | None:
        """Return the column with ``column_id``.

        Content is hand-authored, so ids may collide; the first column in
        display order wins rather than raising.
        """
        return next((column for column in self.columns if column.id == column_id), None)

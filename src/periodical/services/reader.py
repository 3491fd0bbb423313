"""Reader service — turns a navigation state into the data a screen needs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from periodical.content.registry import format_edition_display
from periodical.errors import NotFoundError
from periodical.models.base import ContentModel
from periodical.models.edition import Column, Edition
from periodical.models.navigation import (
    ColumnState,
    CoverState,
    IndexState,
    NavigationState,
)
from periodical.models.theme import DisplayMode, ResolvedTheme
from periodical.navigation.codec import encode

if TYPE_CHECKING:
    from periodical.content.resolver import ConfigResolver
    from periodical.theme.cascade import ThemeCascade

logger = logging.getLogger(__name__)


class EditionSummary(ContentModel):
    """Card data for the home and archive listings."""

    id: str
    display_name: str
    title: str
    subtitle: str | None = None
    cover_color: str | None = None
    column_count: int

    @classmethod
    def from_edition(cls, edition: Edition) -> EditionSummary:
        return cls(
            id=edition.id,
            display_name=format_edition_display(edition.id),
            title=edition.title,
            subtitle=edition.subtitle,
            cover_color=edition.cover_color,
            column_count=len(edition.columns),
        )


class ScreenPayload(ContentModel):
    """Everything the presentation layer needs to draw one screen."""

    state: NavigationState
    query: str
    theme: ResolvedTheme
    editions: list[EditionSummary] | None = None
    edition: Edition | None = None
    column: Column | None = None
    body: str | None = None


async def list_summaries(resolver: ConfigResolver) -> list[EditionSummary]:
    """Summaries of every loadable edition, newest first."""
    return [EditionSummary.from_edition(edition) for edition in await resolver.load_editions()]


async def resolve_screen(
    state: NavigationState,
    resolver: ConfigResolver,
    cascade: ThemeCascade,
    mode: DisplayMode = DisplayMode.LIGHT,
) -> ScreenPayload:
    """Load the content and resolved theme for ``state``.

    Edition load failures propagate. A column id the edition does not declare
    raises ``NotFoundError``; a column whose body is missing gets empty text.
    """
    query = encode(state)
    match state:
        case ColumnState(edition_id=edition_id, column_id=column_id):
            edition = await resolver.load_edition(edition_id)
            column = edition.get_column(column_id)
            if column is None:
                raise NotFoundError(
                    f"Column {column_id} is not declared in edition {edition_id}",
                    edition_id=edition_id,
                    column_id=column_id,
                )
            edition_theme = await resolver.load_theme(edition_id)
            body = await resolver.load_column_body(edition_id, column_id)
            return ScreenPayload(
                state=state,
                query=query,
                theme=cascade.resolve(mode, edition_theme, column.theme),
                edition=edition,
                column=column,
                body=body,
            )
        case CoverState(edition_id=edition_id) | IndexState(edition_id=edition_id):
            edition = await resolver.load_edition(edition_id)
            edition_theme = await resolver.load_theme(edition_id)
            return ScreenPayload(
                state=state,
                query=query,
                theme=cascade.resolve(mode, edition_theme),
                edition=edition,
            )
        case _:
            editions = await list_summaries(resolver)
            logger.debug("Resolved %s screen with %d editions", state.screen, len(editions))
            return ScreenPayload(
                state=state,
                query=query,
                theme=cascade.resolve(mode),
                editions=editions,
            )

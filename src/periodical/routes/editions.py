"""Edition routes — listing, edition detail and column detail."""

from __future__ import annotations

from fastapi import APIRouter, Request

from periodical.models.navigation import ColumnState, CoverState
from periodical.models.theme import DisplayMode
from periodical.services.reader import EditionSummary, ScreenPayload, list_summaries, resolve_screen

router = APIRouter(prefix="/api/editions", tags=["editions"])


def _mode(request: Request, mode: DisplayMode | None) -> DisplayMode:
    return mode or request.app.state.session.mode.get()


@router.get("/", response_model=list[EditionSummary])
async def list_editions(request: Request) -> list[EditionSummary]:
    """List every loadable edition, newest first."""
    return await list_summaries(request.app.state.resolver)


@router.get("/{edition_id}", response_model=ScreenPayload)
async def edition_detail(
    request: Request,
    edition_id: str,
    mode: DisplayMode | None = None,
) -> ScreenPayload:
    """Return an edition with its edition-scope theme."""
    state = request.app.state
    return await resolve_screen(
        CoverState(edition_id=edition_id),
        state.resolver,
        state.cascade,
        _mode(request, mode),
    )


@router.get("/{edition_id}/columns/{column_id}", response_model=ScreenPayload)
async def column_detail(
    request: Request,
    edition_id: str,
    column_id: str,
    mode: DisplayMode | None = None,
) -> ScreenPayload:
    """Return a column, its body and its column-scope theme."""
    state = request.app.state
    return await resolve_screen(
        ColumnState(edition_id=edition_id, column_id=column_id),
        state.resolver,
        state.cascade,
        _mode(request, mode),
    )

"""Screen route — decode a reader URL and return everything its screen shows."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from periodical.models.theme import DisplayMode
from periodical.navigation.codec import decode, decode_legacy_path
from periodical.services.reader import ScreenPayload, resolve_screen

logger = logging.getLogger(__name__)

router = APIRouter(tags=["screen"])


@router.get("/api/screen", response_model=ScreenPayload)
async def screen(
    request: Request,
    path: str | None = None,
    mode: DisplayMode | None = None,
) -> ScreenPayload:
    """Resolve the screen addressed by ``edition``, ``article`` and ``view``.

    When ``path`` is given it is a legacy path-style link and is resolved
    instead of the query. Unrecognized query parameters are ignored.
    """
    app_state = request.app.state
    if path:
        nav_state = decode_legacy_path(path)
    else:
        nav_state = decode(None, request.url.query)
    logger.debug("Decoded %r (path=%r) to %s", request.url.query, path, nav_state)
    return await resolve_screen(
        nav_state,
        app_state.resolver,
        app_state.cascade,
        mode or app_state.session.mode.get(),
    )

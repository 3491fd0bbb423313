"""Session routes — display mode, pen friends and the current screen."""

from __future__ import annotations

from fastapi import APIRouter, Request

from periodical.models.base import ContentModel
from periodical.models.navigation import NavigationState
from periodical.models.theme import DisplayMode
from periodical.navigation.codec import decode_url, encode
from periodical.state import ReaderSession

router = APIRouter(prefix="/api/session", tags=["session"])


class SessionSnapshot(ContentModel):
    mode: DisplayMode
    pen_friends: list[str]
    navigation: NavigationState
    query: str

    @classmethod
    def from_session(cls, session: ReaderSession) -> SessionSnapshot:
        navigation = session.navigation.get()
        return cls(
            mode=session.mode.get(),
            pen_friends=list(session.pen_friends.get()),
            navigation=navigation,
            query=encode(navigation),
        )


class NavigateRequest(ContentModel):
    url: str


@router.get("", response_model=SessionSnapshot)
async def get_session(request: Request) -> SessionSnapshot:
    return SessionSnapshot.from_session(request.app.state.session)


@router.post("/mode", response_model=SessionSnapshot)
async def set_mode(request: Request, mode: DisplayMode | None = None) -> SessionSnapshot:
    """Set the display mode, or toggle it when no mode is given."""
    session: ReaderSession = request.app.state.session
    if mode is None:
        session.toggle_mode()
    else:
        session.mode.set(mode)
    return SessionSnapshot.from_session(session)


@router.post("/navigate", response_model=SessionSnapshot)
async def navigate(request: Request, body: NavigateRequest) -> SessionSnapshot:
    """Make the screen addressed by ``url`` current."""
    session: ReaderSession = request.app.state.session
    session.navigate(decode_url(body.url))
    return SessionSnapshot.from_session(session)


@router.put("/pen-friends/{author_name}", response_model=SessionSnapshot)
async def add_pen_friend(request: Request, author_name: str) -> SessionSnapshot:
    session: ReaderSession = request.app.state.session
    session.add_pen_friend(author_name)
    return SessionSnapshot.from_session(session)


@router.delete("/pen-friends/{author_name}", response_model=SessionSnapshot)
async def remove_pen_friend(request: Request, author_name: str) -> SessionSnapshot:
    session: ReaderSession = request.app.state.session
    session.remove_pen_friend(author_name)
    return SessionSnapshot.from_session(session)

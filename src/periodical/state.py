"""In-memory reader session — display mode, pen friends and current screen."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from periodical.models.navigation import HomeState, NavigationState
from periodical.models.theme import DisplayMode
from periodical.navigation.codec import decode, encode

if TYPE_CHECKING:
    from collections.abc import Callable

    from periodical.navigation.codec import QueryInput

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Store(Generic[T]):
    """A single value with get/set and change subscriptions."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Callable[[T], None]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Replace the value and notify listeners if it changed."""
        if value == self._value:
            return
        self._value = value
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("Store listener %r failed", listener)

    def update(self, fn: Callable[[T], T]) -> T:
        self.set(fn(self._value))
        return self._value

    def subscribe(self, listener: Callable[[T], None]) -> Callable[[], None]:
        """Register ``listener``; call the returned function to unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class ReaderSession:
    """Cross-screen state for the single active reader."""

    def __init__(self, mode: DisplayMode = DisplayMode.LIGHT) -> None:
        self.mode: Store[DisplayMode] = Store(mode)
        self.pen_friends: Store[tuple[str, ...]] = Store(())
        self.navigation: Store[NavigationState] = Store(HomeState())

    def toggle_mode(self) -> DisplayMode:
        return self.mode.update(
            lambda mode: DisplayMode.DARK if mode == DisplayMode.LIGHT else DisplayMode.LIGHT
        )

    def add_pen_friend(self, author_name: str) -> None:
        self.pen_friends.update(
            lambda names: names if author_name in names else (*names, author_name)
        )

    def remove_pen_friend(self, author_name: str) -> None:
        self.pen_friends.update(lambda names: tuple(name for name in names if name != author_name))

    def is_pen_friend(self, author_name: str) -> bool:
        return author_name in self.pen_friends.get()

    def navigate(self, state: NavigationState) -> str:
        """Move to ``state`` and return its canonical query string."""
        self.navigation.set(state)
        return encode(state)

    def open_url(self, path: str | None, query: QueryInput) -> NavigationState:
        """Decode an incoming URL and make it the current screen."""
        state = decode(path, query)
        self.navigation.set(state)
        return state

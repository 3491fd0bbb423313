"""Config resolver — loads, validates and memoizes edition content on demand."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from periodical.errors import ContentError, MalformedError, NotFoundError
from periodical.models.edition import Edition
from periodical.models.theme import EditionTheme

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from periodical.content.registry import ContentRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class _SingleFlight(Generic[T]):
    """Memoizes results per key and shares one in-flight load between callers.

    Failed loads are not cached; the next caller retries.
    """

    def __init__(self) -> None:
        self._results: dict[str, T] = {}
        self._inflight: dict[str, asyncio.Task[T]] = {}
        self._generation = 0

    async def get(self, key: str, load: Callable[[], Awaitable[T]]) -> T:
        if key in self._results:
            return self._results[key]
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._run(key, load, self._generation))
            self._inflight[key] = task
        # shield: a cancelled waiter must not cancel the read other waiters share.
        return await asyncio.shield(task)

    async def _run(self, key: str, load: Callable[[], Awaitable[T]], generation: int) -> T:
        try:
            result = await load()
            # A load started before clear() must not repopulate the cache.
            if generation == self._generation:
                self._results[key] = result
            return result
        finally:
            if generation == self._generation:
                self._inflight.pop(key, None)

    def clear(self) -> None:
        self._generation += 1
        self._results.clear()
        self._inflight.clear()


class ConfigResolver:
    """Resolves edition ids to validated ``Edition`` and ``EditionTheme`` values.

    Editions and themes are memoized for the process lifetime; content is
    static, so there is no eviction.
    """

    def __init__(self, registry: ContentRegistry) -> None:
        self._registry = registry
        self._editions: _SingleFlight[Edition] = _SingleFlight()
        self._themes: _SingleFlight[EditionTheme | None] = _SingleFlight()

    @property
    def registry(self) -> ContentRegistry:
        return self._registry

    async def load_edition(self, edition_id: str) -> Edition:
        """Return the edition, raising ``NotFoundError`` or ``MalformedError``."""
        return await self._editions.get(edition_id, lambda: self._read_edition(edition_id))

    async def load_theme(self, edition_id: str) -> EditionTheme | None:
        """Return the edition's theme, or None when it declares no ``theme.json``."""
        return await self._themes.get(edition_id, lambda: self._read_theme(edition_id))

    async def load_editions(self) -> list[Edition]:
        """Load every registered edition, newest first, skipping ones that fail."""
        editions: list[Edition] = []
        for edition_id in self._registry.list_editions():
            try:
                editions.append(await self.load_edition(edition_id))
            except ContentError:
                logger.exception("Failed to load config for edition %s", edition_id)
        return editions

    async def read_column_body(self, edition_id: str, column_id: str) -> str:
        """Return the column's text, raising ``NotFoundError`` when it has none.

        ``content`` is preferred over ``text`` when a file carries both.
        """
        edition = await self.load_edition(edition_id)
        if edition.get_column(column_id) is None:
            raise NotFoundError(
                f"Column {column_id} is not declared in edition {edition_id}",
                edition_id=edition_id,
                column_id=column_id,
            )
        data = await self._registry.source(edition_id).read_column(column_id)
        if data is None or ("content" not in data and "text" not in data):
            raise NotFoundError(
                f"No body for column {column_id} in edition {edition_id}",
                edition_id=edition_id,
                column_id=column_id,
            )
        body = data.get("content") or data.get("text") or ""
        if not isinstance(body, str):
            raise MalformedError(
                f"Body of column {column_id} in edition {edition_id} is not text",
                edition_id=edition_id,
                column_id=column_id,
            )
        return body

    async def load_column_body(self, edition_id: str, column_id: str) -> str:
        """Return the column's text, or an empty string if it cannot be read."""
        try:
            return await self.read_column_body(edition_id, column_id)
        except ContentError as exc:
            logger.warning("Failed to load column %s for edition %s: %s", column_id, edition_id, exc)
            return ""

    def clear(self) -> None:
        """Forget memoized editions and themes."""
        self._editions.clear()
        self._themes.clear()

    async def _read_edition(self, edition_id: str) -> Edition:
        data = await self._registry.source(edition_id).read_config()
        edition = self._validate(Edition, {**data, "id": edition_id}, edition_id, "config.json")
        logger.debug("Loaded edition %s with %d columns", edition_id, len(edition.columns))
        return edition

    async def _read_theme(self, edition_id: str) -> EditionTheme | None:
        data = await self._registry.source(edition_id).read_theme()
        if data is None:
            return None
        return self._validate(EditionTheme, data, edition_id, "theme.json")

    @staticmethod
    def _validate(
        model: type[M], data: dict[str, Any], edition_id: str, filename: str
    ) -> M:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise MalformedError(
                f"Invalid {filename} for edition {edition_id}: {exc.error_count()} errors",
                edition_id=edition_id,
            ) from exc

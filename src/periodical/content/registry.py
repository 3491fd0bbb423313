"""Content registry — the explicit set of editions known to this process."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING

from periodical.content.sources import DirectoryEditionSource, EditionSource
from periodical.errors import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)

EDITION_ID_PATTERN = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")


def is_edition_id(value: str) -> bool:
    """Return True when ``value`` is a canonical ``YYYY-MM`` edition id."""
    return EDITION_ID_PATTERN.match(value) is not None


def format_edition_display(edition_id: str) -> str:
    """Format ``2025-11`` as ``November 2025``; other values are returned unchanged."""
    if not is_edition_id(edition_id):
        return edition_id
    return datetime.strptime(edition_id, "%Y-%m").strftime("%B %Y")


def current_edition_id(now: datetime | None = None) -> str:
    """Return the edition id for the month containing ``now`` (default: today)."""
    now = now or datetime.now()
    return f"{now.year:04d}-{now.month:02d}"


class ContentRegistry:
    """Maps edition ids to the sources their files are read from.

    Populated once at startup; unknown ids fail with ``NotFoundError`` rather
    than depending on what happens to exist on disk at lookup time.
    """

    def __init__(self, sources: Mapping[str, EditionSource] | None = None) -> None:
        self._sources: Mapping[str, EditionSource] = MappingProxyType(dict(sources or {}))
        # Fixed-width zero-padded ids sort chronologically as plain strings.
        self._ordered = sorted(self._sources, reverse=True)

    @classmethod
    def discover(cls, content_dir: Path) -> ContentRegistry:
        """Build a registry from every ``YYYY-MM`` directory under ``content_dir``."""
        sources: dict[str, EditionSource] = {}
        if not content_dir.is_dir():
            logger.warning("Content directory %s does not exist — no editions registered", content_dir)
            return cls(sources)
        for entry in content_dir.iterdir():
            if not entry.is_dir():
                continue
            if not is_edition_id(entry.name):
                logger.debug("Skipping non-edition directory %s", entry)
                continue
            sources[entry.name] = DirectoryEditionSource(entry.name, entry)
        logger.info("Registered %d editions from %s", len(sources), content_dir)
        return cls(sources)

    def list_editions(self) -> list[str]:
        """Return all edition ids, newest first."""
        return list(self._ordered)

    def edition_exists(self, edition_id: str) -> bool:
        return edition_id in self._sources

    def latest_edition(self) -> str | None:
        return self._ordered[0] if self._ordered else None

    def source(self, edition_id: str) -> EditionSource:
        """Return the source for ``edition_id`` or raise ``NotFoundError``."""
        try:
            return self._sources[edition_id]
        except KeyError:
            raise NotFoundError(f"Unknown edition {edition_id}", edition_id=edition_id) from None

    def __len__(self) -> int:
        return len(self._sources)

"""Edition sources — where the declarative files of one edition are read from."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from periodical.errors import MalformedError, NotFoundError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@runtime_checkable
class EditionSource(Protocol):
    """Raw access to one edition's declarative files."""

    async def read_config(self) -> dict[str, Any]: ...

    async def read_theme(self) -> dict[str, Any] | None: ...

    async def read_column(self, column_id: str) -> dict[str, Any] | None: ...


def read_json_object(path: Path) -> dict[str, Any] | None:
    """Read a JSON object from ``path``; return None if the file does not exist."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedError(f"{path} must contain a JSON object")
    return data


class DirectoryEditionSource:
    """Reads ``config.json``, ``theme.json`` and ``columns/<id>.json`` from a directory."""

    def __init__(self, edition_id: str, path: Path) -> None:
        self.edition_id = edition_id
        self.path = path

    async def read_config(self) -> dict[str, Any]:
        data = await asyncio.to_thread(read_json_object, self.path / "config.json")
        if data is None:
            raise NotFoundError(
                f"No config.json for edition {self.edition_id}",
                edition_id=self.edition_id,
            )
        return data

    async def read_theme(self) -> dict[str, Any] | None:
        return await asyncio.to_thread(read_json_object, self.path / "theme.json")

    async def read_column(self, column_id: str) -> dict[str, Any] | None:
        # Column ids come from authored config; refuse anything that escapes columns/.
        if not column_id or "/" in column_id or "\\" in column_id or column_id.startswith("."):
            logger.warning("Rejected column id %r for edition %s", column_id, self.edition_id)
            return None
        return await asyncio.to_thread(read_json_object, self.path / "columns" / f"{column_id}.json")

    def __repr__(self) -> str:
        return f"DirectoryEditionSource({self.edition_id!r}, {str(self.path)!r})"

"""Navigation state — the in-memory form of an addressable reader screen."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from periodical.models.base import ContentModel


class _State(ContentModel):
    """Base for screen states; the ``screen`` literal tags the union."""


class HomeState(_State):
    screen: Literal["home"] = "home"


class ArchiveState(_State):
    screen: Literal["archive"] = "archive"


class CoverState(_State):
    screen: Literal["cover"] = "cover"
    edition_id: str = Field(min_length=1)


class IndexState(_State):
    screen: Literal["index"] = "index"
    edition_id: str = Field(min_length=1)


class ColumnState(_State):
    screen: Literal["column"] = "column"
    edition_id: str = Field(min_length=1)
    column_id: str = Field(min_length=1)


NavigationState = Annotated[
    HomeState | ArchiveState | CoverState | IndexState | ColumnState,
    Field(discriminator="screen"),
]

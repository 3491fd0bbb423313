"""Data models for editions, themes and navigation state."""

from periodical.models.edition import Author, Column, Edition
from periodical.models.navigation import (
    ArchiveState,
    ColumnState,
    CoverState,
    HomeState,
    IndexState,
    NavigationState,
)
from periodical.models.theme import (
    ColumnTheme,
    DisplayMode,
    EditionTheme,
    FontStyle,
    GlobalConfig,
    GlobalStyle,
    HeaderStyle,
    ModeVariant,
    ResolvedTheme,
    SiteContent,
)

__all__ = [
    "ArchiveState",
    "Author",
    "Column",
    "ColumnState",
    "ColumnTheme",
    "CoverState",
    "DisplayMode",
    "Edition",
    "EditionTheme",
    "FontStyle",
    "GlobalConfig",
    "GlobalStyle",
    "HeaderStyle",
    "HomeState",
    "IndexState",
    "ModeVariant",
    "NavigationState",
    "ResolvedTheme",
    "SiteContent",
]

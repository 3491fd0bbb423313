"""Shared fixtures: an on-disk content tree and the components built over it."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from periodical.content.registry import ContentRegistry
from periodical.content.resolver import ConfigResolver
from periodical.models.theme import GlobalStyle
from periodical.theme.cascade import ThemeCascade

GLOBAL_CONFIG = {"magazineName": "The Test Gazette", "tagline": "All the news that fits"}

GLOBAL_STYLES = {
    "colors": {
        "primary": "#111111",
        "secondary": "#333333",
        "background": "#FAFAFA",
        "text": "#222222",
        "border": "#DDDDDD",
    },
    "typography": {"titleSize": 30, "subtitleSize": 18, "bodySize": 15, "smallSize": 11},
    "spacing": {"xs": 2, "sm": 6, "md": 12, "lg": 20, "xl": 28},
}

NOVEMBER_CONFIG = {
    "year": 2025,
    "month": 11,
    "title": "Quiet Season",
    "subtitle": "Notes from the turning of the year",
    "coverColor": "#6B7A5A",
    "columns": [
        {
            "id": "a",
            "title": "Alpha",
            "author": {"name": "Mara Ellis", "email": "mara@example.com"},
            "order": 2,
            "theme": {
                "primaryColor": "#AA0000",
                "headerStyle": "minimal",
                "backgroundColor": {"light": "#FFF"},
            },
        },
        {"id": "b", "title": "Bravo", "author": {"name": "Jun Park"}, "order": 1},
        {"id": "c", "title": "Charlie", "author": {"name": "Sam Okafor"}, "order": 2},
    ],
}

NOVEMBER_THEME = {
    "colors": {"primary": "#222222", "secondary": "#ACB087", "accent": "#C9A66B"},
    "darkMode": {"primary": "#3E4733"},
    "font": {"title": "Lobster"},
}

OCTOBER_CONFIG = {
    "title": "Harvest",
    "columns": [{"id": "orchard", "title": "The Orchard", "author": {"name": "Mara Ellis"}, "order": 1}],
}


def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """A content tree with two editions; only November has a theme."""
    write_json(tmp_path / "global" / "config.json", GLOBAL_CONFIG)
    write_json(tmp_path / "global" / "styles.json", GLOBAL_STYLES)

    november = tmp_path / "content" / "2025-11"
    write_json(november / "config.json", NOVEMBER_CONFIG)
    write_json(november / "theme.json", NOVEMBER_THEME)
    write_json(november / "columns" / "a.json", {"content": "Alpha body", "text": "ignored"})
    write_json(november / "columns" / "b.json", {"text": "Bravo body"})

    october = tmp_path / "content" / "2025-10"
    write_json(october / "config.json", OCTOBER_CONFIG)
    write_json(october / "columns" / "orchard.json", {"content": "Apples, mostly."})
    return tmp_path


@pytest.fixture
def global_style() -> GlobalStyle:
    return GlobalStyle.model_validate(GLOBAL_STYLES)


@pytest.fixture
def registry(content_root: Path) -> ContentRegistry:
    return ContentRegistry.discover(content_root / "content")


@pytest.fixture
def resolver(registry: ContentRegistry) -> ConfigResolver:
    return ConfigResolver(registry)


@pytest.fixture
def cascade(global_style: GlobalStyle) -> ThemeCascade:
    return ThemeCascade(global_style)


@pytest.fixture
def write_file():
    """Return a helper that writes JSON to a path, creating parent directories."""
    return write_json

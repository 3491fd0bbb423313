"""Theme cascade — merges global, edition and column styling into one theme per mode.

Precedence, lowest to highest: built-in defaults, global style, edition
theme, column theme. For each token the highest layer that defines it wins.
Mode-specific colors are selected per layer before merging, so a layer that
only defines the other mode's variant does not take part for this mode.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, TypeVar

from periodical.models.theme import (
    DisplayMode,
    FontStyle,
    HeaderStyle,
    ModeVariant,
    ResolvedTheme,
    Spacing,
    Typography,
)

if TYPE_CHECKING:
    from periodical.models.theme import ColumnTheme, EditionTheme, GlobalStyle

E = TypeVar("E", bound=StrEnum)

DEFAULT_TOKENS: dict[str, Any] = {
    "primary_color": "#2C3E50",
    "secondary_color": "#3498DB",
    "text_color": "#FFFFFF",
    "accent_color": "#8B7355",
    "border_color": "#E0E0E0",
    "header_style": HeaderStyle.GRADIENT,
    "font_family": "'Roboto', sans-serif",
    "font_style": FontStyle.NORMAL,
    "header_font": "inherit",
    "title_font": "Satisfy",
    "category_label": "",
    "title_size": 32,
    "subtitle_size": 20,
    "body_size": 16,
    "small_size": 12,
    "spacing": Spacing(xs=4, sm=8, md=16, lg=24, xl=32),
}

DEFAULT_MODE_TOKENS: dict[DisplayMode, dict[str, str]] = {
    DisplayMode.LIGHT: {"background_color": "#FFFFFF", "content_text_color": "#212121"},
    DisplayMode.DARK: {"background_color": "#121212", "content_text_color": "#E0E0E0"},
}


def _defined(**tokens: Any) -> dict[str, Any]:
    return {name: value for name, value in tokens.items() if value is not None}


def _variant(value: ModeVariant | None, mode: DisplayMode) -> str | None:
    return value.for_mode(mode) if value is not None else None


def _coerce(enum_cls: type[E], value: object, default: E) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        return default


def global_tokens(style: GlobalStyle, mode: DisplayMode) -> dict[str, Any]:
    """Tokens defined by the global baseline. Its plain background is the light one."""
    colors = style.colors
    typography = style.typography
    return _defined(
        primary_color=colors.primary,
        secondary_color=colors.secondary,
        text_color=colors.text,
        border_color=colors.border,
        background_color=colors.background if mode == DisplayMode.LIGHT else None,
        title_size=typography.title_size,
        subtitle_size=typography.subtitle_size,
        body_size=typography.body_size,
        small_size=typography.small_size,
        spacing=style.spacing,
    )


def edition_tokens(theme: EditionTheme, mode: DisplayMode) -> dict[str, Any]:
    """Tokens defined by an edition's ``theme.json``.

    In dark mode ``darkMode`` colors replace the edition's own ``colors``.
    """
    colors = theme.colors
    dark = theme.dark_mode if mode == DisplayMode.DARK else None
    background = _variant(theme.background_color, mode)
    if background is None and mode == DisplayMode.LIGHT:
        background = colors.background
    typography = theme.typography
    return _defined(
        primary_color=(dark and dark.primary) or colors.primary,
        secondary_color=(dark and dark.secondary) or colors.secondary,
        text_color=(dark and dark.text) or colors.text,
        accent_color=colors.accent,
        background_color=background,
        content_text_color=_variant(theme.content_text_color, mode),
        header_style=theme.header_style,
        font_family=typography.font_family if typography else None,
        font_style=theme.font_style,
        header_font=theme.header_font,
        title_font=theme.font.title if theme.font else None,
        category_label=theme.category_label,
        title_size=typography.title_size if typography else None,
        body_size=typography.body_size if typography else None,
    )


def column_tokens(theme: ColumnTheme, mode: DisplayMode) -> dict[str, Any]:
    """Tokens defined by a column's ``theme`` block."""
    return _defined(
        primary_color=theme.primary_color,
        secondary_color=theme.secondary_color,
        text_color=theme.text_color,
        accent_color=theme.accent_color,
        background_color=_variant(theme.background_color, mode),
        content_text_color=_variant(theme.content_text_color, mode),
        header_style=theme.header_style,
        font_family=theme.font_family,
        font_style=theme.font_style,
        header_font=theme.header_font,
        category_label=theme.category_label,
    )


def resolve_theme(
    style: GlobalStyle,
    mode: DisplayMode,
    edition: EditionTheme | None = None,
    column: ColumnTheme | None = None,
) -> ResolvedTheme:
    """Resolve every theme token for ``mode`` from the given scope."""
    mode = DisplayMode(mode)
    tokens: dict[str, Any] = {**DEFAULT_TOKENS, **DEFAULT_MODE_TOKENS[mode]}
    tokens.update(global_tokens(style, mode))
    if edition is not None:
        tokens.update(edition_tokens(edition, mode))
    if column is not None:
        tokens.update(column_tokens(column, mode))

    return ResolvedTheme(
        mode=mode,
        primary_color=tokens["primary_color"],
        secondary_color=tokens["secondary_color"],
        text_color=tokens["text_color"],
        accent_color=tokens["accent_color"],
        border_color=tokens["border_color"],
        background_color=tokens["background_color"],
        content_text_color=tokens["content_text_color"],
        header_style=_coerce(HeaderStyle, tokens["header_style"], HeaderStyle.GRADIENT),
        font_family=tokens["font_family"],
        font_style=_coerce(FontStyle, tokens["font_style"], FontStyle.NORMAL),
        header_font=tokens["header_font"],
        title_font=tokens["title_font"],
        category_label=tokens["category_label"],
        typography=Typography(
            title_size=tokens["title_size"],
            subtitle_size=tokens["subtitle_size"],
            body_size=tokens["body_size"],
            small_size=tokens["small_size"],
        ),
        spacing=tokens["spacing"],
    )


class ThemeCascade:
    """Binds the cascade to the process-wide global style."""

    def __init__(self, style: GlobalStyle) -> None:
        self._style = style

    @property
    def style(self) -> GlobalStyle:
        return self._style

    def resolve(
        self,
        mode: DisplayMode,
        edition: EditionTheme | None = None,
        column: ColumnTheme | None = None,
    ) -> ResolvedTheme:
        return resolve_theme(self._style, mode, edition, column)

    def resolve_modes(
        self,
        edition: EditionTheme | None = None,
        column: ColumnTheme | None = None,
    ) -> dict[DisplayMode, ResolvedTheme]:
        """Resolve the scope once for each display mode."""
        return {mode: resolve_theme(self._style, mode, edition, column) for mode in DisplayMode}

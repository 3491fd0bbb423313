"""Theme and style models for every layer of the cascade, plus its output."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from periodical.models.base import ContentModel


class DisplayMode(StrEnum):
    LIGHT = "light"
    DARK = "dark"


class HeaderStyle(StrEnum):
    GRADIENT = "gradient"
    SOLID = "solid"
    MINIMAL = "minimal"
    ARTISTIC = "artistic"


class FontStyle(StrEnum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class ModeVariant(ContentModel):
    """A color given separately for light and dark display modes."""

    light: str | None = None
    dark: str | None = None

    def for_mode(self, mode: DisplayMode) -> str | None:
        return self.light if mode == DisplayMode.LIGHT else self.dark


class ColumnTheme(ContentModel):
    """Per-column overrides. Every field is optional and falls through when absent.

    ``header_style`` and ``font_style`` are kept as raw strings so an unknown
    value in a content file never prevents the edition from loading.
    """

    primary_color: str | None = None
    secondary_color: str | None = None
    text_color: str | None = None
    accent_color: str | None = None
    header_style: str | None = None
    font_family: str | None = None
    font_style: str | None = None
    header_font: str | None = None
    category_label: str | None = None
    background_color: ModeVariant | None = None
    content_text_color: ModeVariant | None = None


class ThemeColors(ContentModel):
    primary: str | None = None
    secondary: str | None = None
    background: str | None = None
    text: str | None = None
    accent: str | None = None


class DarkModeColors(ContentModel):
    primary: str | None = None
    secondary: str | None = None
    text: str | None = None


class ThemeFont(ContentModel):
    title: str | None = None


class ThemeTypography(ContentModel):
    title_size: int | None = None
    body_size: int | None = None
    font_family: str | None = None


class EditionTheme(ContentModel):
    """Per-edition overrides read from ``content/<id>/theme.json``."""

    colors: ThemeColors = Field(default_factory=ThemeColors)
    dark_mode: DarkModeColors | None = None
    font: ThemeFont | None = None
    typography: ThemeTypography | None = None
    header_style: str | None = None
    font_style: str | None = None
    header_font: str | None = None
    category_label: str | None = None
    background_color: ModeVariant | None = None
    content_text_color: ModeVariant | None = None


class GlobalColors(ContentModel):
    primary: str
    secondary: str
    background: str
    text: str
    border: str


class Typography(ContentModel):
    title_size: int
    subtitle_size: int
    body_size: int
    small_size: int


class Spacing(ContentModel):
    xs: int
    sm: int
    md: int
    lg: int
    xl: int


class GlobalStyle(ContentModel):
    """Process-wide style baseline read from ``global/styles.json``."""

    colors: GlobalColors
    typography: Typography
    spacing: Spacing


class GlobalConfig(ContentModel):
    """Magazine-wide metadata read from ``global/config.json``."""

    magazine_name: str
    tagline: str | None = None
    about: str | None = None


class SiteContent(ContentModel):
    """Global config and style, loaded once at startup and passed explicitly."""

    config: GlobalConfig
    style: GlobalStyle


class ResolvedTheme(ContentModel):
    """Output of the cascade: every token populated for a single display mode."""

    mode: DisplayMode
    primary_color: str
    secondary_color: str
    text_color: str
    accent_color: str
    border_color: str
    background_color: str
    content_text_color: str
    header_style: HeaderStyle
    font_family: str
    font_style: FontStyle
    header_font: str
    title_font: str
    category_label: str
    typography: Typography
    spacing: Spacing

"""Theme cascade engine."""

from periodical.theme.cascade import ThemeCascade, resolve_theme

__all__ = ["ThemeCascade", "resolve_theme"]

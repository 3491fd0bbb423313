"""Content registry, edition sources and the config resolver."""

from periodical.content.registry import ContentRegistry, current_edition_id, format_edition_display
from periodical.content.resolver import ConfigResolver
from periodical.content.site import load_site_content
from periodical.content.sources import DirectoryEditionSource, EditionSource

__all__ = [
    "ConfigResolver",
    "ContentRegistry",
    "DirectoryEditionSource",
    "EditionSource",
    "current_edition_id",
    "format_edition_display",
    "load_site_content",
]

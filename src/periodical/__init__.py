"""Monthly magazine reader — content registry, theme cascade and URL codec."""

__version__ = "0.1.0"

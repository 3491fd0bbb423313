"""Tests for the content registry."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from periodical.content.registry import (
    ContentRegistry,
    current_edition_id,
    format_edition_display,
    is_edition_id,
)
from periodical.content.sources import DirectoryEditionSource
from periodical.errors import NotFoundError


@pytest.mark.unit
class TestContentRegistry:
    """Test the Content Registry."""

    def test_lists_newest_first(self) -> None:
        """Verify editions are listed in descending chronological order."""
        registry = ContentRegistry({key: MagicMock() for key in ["2025-09", "2025-11", "2025-10"]})

        assert registry.list_editions() == ["2025-11", "2025-10", "2025-09"]

    def test_orders_across_years(self) -> None:
        """Verify December of one year sorts after January of the next."""
        registry = ContentRegistry({key: MagicMock() for key in ["2024-12", "2025-01"]})

        assert registry.list_editions() == ["2025-01", "2024-12"]
        assert registry.latest_edition() == "2025-01"

    def test_empty_registry(self) -> None:
        """Verify an empty registry lists nothing and has no latest edition."""
        registry = ContentRegistry()

        assert registry.list_editions() == []
        assert registry.latest_edition() is None
        assert len(registry) == 0

    def test_list_is_a_copy(self) -> None:
        """Verify callers cannot reorder the registry through the returned list."""
        registry = ContentRegistry({"2025-11": MagicMock(), "2025-10": MagicMock()})

        registry.list_editions().reverse()

        assert registry.list_editions() == ["2025-11", "2025-10"]

    def test_edition_exists(self) -> None:
        """Verify existence checks use the registered ids."""
        registry = ContentRegistry({"2025-11": MagicMock()})

        assert registry.edition_exists("2025-11") is True
        assert registry.edition_exists("2025-12") is False

    def test_source_unknown_edition_raises(self) -> None:
        """Verify unknown ids fail with NotFoundError."""
        registry = ContentRegistry({"2025-11": MagicMock()})

        with pytest.raises(NotFoundError) as exc_info:
            registry.source("1999-01")

        assert exc_info.value.edition_id == "1999-01"

    def test_discover_registers_edition_directories(self, content_root: Path) -> None:
        """Verify discover picks up every YYYY-MM directory."""
        registry = ContentRegistry.discover(content_root / "content")

        assert registry.list_editions() == ["2025-11", "2025-10"]
        source = registry.source("2025-11")
        assert isinstance(source, DirectoryEditionSource)
        assert source.path == content_root / "content" / "2025-11"

    def test_discover_skips_other_entries(self, tmp_path: Path) -> None:
        """Verify discover ignores files and directories that are not edition ids."""
        content_dir = tmp_path / "content"
        for name in ["2025-11", "2025-13", "drafts", "25-11"]:
            (content_dir / name).mkdir(parents=True)
        (content_dir / "2025-12").write_text("not a directory")

        registry = ContentRegistry.discover(content_dir)

        assert registry.list_editions() == ["2025-11"]

    def test_discover_missing_directory(self, tmp_path: Path) -> None:
        """Verify a missing content directory yields an empty registry."""
        registry = ContentRegistry.discover(tmp_path / "nope")

        assert registry.list_editions() == []


@pytest.mark.unit
class TestEditionIdHelpers:
    """Test the edition id helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("2025-11", True), ("2025-01", True), ("2025-00", False), ("2025-13", False), ("2025-1", False), ("", False)],
    )
    def test_is_edition_id(self, value: str, expected: bool) -> None:
        """Verify only canonical YYYY-MM ids are accepted."""
        assert is_edition_id(value) is expected

    def test_format_edition_display(self) -> None:
        """Verify ids are formatted as month and year."""
        assert format_edition_display("2025-11") == "November 2025"
        assert format_edition_display("2026-01") == "January 2026"

    def test_format_edition_display_passes_through_other_values(self) -> None:
        """Verify non-canonical ids are returned unchanged."""
        assert format_edition_display("special-issue") == "special-issue"

    def test_current_edition_id(self) -> None:
        """Verify the current edition id is zero-padded."""
        assert current_edition_id(datetime(2025, 3, 9)) == "2025-03"
        assert current_edition_id(datetime(2025, 12, 31)) == "2025-12"

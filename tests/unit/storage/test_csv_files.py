"""Unit tests for CSV storage helpers.

Tests cover:
- Quote-aware splitting and reading
- Atomic full rewrites
- Appending rows
- Storage failures
"""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

import pytest

from restaurant_guide.storage import (
    StorageError,
    append_row,
    read_rows,
    rewrite_rows,
    split_row,
)


if TYPE_CHECKING:
    from pathlib import Path


pytestmark = pytest.mark.unit

HEADER = ("userId", "restaurantName")


@pytest.fixture
def blocked_path(tmp_path: Path) -> Path:
    """A path whose parent is a regular file, so it can never be written."""
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("x", encoding="utf-8")
    return blocker / "sub" / "file.csv"


@pytest.fixture
def umask_022():
    """Run with a 022 umask, restoring the previous one afterwards."""
    previous = os.umask(0o022)
    yield
    os.umask(previous)


class TestSplitRow:
    """Tests for split_row."""

    def test_plain_fields(self):
        """Should split on commas."""
        assert split_row("a,b,c") == ["a", "b", "c"]

    def test_quoted_comma_is_literal(self):
        """Should keep commas inside quotes and drop the quotes."""
        assert split_row('Osteria,"Via Stella, 22",Modena') == [
            "Osteria",
            "Via Stella, 22",
            "Modena",
        ]

    def test_empty_fields(self):
        """Should keep empty fields."""
        assert split_row("a,,c,") == ["a", "", "c", ""]


class TestReadRows:
    """Tests for read_rows."""

    def test_missing_file_is_empty(self, tmp_path: Path):
        """Should return no rows for a missing file."""
        assert read_rows(tmp_path / "missing.csv") == []

    def test_skips_header_and_blank_lines(self, tmp_path: Path):
        """Should drop the header and blank lines."""
        path = tmp_path / "data.csv"
        path.write_text("userId,restaurantName\nu1,A\n\n,\nu2,\"B, C\"\n", encoding="utf-8")

        assert read_rows(path) == [["u1", "A"], ["u2", "B, C"]]

    def test_tolerates_bom(self, tmp_path: Path):
        """Should not leak a byte order mark into the first field."""
        path = tmp_path / "data.csv"
        path.write_text("\ufeffuserId,restaurantName\nu1,A\n", encoding="utf-8")

        assert read_rows(path) == [["u1", "A"]]


class TestRewriteRows:
    """Tests for rewrite_rows."""

    def test_writes_header_and_rows(self, tmp_path: Path):
        """Should write the header followed by every row."""
        path = tmp_path / "favorites.csv"

        rewrite_rows(path, HEADER, [("u1", "A"), ("u2", "B, C")])

        assert path.read_text(encoding="utf-8") == (
            'userId,restaurantName\nu1,A\nu2,"B, C"\n'
        )
        assert read_rows(path) == [["u1", "A"], ["u2", "B, C"]]

    def test_replaces_previous_content(self, tmp_path: Path):
        """Should replace, not extend, the file."""
        path = tmp_path / "favorites.csv"
        rewrite_rows(path, HEADER, [("u1", "A"), ("u1", "B")])

        rewrite_rows(path, HEADER, [("u1", "B")])

        assert read_rows(path) == [["u1", "B"]]

    def test_leaves_no_temporary_files(self, tmp_path: Path):
        """Should leave only the target file in the directory."""
        path = tmp_path / "favorites.csv"

        rewrite_rows(path, HEADER, [("u1", "A")])
        rewrite_rows(path, HEADER, [("u1", "B")])

        assert [p.name for p in tmp_path.iterdir()] == ["favorites.csv"]

    def test_keeps_existing_file_mode(self, tmp_path: Path):
        """Should keep the permission bits of the file it replaces."""
        path = tmp_path / "favorites.csv"
        path.write_text("userId,restaurantName\n", encoding="utf-8")
        path.chmod(0o644)

        rewrite_rows(path, HEADER, [("u1", "A")])

        assert stat.S_IMODE(path.stat().st_mode) == 0o644
        assert read_rows(path) == [["u1", "A"]]

    @pytest.mark.usefixtures("umask_022")
    def test_new_file_follows_umask(self, tmp_path: Path):
        """Should create a new file with the mode the umask allows."""
        path = tmp_path / "favorites.csv"

        rewrite_rows(path, HEADER, [("u1", "A")])

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_creates_missing_directory(self, tmp_path: Path):
        """Should create the data directory on first write."""
        path = tmp_path / "nested" / "favorites.csv"

        rewrite_rows(path, HEADER, [])

        assert read_rows(path) == []
        assert path.exists()

    def test_unwritable_location_raises(self, blocked_path: Path):
        """Should raise StorageError naming the file."""
        with pytest.raises(StorageError) as exc_info:
            rewrite_rows(blocked_path, HEADER, [("u1", "A")])

        assert exc_info.value.path == blocked_path


class TestAppendRow:
    """Tests for append_row."""

    def test_new_file_gets_header(self, tmp_path: Path):
        """Should write the header before the first row."""
        path = tmp_path / "catalog.csv"

        append_row(path, HEADER, ("u1", "A"))
        append_row(path, HEADER, ("u2", "B"))

        assert path.read_text(encoding="utf-8") == "userId,restaurantName\nu1,A\nu2,B\n"

    def test_missing_trailing_newline(self, tmp_path: Path):
        """Should start the new row on its own line."""
        path = tmp_path / "catalog.csv"
        path.write_text("userId,restaurantName\nu1,A", encoding="utf-8")

        append_row(path, HEADER, ("u2", "B"))

        assert read_rows(path) == [["u1", "A"], ["u2", "B"]]

    def test_unwritable_location_raises(self, blocked_path: Path):
        """Should raise StorageError."""
        with pytest.raises(StorageError):
            append_row(blocked_path, HEADER, ("u1", "A"))

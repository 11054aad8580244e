"""Unit tests for the favorites registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from restaurant_guide.services.favorites import FavoritesRegistry
from restaurant_guide.storage import StorageError


if TYPE_CHECKING:
    from pathlib import Path

    from restaurant_guide.services import GuideServices


pytestmark = pytest.mark.unit


@pytest.fixture
def favorites(services: GuideServices) -> FavoritesRegistry:
    return services.favorites


class TestFavorites:
    """Tests for FavoritesRegistry."""

    def test_add_and_check(self, favorites: FavoritesRegistry):
        """Should remember a favorite per user."""
        favorites.add("mrossi", "Bistrot Bib")

        assert favorites.is_favorite("mrossi", "Bistrot Bib") is True
        assert favorites.is_favorite("lbianchi", "Bistrot Bib") is False

    def test_toggle_flips_state(self, favorites: FavoritesRegistry):
        """Should return the new state after each toggle."""
        assert favorites.toggle("mrossi", "Bistrot Bib") is True
        assert favorites.is_favorite("mrossi", "Bistrot Bib") is True

        assert favorites.toggle("mrossi", "Bistrot Bib") is False
        assert favorites.is_favorite("mrossi", "Bistrot Bib") is False

    def test_favorites_skip_unknown_names(self, favorites: FavoritesRegistry):
        """Should only list favorites still in the catalog."""
        favorites.add("mrossi", "Vecchia Osteria")
        favorites.add("mrossi", "Gone Forever")
        favorites.add("mrossi", "Trattoria Verde")

        names = [r.name for r in favorites.favorites_of("mrossi")]

        assert names == ["Trattoria Verde", "Vecchia Osteria"]

    def test_unknown_user_has_no_favorites(self, favorites: FavoritesRegistry):
        """Should return an empty list."""
        assert favorites.favorites_of("nobody") == []

    def test_survives_reload(self, services: GuideServices, data_dir: Path):
        """Should be read back from preferiti.csv."""
        services.favorites.add("mrossi", "Bistrot Bib")
        path = data_dir / "preferiti.csv"

        reloaded = FavoritesRegistry(path, services.catalog)
        reloaded.load()

        assert path.read_text(encoding="utf-8").startswith("userId,restaurantName\n")
        assert reloaded.is_favorite("mrossi", "Bistrot Bib")

    def test_storage_failure_keeps_memory_change(
        self, services: GuideServices, tmp_path: Path
    ):
        """Should raise StorageError after updating the in-memory state."""
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        registry = FavoritesRegistry(blocker / "preferiti.csv", services.catalog)

        with pytest.raises(StorageError):
            registry.add("mrossi", "Bistrot Bib")

        assert registry.is_favorite("mrossi", "Bistrot Bib")

"""Favorites registry module."""

from restaurant_guide.services.favorites.service import FavoritesRegistry


__all__ = ["FavoritesRegistry"]

"""Favorites registry: the restaurants each user has starred."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from restaurant_guide.services.associations import AssociationRegistry


if TYPE_CHECKING:
    from restaurant_guide.schemas.restaurant import Restaurant


class FavoritesRegistry(AssociationRegistry):
    """User identity -> names of their favorite restaurants."""

    header: ClassVar[tuple[str, str]] = ("userId", "restaurantName")
    kind: ClassVar[str] = "favorites"

    def is_favorite(self, user_id: str, restaurant_name: str) -> bool:
        return self.contains(user_id, restaurant_name)

    def favorites_of(self, user_id: str) -> list[Restaurant]:
        return self.restaurants_of(user_id)

    def toggle(self, user_id: str, restaurant_name: str) -> bool:
        """Flip the favorite state and return the new one."""
        with self._lock:
            if self.is_favorite(user_id, restaurant_name):
                self.remove(user_id, restaurant_name)
                return False
            self.add(user_id, restaurant_name)
            return True

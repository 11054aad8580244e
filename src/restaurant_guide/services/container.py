"""Explicitly constructed set of guide services.

One ``GuideServices`` instance owns the catalog, both registries and the
review ledger. They share a single re-entrant lock so only one mutation
touches the files at a time. Tests build isolated instances on a temporary
directory; the application builds one at startup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import RLock
from typing import TYPE_CHECKING

from restaurant_guide.observability.logging import get_logger
from restaurant_guide.services.catalog import RestaurantCatalog
from restaurant_guide.services.favorites import FavoritesRegistry
from restaurant_guide.services.ownership import OwnershipRegistry
from restaurant_guide.services.reviews import ReviewLedger


if TYPE_CHECKING:
    from restaurant_guide.core.config import StorageSettings
    from restaurant_guide.schemas.restaurant import Restaurant

logger = get_logger(__name__)


@dataclass
class GuideServices:
    """The four stores of the guide, wired together."""

    catalog: RestaurantCatalog
    ownership: OwnershipRegistry
    favorites: FavoritesRegistry
    reviews: ReviewLedger
    lock: RLock = field(default_factory=RLock)

    @classmethod
    def from_storage(cls, storage: StorageSettings) -> GuideServices:
        """Build the stores on the configured files and load them."""
        lock = RLock()
        catalog = RestaurantCatalog(storage.catalog_path, lock=lock)
        ownership = OwnershipRegistry(storage.ownership_path, catalog, lock=lock)
        favorites = FavoritesRegistry(storage.favorites_path, catalog, lock=lock)
        reviews = ReviewLedger(storage.reviews_path, ownership, lock=lock)

        services = cls(
            catalog=catalog,
            ownership=ownership,
            favorites=favorites,
            reviews=reviews,
            lock=lock,
        )
        services.load()
        return services

    def load(self) -> None:
        """(Re)load every store from its file."""
        with self.lock:
            self.catalog.load_all()
            self.ownership.load()
            self.favorites.load()
            self.reviews.load()
        logger.info("Guide data loaded", data_dir=str(self.catalog.path.parent))

    def register_restaurant(self, restaurant: Restaurant, owner_id: str) -> Restaurant:
        """List a new restaurant and make ``owner_id`` its owner.

        Raises:
            DuplicateRestaurantError: If the name is already listed.
            StorageError: If either file could not be written.
        """
        with self.lock:
            if restaurant.owner != owner_id:
                restaurant = restaurant.model_copy(update={"owner": owner_id})
            self.catalog.append(restaurant)
            self.ownership.add(owner_id, restaurant.name)
        return restaurant

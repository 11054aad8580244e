"""Restaurant catalog.

Holds every known restaurant in memory. The list is loaded once from the
guide snapshot and grows when owners register new restaurants; new rows
are appended to the snapshot, existing rows are never rewritten.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING

from restaurant_guide.observability.logging import get_logger
from restaurant_guide.schemas.restaurant import (
    CatalogFacets,
    CatalogStatistics,
    Restaurant,
    RestaurantFilter,
)
from restaurant_guide.services.catalog.constants import CATALOG_HEADER
from restaurant_guide.services.catalog.exceptions import DuplicateRestaurantError
from restaurant_guide.services.catalog.rows import (
    restaurant_from_row,
    restaurant_to_row,
)
from restaurant_guide.storage import append_row, read_rows


if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = get_logger(__name__)


class RestaurantCatalog:
    """In-memory restaurant list backed by an append-only CSV file.

    Names are matched exactly by ``find_by_name`` and case-insensitively by
    ``exists_by_name``, which guards against duplicate registrations.
    """

    def __init__(self, path: Path, lock: RLock | None = None) -> None:
        """Initialize the catalog.

        Args:
            path: Location of the catalog CSV file.
            lock: Lock shared with the other stores to serialise writes.
        """
        self._path = path
        self._lock = lock or RLock()
        self._restaurants: list[Restaurant] = []

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[Restaurant]:
        """Parse the whole catalog file, replacing the in-memory list.

        Rows with fewer than 14 fields, or with values that cannot be
        parsed, are skipped and logged.

        Returns:
            A copy of the loaded restaurants.
        """
        with self._lock:
            loaded: list[Restaurant] = []
            skipped = 0
            for line_number, row in enumerate(read_rows(self._path), start=2):
                restaurant = restaurant_from_row(row)
                if restaurant is None:
                    skipped += 1
                    logger.warning(
                        "Skipping malformed catalog row",
                        line=line_number,
                        fields=len(row),
                    )
                    continue
                loaded.append(restaurant)

            self._restaurants = loaded
            logger.info(
                "Catalog loaded",
                path=str(self._path),
                restaurants=len(loaded),
                skipped=skipped,
            )
            return list(loaded)

    def append(self, restaurant: Restaurant) -> Restaurant:
        """Add a restaurant and record it in the catalog file.

        Raises:
            DuplicateRestaurantError: If the name is already listed.
            StorageError: If the row could not be written; the restaurant
                stays in memory.
        """
        with self._lock:
            if self.exists_by_name(restaurant.name):
                msg = f"Restaurant '{restaurant.name}' already exists"
                raise DuplicateRestaurantError(msg, restaurant_name=restaurant.name)

            self._restaurants.append(restaurant)
            append_row(self._path, CATALOG_HEADER, restaurant_to_row(restaurant))
            logger.info("Restaurant added", name=restaurant.name, owner=restaurant.owner)
            return restaurant

    def exists_by_name(self, name: str | None) -> bool:
        """Case-insensitive check, ignoring surrounding whitespace."""
        if name is None or not name.strip():
            return False
        wanted = name.strip().casefold()
        with self._lock:
            return any(r.name.casefold() == wanted for r in self._restaurants)

    def find_by_name(self, name: str) -> Restaurant | None:
        """Return the first restaurant named exactly ``name``."""
        with self._lock:
            return next((r for r in self._restaurants if r.name == name), None)

    def all(self) -> list[Restaurant]:
        with self._lock:
            return list(self._restaurants)

    def search(self, criteria: RestaurantFilter) -> list[Restaurant]:
        """Restaurants matching every active criterion, in catalog order."""
        return [r for r in self.all() if criteria.matches(r)]

    @staticmethod
    def statistics(restaurants: Iterable[Restaurant]) -> CatalogStatistics:
        """Count restaurants, Michelin-starred ones and green-starred ones."""
        total = michelin = green = 0
        for restaurant in restaurants:
            total += 1
            michelin += restaurant.has_michelin_star
            green += restaurant.has_green_star
        return CatalogStatistics(
            total=total, michelin_starred=michelin, green_starred=green
        )

    def facets(self) -> CatalogFacets:
        """Sorted distinct cuisines, locations and price tiers."""
        restaurants = self.all()

        def distinct(values: Iterable[str]) -> list[str]:
            return sorted({v for v in values if v.strip()})

        return CatalogFacets(
            cuisines=distinct(r.cuisine for r in restaurants),
            locations=distinct(r.location for r in restaurants),
            prices=distinct(r.price for r in restaurants),
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._restaurants)

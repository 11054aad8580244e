"""Set-valued association between an identity and restaurant names.

Ownership and favorites share this shape: each identity maps to the set of
restaurant names it is associated with, stored as one ``key,name`` row per
pair. Every mutation rewrites the whole file.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING, ClassVar

from restaurant_guide.observability.logging import get_logger
from restaurant_guide.storage import read_rows, rewrite_rows


if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from restaurant_guide.schemas.restaurant import Restaurant
    from restaurant_guide.services.catalog import RestaurantCatalog

logger = get_logger(__name__)


class AssociationRegistry:
    """Identity -> restaurant names, persisted with full-state rewrites.

    Subclasses set ``header`` and expose domain-named accessors.
    Restaurant names are weak references: ``restaurants_of`` resolves them
    against the catalog and drops the ones it cannot find.
    """

    header: ClassVar[tuple[str, str]] = ("key", "restaurantName")
    kind: ClassVar[str] = "association"

    def __init__(
        self,
        path: Path,
        catalog: RestaurantCatalog,
        lock: RLock | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            path: Location of the backing CSV file.
            catalog: Catalog used to resolve restaurant names.
            lock: Lock shared with the other stores to serialise writes.
        """
        self._path = path
        self._catalog = catalog
        self._lock = lock or RLock()
        self._entries: dict[str, set[str]] = {}

    def load(self) -> None:
        """Replace the in-memory state with the content of the file."""
        with self._lock:
            entries: dict[str, set[str]] = {}
            skipped = 0
            for row in read_rows(self._path):
                if len(row) < 2 or not row[0].strip() or not row[1].strip():
                    skipped += 1
                    continue
                entries.setdefault(row[0].strip(), set()).add(row[1].strip())

            self._entries = entries
            if skipped:
                logger.warning(
                    "Skipped malformed rows", kind=self.kind, skipped=skipped
                )
            logger.info(
                "Associations loaded",
                kind=self.kind,
                identities=len(entries),
                pairs=sum(len(names) for names in entries.values()),
            )

    def _rows(self) -> Iterator[tuple[str, str]]:
        for key, names in self._entries.items():
            for name in sorted(names):
                yield key, name

    def _save(self) -> None:
        rewrite_rows(self._path, self.header, self._rows())

    def add(self, key: str, restaurant_name: str) -> None:
        """Associate ``restaurant_name`` with ``key``. Adding twice is a no-op.

        Raises:
            StorageError: If the file could not be rewritten.
        """
        with self._lock:
            names = self._entries.setdefault(key, set())
            if restaurant_name in names:
                return
            names.add(restaurant_name)
            logger.debug("Association added", kind=self.kind, key=key, name=restaurant_name)
            self._save()

    def remove(self, key: str, restaurant_name: str) -> None:
        """Drop the association; the identity disappears with its last name.

        Removing a pair that does not exist is a no-op.

        Raises:
            StorageError: If the file could not be rewritten.
        """
        with self._lock:
            names = self._entries.get(key)
            if names is None or restaurant_name not in names:
                return
            names.remove(restaurant_name)
            if not names:
                del self._entries[key]
            logger.debug("Association removed", kind=self.kind, key=key, name=restaurant_name)
            self._save()

    def contains(self, key: str, restaurant_name: str) -> bool:
        with self._lock:
            return restaurant_name in self._entries.get(key, ())

    def names_of(self, key: str) -> set[str]:
        """Copy of the restaurant names associated with ``key``."""
        with self._lock:
            return set(self._entries.get(key, ()))

    def restaurants_of(self, key: str) -> list[Restaurant]:
        """Resolve the names of ``key`` against the catalog, in catalog order."""
        names = self.names_of(key)
        if not names:
            return []
        return [r for r in self._catalog.all() if r.name in names]

    def count(self, key: str) -> int:
        with self._lock:
            return len(self._entries.get(key, ()))

    def keys(self) -> list[str]:
        """Every identity with at least one association, in insertion order."""
        with self._lock:
            return list(self._entries)

    def keys_for(self, restaurant_name: str) -> list[str]:
        """Every identity associated with ``restaurant_name``."""
        with self._lock:
            return [
                key for key, names in self._entries.items() if restaurant_name in names
            ]

"""Ownership registry: which owner manages which restaurants."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from restaurant_guide.observability.logging import get_logger
from restaurant_guide.services.associations import AssociationRegistry


if TYPE_CHECKING:
    from restaurant_guide.schemas.restaurant import Restaurant

logger = get_logger(__name__)


class OwnershipRegistry(AssociationRegistry):
    """Owner identity -> names of the restaurants they manage.

    Nothing prevents two owners from claiming the same name. ``owner_of``
    then returns the owner registered first and logs the conflict;
    ``claimants_of`` lists all of them.
    """

    header: ClassVar[tuple[str, str]] = ("ownerId", "restaurantName")
    kind: ClassVar[str] = "ownership"

    def is_owner(self, owner_id: str, restaurant_name: str) -> bool:
        return self.contains(owner_id, restaurant_name)

    def owner_of(self, restaurant_name: str) -> str | None:
        """The owner of ``restaurant_name``, or None if unclaimed."""
        claimants = self.claimants_of(restaurant_name)
        if len(claimants) > 1:
            logger.warning(
                "Restaurant claimed by several owners",
                name=restaurant_name,
                owners=claimants,
            )
        return claimants[0] if claimants else None

    def claimants_of(self, restaurant_name: str) -> list[str]:
        return self.keys_for(restaurant_name)

    def owners(self) -> list[str]:
        return self.keys()

    def owned_restaurants(self, owner_id: str) -> list[Restaurant]:
        """Restaurants of ``owner_id`` with ``owner`` filled in."""
        return [
            r.model_copy(update={"owner": owner_id})
            for r in self.restaurants_of(owner_id)
        ]

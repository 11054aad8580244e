"""Restaurant catalog module."""

from restaurant_guide.services.catalog.service import RestaurantCatalog


__all__ = ["RestaurantCatalog"]

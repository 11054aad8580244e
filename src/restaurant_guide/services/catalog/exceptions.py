"""Exceptions for the restaurant catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for catalog errors."""

    def __init__(self, message: str, restaurant_name: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            restaurant_name: Name of the restaurant involved, if any.
        """
        self.restaurant_name = restaurant_name
        super().__init__(message)


class DuplicateRestaurantError(CatalogError):
    """Raised when a restaurant with the same name (any case) is already listed."""


class RestaurantNotFoundError(CatalogError):
    """Raised when a caller names a restaurant the catalog does not have."""

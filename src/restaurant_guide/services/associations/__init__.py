"""Shared implementation of the ownership and favorites registries."""

from restaurant_guide.services.associations.registry import AssociationRegistry


__all__ = ["AssociationRegistry"]

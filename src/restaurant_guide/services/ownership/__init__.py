"""Ownership registry module."""

from restaurant_guide.services.ownership.service import OwnershipRegistry


__all__ = ["OwnershipRegistry"]

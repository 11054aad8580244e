"""Factory configuration and exports.

This module exports all factories for convenient importing in tests.
"""

from tests.factories.restaurant import RestaurantFactory
from tests.factories.review import ReplyFactory, ReviewFactory


__all__ = [
    "ReplyFactory",
    "RestaurantFactory",
    "ReviewFactory",
]

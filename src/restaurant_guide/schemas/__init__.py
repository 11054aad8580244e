"""Pydantic schemas for the domain model and the HTTP API."""

from restaurant_guide.schemas.base import APIRequest, APIResponse
from restaurant_guide.schemas.enums import PriceTier, StarFilter
from restaurant_guide.schemas.restaurant import (
    CatalogFacets,
    CatalogStatistics,
    FavoriteStatusResponse,
    Restaurant,
    RestaurantCreateRequest,
    RestaurantDetailResponse,
    RestaurantFilter,
    RestaurantListResponse,
    RestaurantResponse,
)
from restaurant_guide.schemas.review import (
    Reply,
    ReplyCreateRequest,
    ReplyResponse,
    Review,
    ReviewCreateRequest,
    ReviewListResponse,
    ReviewResponse,
)


__all__ = [
    "APIRequest",
    "APIResponse",
    "CatalogFacets",
    "CatalogStatistics",
    "FavoriteStatusResponse",
    "PriceTier",
    "Reply",
    "ReplyCreateRequest",
    "ReplyResponse",
    "Restaurant",
    "RestaurantCreateRequest",
    "RestaurantDetailResponse",
    "RestaurantFilter",
    "RestaurantListResponse",
    "RestaurantResponse",
    "Review",
    "ReviewCreateRequest",
    "ReviewListResponse",
    "ReviewResponse",
    "StarFilter",
]

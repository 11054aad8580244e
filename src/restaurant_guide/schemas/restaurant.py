"""Restaurant schemas.

Contains the ``Restaurant`` domain model held by the catalog, the search
filter, and the request/response bodies of the restaurant endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from restaurant_guide.parsing import has_green_star, parse_coordinate, stars_from_award
from restaurant_guide.schemas.base import APIRequest, APIResponse
from restaurant_guide.schemas.enums import PriceTier, StarFilter


_STAR_FILTER_COUNTS = {
    StarFilter.ONE: 1,
    StarFilter.TWO: 2,
    StarFilter.THREE: 3,
}


def _coerce_coordinate(value: Any) -> Any:
    if value is None:
        return 0.0
    if isinstance(value, str):
        return parse_coordinate(value)
    return value


# =============================================================================
# Domain Model
# =============================================================================


class Restaurant(BaseModel):
    """A restaurant listed in the guide.

    The name identifies the restaurant everywhere else (ownership, favorites,
    reviews). Coordinates of 0.0 mean the position is unknown.
    """

    name: str
    address: str = ""
    location: str = ""
    price: str = ""
    cuisine: str = ""
    longitude: float = 0.0
    latitude: float = 0.0
    phone_number: str = ""
    url: str = ""
    website_url: str = ""
    award: str = ""
    green_star: str = ""
    facilities_and_services: str = ""
    description: str = ""
    delivery_available: bool = False
    online_booking_available: bool = False
    owner: str | None = None

    @field_validator("longitude", "latitude", mode="before")
    @classmethod
    def _unknown_coordinate_is_zero(cls, value: Any) -> Any:
        return _coerce_coordinate(value)

    @property
    def stars(self) -> int:
        """Michelin stars derived from the award text."""
        return stars_from_award(self.award)

    @property
    def has_green_star(self) -> bool:
        return has_green_star(self.green_star)

    @property
    def has_michelin_star(self) -> bool:
        return self.stars > 0

    def matches_price_range(self, price_range: str | None) -> bool:
        """Check the price tier.

        Unknown or empty tiers match everything. An empty ``price`` means the
        catalog row had none, so the restaurant matches any tier.
        """
        if not price_range or not self.price:
            return True
        if price_range not in {tier.value for tier in PriceTier}:
            return True
        return self.price == price_range

    def matches_star_rating(self, min_stars: float) -> bool:
        """Check that the restaurant has at least ``min_stars`` stars."""
        return self.stars >= min_stars

    def __str__(self) -> str:
        return f"{self.name} - {self.cuisine} ({self.location})"


class RestaurantFilter(BaseModel):
    """Search criteria for the catalog. Unset criteria match everything."""

    text: str | None = None
    cuisine: str | None = None
    location: str | None = None
    price: str | None = None
    stars: StarFilter | None = None
    delivery: bool = False
    online_booking: bool = False

    def _matches_text(self, restaurant: Restaurant) -> bool:
        needle = (self.text or "").strip().lower()
        if not needle:
            return True
        return any(
            needle in field.lower()
            for field in (restaurant.name, restaurant.cuisine, restaurant.location)
        )

    def _matches_stars(self, restaurant: Restaurant) -> bool:
        if self.stars is None:
            return True
        if self.stars == StarFilter.GREEN:
            return restaurant.has_green_star
        return restaurant.stars == _STAR_FILTER_COUNTS[self.stars]

    def matches(self, restaurant: Restaurant) -> bool:
        """True when ``restaurant`` satisfies every active criterion."""
        return (
            self._matches_text(restaurant)
            and (self.cuisine is None or restaurant.cuisine == self.cuisine)
            and (self.location is None or restaurant.location == self.location)
            and (self.price is None or restaurant.price == self.price)
            and self._matches_stars(restaurant)
            and (not self.delivery or restaurant.delivery_available)
            and (not self.online_booking or restaurant.online_booking_available)
        )


# =============================================================================
# API Schemas
# =============================================================================


class CatalogStatistics(APIResponse):
    """Counters shown above a list of restaurants."""

    total: int = Field(..., ge=0)
    michelin_starred: int = Field(..., ge=0)
    green_starred: int = Field(..., ge=0)


class CatalogFacets(APIResponse):
    """Distinct values available to the search filters."""

    cuisines: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    prices: list[str] = Field(default_factory=list)


class RestaurantCreateRequest(APIRequest):
    """Body of the owner's "add restaurant" action."""

    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    price: str = Field(..., min_length=1)
    cuisine: str = Field(..., min_length=1)
    longitude: float = 0.0
    latitude: float = 0.0
    phone_number: str = Field(..., min_length=1)
    url: str = ""
    website_url: str = ""
    award: str = ""
    green_star: str = ""
    facilities_and_services: str = ""
    description: str = Field(..., min_length=1)
    delivery_available: bool = False
    online_booking_available: bool = False

    @field_validator("longitude", "latitude", mode="before")
    @classmethod
    def _unknown_coordinate_is_zero(cls, value: Any) -> Any:
        return _coerce_coordinate(value)

    def to_restaurant(self, owner: str) -> Restaurant:
        return Restaurant(**self.model_dump(by_alias=False), owner=owner)


class RestaurantResponse(APIResponse):
    """A restaurant with its derived distinctions."""

    name: str
    address: str
    location: str
    price: str
    cuisine: str
    longitude: float
    latitude: float
    phone_number: str
    url: str
    website_url: str
    award: str
    green_star: str
    facilities_and_services: str
    description: str
    delivery_available: bool
    online_booking_available: bool
    owner: str | None = None
    stars: int = Field(..., ge=0, le=3)
    has_green_star: bool

    @classmethod
    def from_restaurant(cls, restaurant: Restaurant, **extra: Any) -> RestaurantResponse:
        return cls(
            **restaurant.model_dump(),
            stars=restaurant.stars,
            has_green_star=restaurant.has_green_star,
            **extra,
        )


class RestaurantDetailResponse(RestaurantResponse):
    """A restaurant with its review aggregates."""

    average_rating: float = Field(..., ge=0.0, le=5.0)
    review_count: int = Field(..., ge=0)


class RestaurantListResponse(APIResponse):
    """Search result with counters."""

    restaurants: list[RestaurantResponse]
    statistics: CatalogStatistics


class FavoriteStatusResponse(APIResponse):
    """Whether a restaurant is in the acting user's favorites."""

    restaurant_name: str
    favorite: bool

"""Unit tests for restaurant schemas.

Tests cover:
- Derived distinctions
- Coordinate coercion
- Price and star matching
- Search filter
- API request/response aliases
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from restaurant_guide.schemas import (
    Restaurant,
    RestaurantCreateRequest,
    RestaurantDetailResponse,
    RestaurantFilter,
    RestaurantResponse,
    StarFilter,
)
from tests.factories import RestaurantFactory


pytestmark = pytest.mark.unit


class TestRestaurantDistinctions:
    """Tests for the properties derived from award and green star."""

    def test_three_stars(self):
        """Should derive stars from the award text."""
        restaurant = RestaurantFactory.build(award="3 Stars")

        assert restaurant.stars == 3
        assert restaurant.has_michelin_star is True

    def test_bib_gourmand_is_not_starred(self):
        """Should not count non-star awards."""
        restaurant = RestaurantFactory.build(award="Bib Gourmand")

        assert restaurant.stars == 0
        assert restaurant.has_michelin_star is False

    def test_green_star(self):
        """Should detect the green star unless it is N/A."""
        assert RestaurantFactory.build(green_star="Green Star").has_green_star
        assert not RestaurantFactory.build(green_star="N/A").has_green_star

    def test_str(self):
        """Should show name, cuisine and location."""
        restaurant = Restaurant(name="Da Mario", cuisine="Pizza", location="Napoli")

        assert str(restaurant) == "Da Mario - Pizza (Napoli)"


class TestCoordinates:
    """Tests for longitude/latitude coercion."""

    @pytest.mark.parametrize("value", ["N/A", "", None, "east"])
    def test_unknown_coordinates_are_zero(self, value: str | None):
        """Should store unknown coordinates as 0.0."""
        restaurant = Restaurant(name="X", longitude=value, latitude=value)

        assert restaurant.longitude == 0.0
        assert restaurant.latitude == 0.0

    def test_numeric_string(self):
        """Should parse numeric strings."""
        assert Restaurant(name="X", longitude="9.19").longitude == pytest.approx(9.19)


class TestMatching:
    """Tests for matches_price_range and matches_star_rating."""

    def test_price_range_matches_exact_tier(self):
        """Should match the same tier only."""
        restaurant = RestaurantFactory.build(price="€€")

        assert restaurant.matches_price_range("€€") is True
        assert restaurant.matches_price_range("€€€") is False

    @pytest.mark.parametrize("price_range", [None, "", "$$"])
    def test_unknown_price_range_matches(self, price_range: str | None):
        """Should match when the requested tier is empty or unknown."""
        restaurant = RestaurantFactory.build(price="€€")

        assert restaurant.matches_price_range(price_range) is True

    def test_restaurant_without_price_matches(self):
        """Should match when the restaurant has no price."""
        assert RestaurantFactory.build(price="").matches_price_range("€") is True

    def test_star_rating_is_a_minimum(self):
        """Should compare stars against a minimum."""
        restaurant = RestaurantFactory.build(award="2 Stars")

        assert restaurant.matches_star_rating(1) is True
        assert restaurant.matches_star_rating(2) is True
        assert restaurant.matches_star_rating(2.5) is False


class TestRestaurantFilter:
    """Tests for RestaurantFilter.matches."""

    def test_empty_filter_matches_everything(self):
        """Should match any restaurant when no criterion is set."""
        assert RestaurantFilter().matches(RestaurantFactory.build()) is True

    def test_text_is_case_insensitive(self):
        """Should search name, cuisine and location ignoring case."""
        restaurant = RestaurantFactory.build(
            name="Da Mario", cuisine="Pizza", location="Napoli"
        )

        assert RestaurantFilter(text="NAPOLI").matches(restaurant)
        assert RestaurantFilter(text="pizz").matches(restaurant)
        assert not RestaurantFilter(text="sushi").matches(restaurant)

    def test_star_filter_is_exact(self):
        """Should match the exact star count."""
        restaurant = RestaurantFactory.build(award="2 Stars")

        assert RestaurantFilter(stars=StarFilter.TWO).matches(restaurant)
        assert not RestaurantFilter(stars=StarFilter.ONE).matches(restaurant)

    def test_green_filter(self):
        """Should match on the green star."""
        green = RestaurantFactory.build(green_star="Green Star")
        plain = RestaurantFactory.build(green_star="N/A")

        assert RestaurantFilter(stars=StarFilter.GREEN).matches(green)
        assert not RestaurantFilter(stars=StarFilter.GREEN).matches(plain)

    def test_service_flags(self):
        """Should require the requested services."""
        restaurant = RestaurantFactory.build(
            delivery_available=True, online_booking_available=False
        )

        assert RestaurantFilter(delivery=True).matches(restaurant)
        assert not RestaurantFilter(online_booking=True).matches(restaurant)


class TestRestaurantCreateRequest:
    """Tests for the registration body."""

    def test_accepts_camel_case(self):
        """Should read camelCase properties and build an owned restaurant."""
        request = RestaurantCreateRequest.model_validate(
            {
                "name": " Da Mario ",
                "address": "Via Roma 1",
                "location": "Napoli",
                "price": "€",
                "cuisine": "Pizza",
                "phoneNumber": "+39 081 000",
                "description": "Wood oven pizza",
                "deliveryAvailable": True,
                "longitude": "N/A",
            }
        )

        restaurant = request.to_restaurant("owner1")

        assert restaurant.name == "Da Mario"
        assert restaurant.phone_number == "+39 081 000"
        assert restaurant.delivery_available is True
        assert restaurant.online_booking_available is False
        assert restaurant.longitude == 0.0
        assert restaurant.owner == "owner1"

    def test_requires_mandatory_fields(self):
        """Should reject a body without a name."""
        with pytest.raises(ValidationError):
            RestaurantCreateRequest.model_validate({"address": "Via Roma 1"})


class TestRestaurantResponse:
    """Tests for the response bodies."""

    def test_serializes_camel_case_with_distinctions(self):
        """Should expose derived fields in camelCase."""
        restaurant = RestaurantFactory.build(award="1 Star", green_star="Green Star")

        data = RestaurantResponse.from_restaurant(restaurant).model_dump()

        assert data["stars"] == 1
        assert data["hasGreenStar"] is True
        assert data["phoneNumber"] == restaurant.phone_number
        assert "phone_number" not in data

    def test_detail_response_carries_aggregates(self):
        """Should add the average rating and review count."""
        restaurant = RestaurantFactory.build()

        detail = RestaurantDetailResponse.from_restaurant(
            restaurant, average_rating=4.0, review_count=3
        )

        assert detail.model_dump()["averageRating"] == 4.0
        assert detail.review_count == 3

"""Conversion between catalog CSV rows and ``Restaurant`` models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from restaurant_guide.observability.logging import get_logger
from restaurant_guide.parsing import parse_coordinate, parse_yes_no
from restaurant_guide.parsing.fields import format_yes_no
from restaurant_guide.schemas.restaurant import Restaurant
from restaurant_guide.services.catalog.constants import (
    CURRENT_FIELD_COUNT,
    LEGACY_FIELD_COUNT,
)


if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def restaurant_from_row(row: Sequence[str]) -> Restaurant | None:
    """Build a restaurant from a 14- or 16-field row.

    Legacy rows carry no service columns; delivery and online booking are
    then read from the facilities text.

    Returns:
        The restaurant, or None when the row is too short or invalid.
    """
    if len(row) < LEGACY_FIELD_COUNT:
        return None

    values = [value.strip() for value in row]
    facilities = values[12]
    if len(values) >= CURRENT_FIELD_COUNT:
        delivery = parse_yes_no(values[14])
        online_booking = parse_yes_no(values[15])
    else:
        lowered = facilities.lower()
        delivery = "delivery" in lowered
        online_booking = "online" in lowered

    try:
        return Restaurant(
            name=values[0],
            address=values[1],
            location=values[2],
            price=values[3],
            cuisine=values[4],
            longitude=parse_coordinate(values[5]),
            latitude=parse_coordinate(values[6]),
            phone_number=values[7],
            url=values[8],
            website_url=values[9],
            award=values[10],
            green_star=values[11],
            facilities_and_services=facilities,
            description=values[13],
            delivery_available=delivery,
            online_booking_available=online_booking,
        )
    except ValidationError as e:
        logger.warning("Invalid restaurant row", name=values[0], error=str(e))
        return None


def restaurant_to_row(restaurant: Restaurant) -> list[str]:
    """Serialize a restaurant in the current 16-field shape."""
    return [
        restaurant.name,
        restaurant.address,
        restaurant.location,
        restaurant.price,
        restaurant.cuisine,
        str(restaurant.longitude),
        str(restaurant.latitude),
        restaurant.phone_number,
        restaurant.url,
        restaurant.website_url,
        restaurant.award,
        restaurant.green_star,
        restaurant.facilities_and_services,
        restaurant.description,
        format_yes_no(restaurant.delivery_available),
        format_yes_no(restaurant.online_booking_available),
    ]

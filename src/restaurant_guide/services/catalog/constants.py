"""Constants for the restaurant catalog file."""

from __future__ import annotations


CATALOG_HEADER: tuple[str, ...] = (
    "Name",
    "Address",
    "Location",
    "Price",
    "Cuisine",
    "Longitude",
    "Latitude",
    "PhoneNumber",
    "Url",
    "WebsiteUrl",
    "Award",
    "GreenStar",
    "FacilitiesAndServices",
    "Description",
    "DeliveryAvailable",
    "OnlineBookingAvailable",
)

# Snapshots exported before the service columns existed have 14 fields.
LEGACY_FIELD_COUNT = 14
CURRENT_FIELD_COUNT = len(CATALOG_HEADER)

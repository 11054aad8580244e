"""Enumeration types for the guide schemas."""

from __future__ import annotations

from enum import StrEnum


class StarFilter(StrEnum):
    """Distinction filter offered by the catalog search."""

    ONE = "ONE"
    TWO = "TWO"
    THREE = "THREE"
    GREEN = "GREEN"


class PriceTier(StrEnum):
    """Price tiers known to the guide snapshot."""

    BUDGET = "€"
    MODERATE = "€€"
    EXPENSIVE = "€€€"
    LUXURY = "€€€€"

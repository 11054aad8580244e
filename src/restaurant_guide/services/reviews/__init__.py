"""Review ledger module."""

from restaurant_guide.services.reviews.service import ReviewLedger


__all__ = ["ReviewLedger"]

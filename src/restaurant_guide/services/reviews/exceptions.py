"""Exceptions for the review ledger."""

from __future__ import annotations


class ReviewLedgerError(Exception):
    """Base exception for review ledger errors."""

    def __init__(self, message: str, review_id: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            review_id: Identifier of the review involved, if any.
        """
        self.review_id = review_id
        super().__init__(message)


class ReviewNotFoundError(ReviewLedgerError):
    """Raised when a reply targets a review id the ledger does not hold."""


class ReplyNotPermittedError(ReviewLedgerError):
    """Raised when someone other than the restaurant's owner tries to reply."""


class InvalidReviewError(ReviewLedgerError):
    """Raised when a review without a valid 1-5 rating is submitted."""

"""Review ledger.

Stores every review with its optional owner reply and answers the views
the guide needs: reviews of a restaurant, of a customer, of an owner's
restaurants, and the average rating. Every view is ordered most recent
first.

Persistence is a full rewrite of the ledger file after each mutation.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING

from restaurant_guide.observability.logging import get_logger
from restaurant_guide.schemas.review import UNRATED, Reply, Review
from restaurant_guide.services.reviews.constants import REVIEWS_HEADER
from restaurant_guide.services.reviews.exceptions import (
    InvalidReviewError,
    ReplyNotPermittedError,
    ReviewNotFoundError,
)
from restaurant_guide.services.reviews.rows import review_from_row, review_to_row
from restaurant_guide.storage import read_rows, rewrite_rows


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from restaurant_guide.services.ownership import OwnershipRegistry

logger = get_logger(__name__)


def _most_recent_first(reviews: Iterable[Review]) -> list[Review]:
    return sorted(reviews, key=lambda r: r.created_at, reverse=True)


class ReviewLedger:
    """All reviews and replies, backed by a CSV file.

    Restaurants are referenced by name; owners are resolved through the
    ownership registry.
    """

    def __init__(
        self,
        path: Path,
        ownership: OwnershipRegistry,
        lock: RLock | None = None,
    ) -> None:
        """Initialize the ledger.

        Args:
            path: Location of the reviews CSV file.
            ownership: Registry used to find an owner's restaurants.
            lock: Lock shared with the other stores to serialise writes.
        """
        self._path = path
        self._ownership = ownership
        self._lock = lock or RLock()
        self._reviews: list[Review] = []

    def load(self) -> list[Review]:
        """Replace the in-memory ledger with the content of the file.

        Rows that cannot be parsed are skipped and counted in the log.
        """
        with self._lock:
            reviews: list[Review] = []
            skipped = 0
            for line_number, row in enumerate(read_rows(self._path), start=2):
                review = review_from_row(row)
                if review is None:
                    skipped += 1
                    logger.warning("Skipping malformed review row", line=line_number)
                    continue
                reviews.append(review)

            self._reviews = reviews
            logger.info("Reviews loaded", reviews=len(reviews), skipped=skipped)
            return list(reviews)

    def _save(self) -> None:
        rewrite_rows(
            self._path, REVIEWS_HEADER, (review_to_row(r) for r in self._reviews)
        )

    # =========================================================================
    # Mutations
    # =========================================================================

    def add(self, review: Review) -> Review:
        """Record a new review.

        Raises:
            InvalidReviewError: If the review has no valid rating.
            StorageError: If the ledger file could not be rewritten.
        """
        if review.rating == UNRATED:
            msg = "A review needs a rating between 1 and 5"
            raise InvalidReviewError(msg, review_id=review.id)

        with self._lock:
            self._reviews.append(review)
            logger.info(
                "Review added",
                review_id=review.id,
                author=review.author,
                restaurant=review.restaurant_name,
                rating=review.rating,
            )
            self._save()
        return review

    def attach_reply(self, target: str | Review, reply: Reply) -> Review:
        """Attach ``reply`` to the review identified by ``target``.

        An existing reply is replaced; the replaced reply id is logged.

        Args:
            target: The review id, or a review carrying that id.
            reply: The reply to attach.

        Returns:
            The updated review.

        Raises:
            ReviewNotFoundError: If no review has that id.
            StorageError: If the ledger file could not be rewritten.
        """
        review_id = target.id if isinstance(target, Review) else target
        with self._lock:
            review = self.get(review_id)
            if review is None:
                msg = f"Review '{review_id}' not found"
                raise ReviewNotFoundError(msg, review_id=review_id)

            if review.reply is not None:
                logger.warning(
                    "Replacing existing reply",
                    review_id=review_id,
                    previous_reply_id=review.reply.id,
                )
            if reply.review_id != review_id:
                reply = reply.model_copy(update={"review_id": review_id})
            review.reply = reply
            logger.info("Reply attached", review_id=review_id, reply_id=reply.id)
            self._save()
            return review

    def reply_to(self, review_id: str, owner_id: str, text: str) -> Review:
        """Reply to a review as the owner of the reviewed restaurant.

        Raises:
            ReviewNotFoundError: If no review has that id.
            ReplyNotPermittedError: If ``owner_id`` does not own the restaurant.
            StorageError: If the ledger file could not be rewritten.
        """
        with self._lock:
            review = self.get(review_id)
            if review is None:
                msg = f"Review '{review_id}' not found"
                raise ReviewNotFoundError(msg, review_id=review_id)
            if not self._ownership.is_owner(owner_id, review.restaurant_name):
                msg = f"'{owner_id}' does not own '{review.restaurant_name}'"
                raise ReplyNotPermittedError(msg, review_id=review_id)

            reply = Reply(author=owner_id, review_id=review_id, text=text)
            return self.attach_reply(review_id, reply)

    # =========================================================================
    # Queries
    # =========================================================================

    def _select(self, predicate: Callable[[Review], bool]) -> list[Review]:
        with self._lock:
            return _most_recent_first(r for r in self._reviews if predicate(r))

    def get(self, review_id: str) -> Review | None:
        with self._lock:
            return next((r for r in self._reviews if r.id == review_id), None)

    def reviews_for(self, restaurant_name: str) -> list[Review]:
        """Reviews of one restaurant, most recent first."""
        return self._select(lambda r: r.restaurant_name == restaurant_name)

    def reviews_by(self, user_id: str) -> list[Review]:
        """Reviews written by one customer, most recent first."""
        return self._select(lambda r: r.author == user_id)

    def reviews_for_owner(self, owner_id: str) -> list[Review]:
        """Reviews of every restaurant ``owner_id`` manages, most recent first."""
        names = self._ownership.names_of(owner_id)
        if not names:
            return []
        return self._select(lambda r: r.restaurant_name in names)

    def average_rating(self, restaurant_name: str) -> float:
        """Mean rating of a restaurant; 0.0 when it has no rated reviews.

        Unrated reviews, which can only come from the ledger file, are left
        out of the mean.
        """
        ratings = [
            r.rating for r in self.reviews_for(restaurant_name) if r.rating != UNRATED
        ]
        if not ratings:
            return 0.0
        return sum(ratings) / len(ratings)

    def count_for(self, restaurant_name: str) -> int:
        with self._lock:
            return sum(1 for r in self._reviews if r.restaurant_name == restaurant_name)

    def all(self) -> list[Review]:
        """Copy of every review in memory, in insertion order."""
        with self._lock:
            return list(self._reviews)

    def __len__(self) -> int:
        with self._lock:
            return len(self._reviews)

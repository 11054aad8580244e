"""Conversion between review CSV rows and ``Review`` models.

A reply is flattened into the last four columns of its review's row; the
columns are empty for unanswered reviews.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from restaurant_guide.observability.logging import get_logger
from restaurant_guide.schemas.review import UNRATED, Reply, Review, valid_rating
from restaurant_guide.services.reviews.constants import (
    MIN_REPLY_FIELDS,
    MIN_REVIEW_FIELDS,
)


if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def _parse_timestamp(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def _reply_from_row(row: Sequence[str], review_id: str) -> Reply | None:
    if len(row) < MIN_REPLY_FIELDS or not row[7].strip():
        return None

    fields: dict[str, object] = {
        "id": row[7].strip(),
        "author": row[8].strip(),
        "review_id": review_id,
        "text": row[9],
    }
    if len(row) > MIN_REPLY_FIELDS and row[10].strip():
        created_at = _parse_timestamp(row[10])
        if created_at is None:
            logger.warning("Unreadable reply timestamp", review_id=review_id)
        else:
            fields["created_at"] = created_at
    return Reply(**fields)


def _parse_rating(value: str, review_id: str) -> int | None:
    try:
        rating = int(value.strip())
    except ValueError:
        return None
    if valid_rating(rating) is None:
        logger.warning(
            "Loading review without a rating",
            review_id=review_id,
            rating=rating,
        )
        return UNRATED
    return rating


def review_from_row(row: Sequence[str]) -> Review | None:
    """Build a review (and its reply, if any) from one ledger row.

    A numeric rating outside 1..5 is dropped and the review is kept as
    ``UNRATED``.

    Returns:
        The review, or None when the row is too short, its rating is not a
        number or its timestamp cannot be read.
    """
    if len(row) < MIN_REVIEW_FIELDS:
        return None

    review_id = row[0].strip()
    rating = _parse_rating(row[3], review_id)
    created_at = _parse_timestamp(row[6])
    if rating is None or created_at is None:
        return None

    return Review(
        id=review_id,
        author=row[1].strip(),
        restaurant_name=row[2].strip(),
        rating=rating,
        title=row[4],
        body=row[5],
        created_at=created_at,
        reply=_reply_from_row(row, review_id),
    )


def review_to_row(review: Review) -> list[str]:
    """Serialize a review with its reply columns."""
    reply = review.reply
    return [
        review.id,
        review.author,
        review.restaurant_name,
        str(review.rating),
        review.title,
        review.body,
        review.created_at.isoformat(),
        reply.id if reply else "",
        reply.author if reply else "",
        reply.text if reply else "",
        reply.created_at.isoformat() if reply else "",
    ]

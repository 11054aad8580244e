"""Review and reply schemas.

A ``Review`` is a customer's star rating with a title and free text. The
owner of the reviewed restaurant may attach a single ``Reply``.
"""

from __future__ import annotations

import time
import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from restaurant_guide.observability.logging import get_logger
from restaurant_guide.schemas.base import APIRequest, APIResponse


logger = get_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5
UNRATED = 0


def generate_id(prefix: str) -> str:
    """Build an identifier like ``REV_1718000000000_3f9a1c2b``."""
    return f"{prefix}_{time.time_ns() // 1_000_000}_{uuid.uuid4().hex[:8]}"


def local_now() -> datetime:
    """Current time, timezone-aware in the local zone."""
    return datetime.now().astimezone()


def valid_rating(value: Any) -> int | None:
    """Return ``value`` as a rating in 1..5, or None if it is not one."""
    if isinstance(value, bool):
        return None
    try:
        rating = int(value)
    except (TypeError, ValueError):
        return None
    if rating != value and not isinstance(value, str):
        # 4.5 is not a rating
        return None
    return rating if MIN_RATING <= rating <= MAX_RATING else None


def _aware(value: datetime) -> datetime:
    # Naive timestamps in older files were written in local time.
    return value if value.tzinfo is not None else value.astimezone()


# =============================================================================
# Domain Models
# =============================================================================


class Reply(BaseModel):
    """An owner's answer to a review."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: generate_id("RESP"))
    author: str
    review_id: str | None = None
    text: str
    created_at: datetime = Field(default_factory=local_now)

    @field_validator("created_at")
    @classmethod
    def _timezone_aware(cls, value: datetime) -> datetime:
        return _aware(value)


class Review(BaseModel):
    """A customer review of one restaurant.

    ``rating`` only ever holds 1..5 once set. Out-of-range values are
    ignored, whether passed to the constructor (the rating stays
    ``UNRATED``) or assigned later (the previous rating is kept).
    """

    id: str = Field(default_factory=lambda: generate_id("REV"))
    author: str
    restaurant_name: str
    rating: int = UNRATED
    title: str = ""
    body: str = ""
    created_at: datetime = Field(default_factory=local_now)
    reply: Reply | None = None

    @field_validator("rating", mode="before")
    @classmethod
    def _ignore_out_of_range(cls, value: Any) -> int:
        rating = valid_rating(value)
        if rating is None:
            logger.warning("Ignoring out-of-range rating", rating=value)
            return UNRATED
        return rating

    @field_validator("created_at")
    @classmethod
    def _timezone_aware(cls, value: datetime) -> datetime:
        return _aware(value)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "rating":
            rating = valid_rating(value)
            if rating is None:
                logger.warning(
                    "Ignoring out-of-range rating", review_id=self.id, rating=value
                )
                return
            value = rating
        super().__setattr__(name, value)

    @property
    def has_reply(self) -> bool:
        return self.reply is not None


# =============================================================================
# API Schemas
# =============================================================================


class ReviewCreateRequest(APIRequest):
    """Body of a customer's review submission."""

    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    title: str = Field(..., min_length=1, max_length=200)
    body: str = Field(..., min_length=1)


class ReplyCreateRequest(APIRequest):
    """Body of an owner's reply."""

    text: str = Field(..., min_length=1)


class ReplyResponse(APIResponse):
    """A reply as returned by the API."""

    id: str
    author: str
    review_id: str | None = None
    text: str
    created_at: datetime

    @classmethod
    def from_reply(cls, reply: Reply) -> ReplyResponse:
        return cls(**reply.model_dump())


class ReviewResponse(APIResponse):
    """A review as returned by the API."""

    id: str
    author: str
    restaurant_name: str
    rating: int
    title: str
    body: str
    created_at: datetime
    reply: ReplyResponse | None = None

    @classmethod
    def from_review(cls, review: Review) -> ReviewResponse:
        return cls(
            **review.model_dump(exclude={"reply"}),
            reply=ReplyResponse.from_reply(review.reply) if review.reply else None,
        )


class ReviewListResponse(APIResponse):
    """Reviews, most recent first, with their aggregate rating."""

    reviews: list[ReviewResponse]
    count: int = Field(..., ge=0)
    average_rating: float = Field(..., ge=0.0, le=5.0)

    @classmethod
    def from_reviews(cls, reviews: list[Review]) -> ReviewListResponse:
        """Build the response; the average is 0.0 for an empty list."""
        average = sum(r.rating for r in reviews) / len(reviews) if reviews else 0.0
        return cls(
            reviews=[ReviewResponse.from_review(r) for r in reviews],
            count=len(reviews),
            average_rating=average,
        )

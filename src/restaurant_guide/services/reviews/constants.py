"""Constants for the review ledger file."""

from __future__ import annotations


REVIEWS_HEADER: tuple[str, ...] = (
    "id",
    "author",
    "restaurantName",
    "rating",
    "title",
    "body",
    "timestamp",
    "replyId",
    "replyAuthor",
    "replyText",
    "replyTimestamp",
)

# id .. timestamp
MIN_REVIEW_FIELDS = 7
# replyId, replyAuthor, replyText
MIN_REPLY_FIELDS = 10

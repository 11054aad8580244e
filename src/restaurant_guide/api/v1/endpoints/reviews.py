"""Review endpoints: read and write reviews, and owner replies."""

from __future__ import annotations

from fastapi import APIRouter, status

from restaurant_guide.api.dependencies import (
    CurrentUserDep,
    RestaurantDep,
    ServicesDep,
)
from restaurant_guide.schemas import (
    ReplyCreateRequest,
    Review,
    ReviewCreateRequest,
    ReviewListResponse,
    ReviewResponse,
)


router = APIRouter(tags=["reviews"])


@router.get(
    "/restaurants/{name}/reviews",
    response_model=ReviewListResponse,
    summary="Reviews of a restaurant",
)
def list_restaurant_reviews(
    restaurant: RestaurantDep,
    services: ServicesDep,
) -> ReviewListResponse:
    """Reviews of the restaurant, most recent first."""
    return ReviewListResponse.from_reviews(services.reviews.reviews_for(restaurant.name))


@router.post(
    "/restaurants/{name}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Review a restaurant",
)
def create_review(
    body: ReviewCreateRequest,
    restaurant: RestaurantDep,
    services: ServicesDep,
    user_id: CurrentUserDep,
) -> ReviewResponse:
    review = Review(
        author=user_id,
        restaurant_name=restaurant.name,
        rating=body.rating,
        title=body.title,
        body=body.body,
    )
    return ReviewResponse.from_review(services.reviews.add(review))


@router.post(
    "/reviews/{review_id}/reply",
    response_model=ReviewResponse,
    summary="Reply to a review",
)
def reply_to_review(
    review_id: str,
    body: ReplyCreateRequest,
    services: ServicesDep,
    user_id: CurrentUserDep,
) -> ReviewResponse:
    """Attach the owner's reply to a review of one of their restaurants.

    A second reply replaces the first.
    """
    review = services.reviews.reply_to(review_id, user_id, body.text)
    return ReviewResponse.from_review(review)


@router.get(
    "/me/reviews",
    response_model=ReviewListResponse,
    summary="Reviews written by the acting user",
)
def list_my_reviews(services: ServicesDep, user_id: CurrentUserDep) -> ReviewListResponse:
    return ReviewListResponse.from_reviews(services.reviews.reviews_by(user_id))

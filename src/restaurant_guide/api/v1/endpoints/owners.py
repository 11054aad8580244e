"""Owner endpoints: managed restaurants and the reviews they received."""

from __future__ import annotations

from fastapi import APIRouter

from restaurant_guide.api.dependencies import CurrentUserDep, ServicesDep
from restaurant_guide.schemas import (
    RestaurantListResponse,
    RestaurantResponse,
    ReviewListResponse,
)


router = APIRouter(prefix="/me/owned", tags=["owners"])


@router.get("", response_model=RestaurantListResponse, summary="Managed restaurants")
def list_owned_restaurants(
    services: ServicesDep,
    user_id: CurrentUserDep,
) -> RestaurantListResponse:
    owned = services.ownership.owned_restaurants(user_id)
    return RestaurantListResponse(
        restaurants=[RestaurantResponse.from_restaurant(r) for r in owned],
        statistics=services.catalog.statistics(owned),
    )


@router.get(
    "/reviews",
    response_model=ReviewListResponse,
    summary="Reviews of the managed restaurants",
)
def list_owned_reviews(services: ServicesDep, user_id: CurrentUserDep) -> ReviewListResponse:
    """Reviews of every restaurant the acting user manages, most recent first."""
    return ReviewListResponse.from_reviews(services.reviews.reviews_for_owner(user_id))

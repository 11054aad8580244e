"""Restaurant catalog endpoints.

Search and browse the catalog, view one restaurant with its rating, and
let an owner register a new restaurant.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, status

from restaurant_guide.api.dependencies import (
    CurrentUserDep,
    RestaurantDep,
    ServicesDep,
)
from restaurant_guide.observability.logging import get_logger
from restaurant_guide.schemas import (
    CatalogFacets,
    RestaurantCreateRequest,
    RestaurantDetailResponse,
    RestaurantFilter,
    RestaurantListResponse,
    RestaurantResponse,
    StarFilter,
)


logger = get_logger(__name__)

router = APIRouter(prefix="/restaurants", tags=["restaurants"])


@router.get(
    "",
    response_model=RestaurantListResponse,
    summary="Search the catalog",
)
def search_restaurants(
    services: ServicesDep,
    text: Annotated[
        str | None, Query(description="Matches name, cuisine or location")
    ] = None,
    cuisine: str | None = None,
    location: str | None = None,
    price: str | None = None,
    stars: StarFilter | None = None,
    delivery: bool = False,
    online_booking: Annotated[bool, Query(alias="onlineBooking")] = False,
) -> RestaurantListResponse:
    """Restaurants matching every given filter, with counters."""
    criteria = RestaurantFilter(
        text=text,
        cuisine=cuisine,
        location=location,
        price=price,
        stars=stars,
        delivery=delivery,
        online_booking=online_booking,
    )
    results = services.catalog.search(criteria)
    logger.debug("Catalog searched", results=len(results))
    return RestaurantListResponse(
        restaurants=[RestaurantResponse.from_restaurant(r) for r in results],
        statistics=services.catalog.statistics(results),
    )


@router.get(
    "/facets",
    response_model=CatalogFacets,
    summary="Values available to the search filters",
)
def catalog_facets(services: ServicesDep) -> CatalogFacets:
    return services.catalog.facets()


@router.get(
    "/{name}",
    response_model=RestaurantDetailResponse,
    summary="Restaurant details",
)
def get_restaurant(
    restaurant: RestaurantDep,
    services: ServicesDep,
) -> RestaurantDetailResponse:
    """One restaurant with its owner, average rating and review count."""
    if restaurant.owner is None:
        owner = services.ownership.owner_of(restaurant.name)
        restaurant = restaurant.model_copy(update={"owner": owner})
    return RestaurantDetailResponse.from_restaurant(
        restaurant,
        average_rating=services.reviews.average_rating(restaurant.name),
        review_count=services.reviews.count_for(restaurant.name),
    )


@router.post(
    "",
    response_model=RestaurantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a restaurant",
)
def register_restaurant(
    body: RestaurantCreateRequest,
    services: ServicesDep,
    user_id: CurrentUserDep,
) -> RestaurantResponse:
    """List a new restaurant owned by the acting user.

    The name must not already be listed, in any letter case.
    """
    restaurant = services.register_restaurant(body.to_restaurant(user_id), user_id)
    return RestaurantResponse.from_restaurant(restaurant)

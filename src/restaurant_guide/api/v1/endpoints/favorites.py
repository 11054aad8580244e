"""Favorites endpoints for the acting user."""

from __future__ import annotations

from fastapi import APIRouter

from restaurant_guide.api.dependencies import (
    CurrentUserDep,
    RestaurantDep,
    ServicesDep,
)
from restaurant_guide.schemas import (
    FavoriteStatusResponse,
    RestaurantListResponse,
    RestaurantResponse,
)


router = APIRouter(prefix="/me/favorites", tags=["favorites"])


@router.get("", response_model=RestaurantListResponse, summary="Favorite restaurants")
def list_favorites(services: ServicesDep, user_id: CurrentUserDep) -> RestaurantListResponse:
    """Favorites that are still in the catalog, in catalog order."""
    favorites = services.favorites.favorites_of(user_id)
    return RestaurantListResponse(
        restaurants=[RestaurantResponse.from_restaurant(r) for r in favorites],
        statistics=services.catalog.statistics(favorites),
    )


@router.put("/{name}", response_model=FavoriteStatusResponse, summary="Add a favorite")
def add_favorite(
    restaurant: RestaurantDep,
    services: ServicesDep,
    user_id: CurrentUserDep,
) -> FavoriteStatusResponse:
    services.favorites.add(user_id, restaurant.name)
    return FavoriteStatusResponse(restaurant_name=restaurant.name, favorite=True)


@router.delete(
    "/{name}", response_model=FavoriteStatusResponse, summary="Remove a favorite"
)
def remove_favorite(
    name: str,
    services: ServicesDep,
    user_id: CurrentUserDep,
) -> FavoriteStatusResponse:
    """Remove a favorite. Works for restaurants no longer in the catalog."""
    services.favorites.remove(user_id, name)
    return FavoriteStatusResponse(restaurant_name=name, favorite=False)


@router.post(
    "/{name}/toggle",
    response_model=FavoriteStatusResponse,
    summary="Toggle a favorite",
)
def toggle_favorite(
    restaurant: RestaurantDep,
    services: ServicesDep,
    user_id: CurrentUserDep,
) -> FavoriteStatusResponse:
    favorite = services.favorites.toggle(user_id, restaurant.name)
    return FavoriteStatusResponse(restaurant_name=restaurant.name, favorite=favorite)

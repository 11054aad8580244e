"""API v1 router aggregating all endpoint routers.

All endpoints are mounted under the configured ``api.v1_prefix``.
"""

from __future__ import annotations

from fastapi import APIRouter

from restaurant_guide.api.v1.endpoints import (
    favorites,
    health,
    owners,
    restaurants,
    reviews,
)


router = APIRouter()

router.include_router(health.router)
router.include_router(restaurants.router)
router.include_router(reviews.router)
router.include_router(favorites.router)
router.include_router(owners.router)

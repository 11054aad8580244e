"""FastAPI dependencies for service and identity access.

Services are built during application startup and stored in ``app.state``.
The acting user is read from a trusted header set by an upstream gateway;
this service does not authenticate anyone itself.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from restaurant_guide.core.config import Settings, get_settings
from restaurant_guide.core.exceptions import UnauthorizedException
from restaurant_guide.observability.logging import bind_context
from restaurant_guide.schemas import Restaurant
from restaurant_guide.services import GuideServices
from restaurant_guide.services.catalog.exceptions import RestaurantNotFoundError


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings or get_settings()


def get_services(request: Request) -> GuideServices:
    """Get the guide services from app state.

    Args:
        request: The incoming request.

    Returns:
        The loaded GuideServices.

    Raises:
        HTTPException: 503 if the services are not initialized.
    """
    services: GuideServices | None = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Guide data not available",
        )
    return services


def get_current_user_id(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> str:
    """Identity of the acting user, from the configured header.

    Raises:
        UnauthorizedException: If the header is missing or blank.
    """
    header = settings.auth.user_id_header
    user_id = (request.headers.get(header) or "").strip()
    if not user_id:
        msg = f"Missing {header} header"
        raise UnauthorizedException(msg)

    bind_context(user_id=user_id)
    return user_id


def get_restaurant(
    name: str,
    services: Annotated[GuideServices, Depends(get_services)],
) -> Restaurant:
    """Resolve the restaurant named in the path.

    Raises:
        RestaurantNotFoundError: If the catalog has no restaurant with that name.
    """
    restaurant = services.catalog.find_by_name(name)
    if restaurant is None:
        msg = f"Restaurant '{name}' not found"
        raise RestaurantNotFoundError(msg, restaurant_name=name)
    return restaurant


ServicesDep = Annotated[GuideServices, Depends(get_services)]
CurrentUserDep = Annotated[str, Depends(get_current_user_id)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
RestaurantDep = Annotated[Restaurant, Depends(get_restaurant)]

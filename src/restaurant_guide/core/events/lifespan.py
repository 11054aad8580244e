"""Application lifespan event handlers.

Startup configures logging and loads the guide data from the configured
directory. Shutdown only logs: every mutation has already been written.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from restaurant_guide.core.config import Settings, get_settings
from restaurant_guide.observability.logging import get_logger, setup_logging
from restaurant_guide.services import GuideServices


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize logging and the guide services.

    Services already present on ``app.state`` (injected by tests or by an
    embedding application) are kept as they are.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.
    """
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
        log_file=settings.logging.file,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        data_dir=str(settings.storage.data_dir),
    )

    if getattr(app.state, "services", None) is None:
        app.state.services = GuideServices.from_storage(settings.storage)

    services: GuideServices = app.state.services
    logger.info(
        "Application startup complete",
        restaurants=len(services.catalog),
        reviews=len(services.reviews),
    )


def _shutdown(app: FastAPI) -> None:
    services: GuideServices | None = getattr(app.state, "services", None)
    logger.info(
        "Application shutdown complete",
        restaurants=len(services.catalog) if services else 0,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    _startup(app, settings)
    yield
    _shutdown(app)

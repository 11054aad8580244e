"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn restaurant_guide.main:app --reload

    # Or through the console script
    restaurant-guide
"""

from __future__ import annotations

import uvicorn

from restaurant_guide.core.config import get_settings
from restaurant_guide.factory import create_app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "restaurant_guide.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    run()

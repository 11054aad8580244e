"""Request context middleware.

Gives every request an id (propagated from ``X-Request-ID`` when the client
sends one), binds it to the logging context and logs the request outcome.
"""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from restaurant_guide.observability.logging import (
    bind_context,
    clear_context,
    get_logger,
)


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id to the log context and log each request."""

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = "X-Request-ID",
        exclude_paths: set[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.header_name = header_name
        self.exclude_paths = exclude_paths or {"/health", "/favicon.ico"}

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add request ID."""
        clear_context()

        request_id = request.headers.get(self.header_name) or uuid.uuid4().hex
        request.state.request_id = request_id
        bind_context(request_id=request_id)

        start = time.perf_counter()
        response = await call_next(request)
        response.headers[self.header_name] = request_id

        if not request.url.path.endswith(tuple(self.exclude_paths)):
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
        return response

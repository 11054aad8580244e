"""HTTP exceptions and exception handlers.

Service errors are plain exceptions raised by the stores. This module turns
them, and the HTTP-level ``AppException`` family, into one structured error
body so clients can show a notice instead of a technical message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from restaurant_guide.observability.logging import get_logger
from restaurant_guide.services.catalog.exceptions import (
    CatalogError,
    DuplicateRestaurantError,
    RestaurantNotFoundError,
)
from restaurant_guide.services.reviews.exceptions import (
    InvalidReviewError,
    ReplyNotPermittedError,
    ReviewLedgerError,
    ReviewNotFoundError,
)
from restaurant_guide.storage import StorageError


if TYPE_CHECKING:
    from fastapi import Request

logger = get_logger(__name__)


class ErrorDetail(BaseModel):
    """Structured error detail for validation errors."""

    code: str
    message: str
    field: str | None = None


class ErrorResponse(BaseModel):
    """Structured error response."""

    error: str
    message: str
    details: list[ErrorDetail] | None = None


class AppException(Exception):
    """Base HTTP-facing exception."""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: list[ErrorDetail] | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error="NOT_FOUND",
            message=f"{resource} with identifier '{identifier}' not found",
        )


class UnauthorizedException(AppException):
    """Missing identity."""

    def __init__(self, message: str = "Missing user identity") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error="UNAUTHORIZED",
            message=message,
        )


class ForbiddenException(AppException):
    """The acting user may not perform this action."""

    def __init__(self, message: str = "Insufficient permissions") -> None:
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            error="FORBIDDEN",
            message=message,
        )


class ConflictException(AppException):
    """Resource conflict exception."""

    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            error="CONFLICT",
            message=message,
        )


class BadRequestException(AppException):
    """Bad request exception."""

    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="BAD_REQUEST",
            message=message,
        )


class ServiceUnavailableException(AppException):
    """A change could not be saved."""

    def __init__(self, message: str = "Changes could not be saved") -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error="STORAGE_UNAVAILABLE",
            message=message,
        )


def to_app_exception(exc: Exception) -> AppException | None:
    """Map a service-layer error to its HTTP counterpart, if it has one."""
    if isinstance(exc, AppException):
        return exc
    if isinstance(exc, DuplicateRestaurantError):
        return ConflictException(str(exc))
    if isinstance(exc, RestaurantNotFoundError):
        return NotFoundException("Restaurant", exc.restaurant_name)
    if isinstance(exc, ReviewNotFoundError):
        return NotFoundException("Review", exc.review_id)
    if isinstance(exc, ReplyNotPermittedError):
        return ForbiddenException("Only the restaurant's owner can reply to its reviews")
    if isinstance(exc, InvalidReviewError):
        return BadRequestException(str(exc))
    if isinstance(exc, StorageError):
        return ServiceUnavailableException(
            "Your change was applied but could not be saved to disk"
        )
    return None


def _error_response(exc: AppException) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.error,
            message=exc.message,
            details=exc.details,
        ).model_dump(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        _request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        return _error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        _request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        return ORJSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error="HTTP_ERROR",
                message=str(exc.detail),
            ).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        _request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        details = [
            ErrorDetail(
                code="VALIDATION_ERROR",
                message=error["msg"],
                field=".".join(str(loc) for loc in error["loc"]),
            )
            for error in exc.errors()
        ]
        return ORJSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ErrorResponse(
                error="VALIDATION_ERROR",
                message="Request validation failed",
                details=details,
            ).model_dump(),
        )

    async def service_exception_handler(
        _request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        mapped = to_app_exception(exc)
        if mapped is None:
            raise exc
        if isinstance(exc, StorageError):
            logger.error("Persistence failed", path=str(exc.path), error=str(exc))
        return _error_response(mapped)

    # Registered per base class: the catch-all handler below runs in
    # Starlette's outermost middleware, which re-raises after responding.
    for exc_class in (CatalogError, ReviewLedgerError, StorageError):
        app.add_exception_handler(exc_class, service_exception_handler)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        _request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        logger.opt(exception=exc).error("Unhandled exception")
        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="INTERNAL_SERVER_ERROR",
                message="An unexpected error occurred",
            ).model_dump(),
        )

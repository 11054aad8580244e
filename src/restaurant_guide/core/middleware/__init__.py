"""HTTP middleware."""

from restaurant_guide.core.middleware.request_context import RequestContextMiddleware


__all__ = ["RequestContextMiddleware"]

"""Observability helpers."""

from restaurant_guide.observability.logging import get_logger, setup_logging


__all__ = ["get_logger", "setup_logging"]

"""Application lifecycle events."""

from restaurant_guide.core.events.lifespan import lifespan


__all__ = ["lifespan"]

"""Guide services: catalog, ownership, favorites and reviews."""

from restaurant_guide.services.container import GuideServices


__all__ = ["GuideServices"]

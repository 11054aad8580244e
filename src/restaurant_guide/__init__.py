"""Restaurant guide: catalog, reviews, favorites and ownership on flat files."""

__version__ = "0.1.0"

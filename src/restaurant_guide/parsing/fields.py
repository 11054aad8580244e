"""Interpretation of the catalog's free-text columns.

The guide snapshot stores the Michelin distinction, the green star and the
service flags as free text. These functions hold the matching rules in one
place so the catalog, search and import all agree on them.
"""

from __future__ import annotations


NOT_AVAILABLE = "N/A"

# Checked in order: the first group whose token appears wins.
_STAR_TOKENS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (3, ("3", "three")),
    (2, ("2", "two")),
    (1, ("1", "one", "star")),
)

_YES_VALUES = frozenset({"sì", "si"})


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def stars_from_award(award: str | None) -> int:
    """Derive the Michelin star count from the award text.

    Examples:
        >>> stars_from_award("3 Stars")
        3
        >>> stars_from_award("Bib Gourmand")
        0
        >>> stars_from_award("1 Star")
        1
    """
    if _is_blank(award) or award == NOT_AVAILABLE:
        return 0

    text = award.lower()
    for stars, tokens in _STAR_TOKENS:
        if any(token in text for token in tokens):
            return stars
    return 0


def has_green_star(green_star: str | None) -> bool:
    """True unless the value is missing, blank or ``N/A``."""
    return not _is_blank(green_star) and green_star.strip().upper() != NOT_AVAILABLE


def parse_coordinate(value: str | None) -> float:
    """Parse a longitude/latitude column; unknown values become 0.0."""
    if _is_blank(value) or value.strip().upper() == NOT_AVAILABLE:
        return 0.0
    try:
        return float(value.strip())
    except ValueError:
        return 0.0


def parse_yes_no(value: str | None) -> bool:
    """Parse the ``Sì``/``No`` service columns."""
    return value is not None and value.strip().lower() in _YES_VALUES


def format_yes_no(flag: bool) -> str:
    return "Sì" if flag else "No"

"""Parsers for the free-text fields of the restaurant catalog."""

from restaurant_guide.parsing.fields import (
    has_green_star,
    parse_coordinate,
    parse_yes_no,
    stars_from_award,
)


__all__ = [
    "has_green_star",
    "parse_coordinate",
    "parse_yes_no",
    "stars_from_award",
]

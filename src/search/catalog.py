"""Closed allow-lists and limits used by the search rules.

These values are fixed for the lifetime of the process and must remain small and deterministic.
"""

from __future__ import annotations

from enum import StrEnum


class SeatingClass(StrEnum):
    """Supported seating classes."""

    economy = "economy"
    premium_economy = "premium economy"
    business = "business"
    first = "first"


AIRPORT_CODES: frozenset[str] = frozenset({"syd", "mel", "lax", "cdg", "del", "pvg", "doh"})

SEATING_CLASSES: frozenset[str] = frozenset(c.value for c in SeatingClass)

MIN_PASSENGERS = 1
MAX_PASSENGERS = 9

# Each adult may accompany at most this many children / infants.
CHILDREN_PER_ADULT = 2
INFANTS_PER_ADULT = 1

DATE_FORMAT = "%d/%m/%Y"


def is_airport_code(value: object) -> bool:
    """Whether the value is a known airport code (exact, lowercase match)."""

    return isinstance(value, str) and value in AIRPORT_CODES


def is_seating_class(value: object) -> bool:
    """Whether the value is a known seating class (exact match)."""

    return isinstance(value, str) and value in SEATING_CLASSES

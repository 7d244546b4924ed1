"""Ordered validation rules for flight search requests.

Rules are independent predicates over the same request and are evaluated in a fixed order; the
first failing rule is reported. The order only affects which failure a caller sees, never whether
the request is accepted.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from src.search.catalog import (
    CHILDREN_PER_ADULT,
    INFANTS_PER_ADULT,
    MAX_PASSENGERS,
    MIN_PASSENGERS,
    SeatingClass,
    is_airport_code,
    is_seating_class,
)
from src.search.dates import parse_not_before, parse_search_date
from src.search.schema import ErrorKind, SearchRequest, ValidationFailure

Predicate = Callable[[SearchRequest, date], bool]


def _count(value: object) -> int | None:
    # bool is an int subclass but never a passenger count.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def _counts(request: SearchRequest) -> tuple[int, int, int] | None:
    adults = _count(request.adult_passenger_count)
    children = _count(request.child_passenger_count)
    infants = _count(request.infant_passenger_count)
    if adults is None or children is None or infants is None:
        return None
    return adults, children, infants


def _emergency_row(request: SearchRequest) -> bool | None:
    value = request.emergency_row_seating
    return value if isinstance(value, bool) else None


def passenger_total_in_range(request: SearchRequest, today: date) -> bool:
    counts = _counts(request)
    return counts is not None and MIN_PASSENGERS <= sum(counts) <= MAX_PASSENGERS


def children_accompanied(request: SearchRequest, today: date) -> bool:
    counts = _counts(request)
    if counts is None:
        return False
    adults, children, _ = counts
    return children <= CHILDREN_PER_ADULT * adults


def infants_accompanied(request: SearchRequest, today: date) -> bool:
    counts = _counts(request)
    if counts is None:
        return False
    adults, _, infants = counts
    return infants <= INFANTS_PER_ADULT * adults


def seating_class_known(request: SearchRequest, today: date) -> bool:
    return is_seating_class(request.seating_class)


def emergency_row_economy_only(request: SearchRequest, today: date) -> bool:
    emergency_row = _emergency_row(request)
    if emergency_row is None:
        return False
    return not emergency_row or request.seating_class == SeatingClass.economy


def children_seating_allowed(request: SearchRequest, today: date) -> bool:
    counts = _counts(request)
    if counts is None:
        return False
    if counts[1] == 0:
        return True
    return _emergency_row(request) is False and request.seating_class != SeatingClass.first


def infants_seating_allowed(request: SearchRequest, today: date) -> bool:
    counts = _counts(request)
    if counts is None:
        return False
    if counts[2] == 0:
        return True
    return _emergency_row(request) is False and request.seating_class != SeatingClass.business


def airports_valid(request: SearchRequest, today: date) -> bool:
    departure = request.departure_airport_code
    destination = request.destination_airport_code
    return is_airport_code(departure) and is_airport_code(destination) and departure != destination


def departure_date_valid(request: SearchRequest, today: date) -> bool:
    return parse_not_before(request.departure_date, today) is not None


def return_date_valid(request: SearchRequest, today: date) -> bool:
    departure = parse_search_date(request.departure_date)
    if departure is None:
        return False
    return parse_not_before(request.return_date, departure) is not None


@dataclass(frozen=True)
class Rule:
    """A named predicate and the failure it reports."""

    name: str
    kind: ErrorKind
    message: str
    predicate: Predicate

    def failure(self) -> ValidationFailure:
        return ValidationFailure(kind=self.kind, rule=self.name, message=self.message)


RULES: tuple[Rule, ...] = (
    Rule(
        "passenger_total",
        ErrorKind.passenger_count,
        f"total passengers must be between {MIN_PASSENGERS} and {MAX_PASSENGERS}",
        passenger_total_in_range,
    ),
    Rule(
        "child_ratio",
        ErrorKind.passenger_count,
        f"at most {CHILDREN_PER_ADULT} children per adult",
        children_accompanied,
    ),
    Rule(
        "infant_ratio",
        ErrorKind.passenger_count,
        f"at most {INFANTS_PER_ADULT} infant per adult",
        infants_accompanied,
    ),
    Rule(
        "seating_class",
        ErrorKind.seating_restriction,
        "unknown seating class",
        seating_class_known,
    ),
    Rule(
        "emergency_row",
        ErrorKind.seating_restriction,
        "emergency row seating is only available in economy",
        emergency_row_economy_only,
    ),
    Rule(
        "child_seating",
        ErrorKind.seating_restriction,
        "children cannot sit in emergency rows or first class",
        children_seating_allowed,
    ),
    Rule(
        "infant_seating",
        ErrorKind.seating_restriction,
        "infants cannot sit in emergency rows or business class",
        infants_seating_allowed,
    ),
    Rule(
        "airports",
        ErrorKind.airport,
        "airport codes must be known and different",
        airports_valid,
    ),
    Rule(
        "departure_date",
        ErrorKind.date,
        "departure date must be a valid dd/mm/yyyy date, not in the past",
        departure_date_valid,
    ),
    Rule(
        "return_date",
        ErrorKind.date,
        "return date must be a valid dd/mm/yyyy date, not before departure",
        return_date_valid,
    ),
)


def check_request(request: SearchRequest, today: date) -> ValidationFailure | None:
    """Evaluate every rule in order.

    Returns:
        The first failure, or `None` if the request satisfies all rules.
    """

    for rule in RULES:
        if not rule.predicate(request, today):
            return rule.failure()
    return None

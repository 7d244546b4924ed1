"""Request validator: all-or-nothing check-then-commit.

A `RequestValidator` holds at most one committed search. A call either leaves it untouched
(rejection) or replaces it wholesale with a new immutable record (acceptance).
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from src.search.clock import Clock, SystemClock
from src.search.rules import check_request
from src.search.schema import CommittedSearch, SearchRequest, ValidationResult

logger = logging.getLogger(__name__)


class RequestValidator:
    """Validate flight search requests and hold the last accepted one."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or SystemClock()
        self._lock = threading.Lock()
        self._committed: CommittedSearch | None = None

    def validate(
            self,
            departure_date: Any,
            departure_airport_code: Any,
            emergency_row_seating: Any,
            return_date: Any,
            destination_airport_code: Any,
            seating_class: Any,
            adult_passenger_count: Any,
            child_passenger_count: Any,
            infant_passenger_count: Any,
    ) -> bool:
        """Validate the nine search fields; commit them only if every rule passes."""

        request = SearchRequest(
            departure_date=departure_date,
            departure_airport_code=departure_airport_code,
            emergency_row_seating=emergency_row_seating,
            return_date=return_date,
            destination_airport_code=destination_airport_code,
            seating_class=seating_class,
            adult_passenger_count=adult_passenger_count,
            child_passenger_count=child_passenger_count,
            infant_passenger_count=infant_passenger_count,
        )
        return self.validate_request(request)

    def validate_request(self, request: SearchRequest) -> bool:
        return self.check(request).ok

    def check(self, request: SearchRequest) -> ValidationResult:
        """Validate a request and report the first failing rule, if any.

        The committed search is replaced only when the returned result is ok.
        """

        with self._lock:
            failure = check_request(request, self._clock.today())
            if failure is not None:
                logger.debug("search rejected rule=%s kind=%s", failure.rule, failure.kind)
                return ValidationResult(failure=failure)

            committed = CommittedSearch.from_request(request)
            self._committed = committed
            logger.debug(
                "search committed %s -> %s on %s",
                committed.departure_airport_code,
                committed.destination_airport_code,
                committed.departure_date,
            )
            return ValidationResult(committed=committed)

    def reset(self) -> None:
        """Forget the committed search."""

        with self._lock:
            self._committed = None

    @property
    def committed(self) -> CommittedSearch | None:
        return self._committed

    def _field(self, name: str) -> Any:
        committed = self._committed
        return None if committed is None else getattr(committed, name)

    @property
    def departure_date(self) -> str | None:
        return self._field("departure_date")

    @property
    def departure_airport_code(self) -> str | None:
        return self._field("departure_airport_code")

    @property
    def emergency_row_seating(self) -> bool | None:
        return self._field("emergency_row_seating")

    @property
    def return_date(self) -> str | None:
        return self._field("return_date")

    @property
    def destination_airport_code(self) -> str | None:
        return self._field("destination_airport_code")

    @property
    def seating_class(self) -> str | None:
        return self._field("seating_class")

    @property
    def adult_passenger_count(self) -> int | None:
        return self._field("adult_passenger_count")

    @property
    def child_passenger_count(self) -> int | None:
        return self._field("child_passenger_count")

    @property
    def infant_passenger_count(self) -> int | None:
        return self._field("infant_passenger_count")

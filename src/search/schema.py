"""Flight search data model.

`SearchRequest` carries raw, unchecked input. `CommittedSearch` is the immutable record a
validator holds once a request has passed every rule; it is never built from a rejected request.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.search.catalog import SeatingClass
from src.search.dates import parse_search_date


class ErrorKind(StrEnum):
    """Families of validation failures."""

    passenger_count = "passenger_count"
    seating_restriction = "seating_restriction"
    airport = "airport"
    date = "date"


@dataclass(frozen=True)
class SearchRequest:
    """The nine raw inputs of a prospective flight search.

    No type or range checking happens here: any field may be `None` or malformed, and the rules
    treat such values as an ordinary rejection.
    """

    departure_date: Any = None
    departure_airport_code: Any = None
    emergency_row_seating: Any = False
    return_date: Any = None
    destination_airport_code: Any = None
    seating_class: Any = None
    adult_passenger_count: Any = None
    child_passenger_count: Any = None
    infant_passenger_count: Any = None


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


REQUEST_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(SearchRequest))


def request_from_obj(obj: Mapping[str, Any]) -> SearchRequest:
    """Build a request from a decoded mapping (snake_case or camelCase keys).

    Missing keys become `None`; unknown keys are ignored.
    """

    values: dict[str, Any] = {}
    for name in REQUEST_FIELDS:
        if name in obj:
            values[name] = obj[name]
        else:
            values[name] = obj.get(_camel(name))
    return SearchRequest(**values)


class CommittedSearch(BaseModel):
    """A fully validated flight search."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    departure_date: str
    departure_airport_code: str
    emergency_row_seating: bool
    return_date: str
    destination_airport_code: str
    seating_class: str
    adult_passenger_count: int = Field(ge=0)
    child_passenger_count: int = Field(ge=0)
    infant_passenger_count: int = Field(ge=0)

    @classmethod
    def from_request(cls, request: SearchRequest) -> CommittedSearch:
        """Copy an already-accepted request into a committed record."""

        values = {name: getattr(request, name) for name in REQUEST_FIELDS}
        values["seating_class"] = SeatingClass(values["seating_class"]).value
        return cls(**values)

    @property
    def departure_day(self) -> date:
        day = parse_search_date(self.departure_date)
        assert day is not None
        return day

    @property
    def return_day(self) -> date:
        day = parse_search_date(self.return_date)
        assert day is not None
        return day

    @property
    def total_passengers(self) -> int:
        return self.adult_passenger_count + self.child_passenger_count + self.infant_passenger_count


@dataclass(frozen=True)
class ValidationFailure:
    """The first rule a rejected request broke."""

    kind: ErrorKind
    rule: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation call: exactly one of `committed` / `failure` is set."""

    committed: CommittedSearch | None = None
    failure: ValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.committed is not None

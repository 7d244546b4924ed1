"""Pytest configuration.

The repository uses a flat `src/` layout. This conftest ensures tests can import from the `src.*`
namespace when running `pytest` without installing the package, and pins "today" for every test.
"""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from src.search.clock import FixedClock  # noqa: E402
from src.search.dates import format_search_date  # noqa: E402
from src.search.schema import SearchRequest  # noqa: E402
from src.search.validator import RequestValidator  # noqa: E402

TODAY = date(2026, 3, 10)
TOMORROW = TODAY + timedelta(days=1)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def validator(clock: FixedClock) -> RequestValidator:
    return RequestValidator(clock=clock)


def make_request(**overrides: object) -> SearchRequest:
    """A request that passes every rule, with selected fields replaced."""

    values: dict[str, object] = {
        "departure_date": format_search_date(TOMORROW),
        "departure_airport_code": "syd",
        "emergency_row_seating": False,
        "return_date": format_search_date(TOMORROW + timedelta(days=7)),
        "destination_airport_code": "mel",
        "seating_class": "economy",
        "adult_passenger_count": 1,
        "child_passenger_count": 2,
        "infant_passenger_count": 1,
    }
    values.update(overrides)
    return SearchRequest(**values)

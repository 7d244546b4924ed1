"""Strict `dd/mm/yyyy` date parsing.

Parsing never normalizes out-of-range values: `29/02/2025` or `31/04/2026` are rejected rather
than rolled over to a nearby valid day.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from src.search.catalog import DATE_FORMAT

_DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}")


def parse_search_date(value: object) -> date | None:
    """Parse a `dd/mm/yyyy` date.

    Returns:
        The calendar date, or `None` if the value is not a non-blank string in the exact format
        or names a day that does not exist.
    """

    if not isinstance(value, str) or not value.strip():
        return None
    if not _DATE_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def format_search_date(day: date) -> str:
    """Format a date as `dd/mm/yyyy`."""

    return day.strftime(DATE_FORMAT)


def parse_not_before(value: object, earliest: date) -> date | None:
    """Parse a date and require it to be on or after `earliest`."""

    day = parse_search_date(value)
    if day is None or day < earliest:
        return None
    return day

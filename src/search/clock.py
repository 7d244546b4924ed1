"""Clock abstraction for "today".

The current date is the only ambient input to validation, so it is always passed in through a
`Clock` rather than read from the system inside the rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current calendar date."""

    def today(self) -> date: ...


@dataclass(frozen=True)
class SystemClock:
    """Current date from the system clock, in local time or the given IANA zone."""

    tz: str | None = None

    def today(self) -> date:
        if self.tz is None:
            return date.today()
        return datetime.now(ZoneInfo(self.tz)).date()


@dataclass(frozen=True)
class FixedClock:
    """A clock frozen on a single day."""

    day: date

    def today(self) -> date:
        return self.day

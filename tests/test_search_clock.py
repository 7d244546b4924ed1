"""Tests for the clock implementations."""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from src.search.clock import FixedClock, SystemClock


def test_fixed_clock() -> None:
    assert FixedClock(date(2026, 3, 10)).today() == date(2026, 3, 10)


def test_system_clock_in_zone() -> None:
    zone = ZoneInfo("Pacific/Kiritimati")
    before = datetime.now(zone).date()
    got = SystemClock(tz="Pacific/Kiritimati").today()
    assert before <= got <= datetime.now(zone).date()


def test_system_clock_local() -> None:
    before = date.today()
    got = SystemClock().today()
    assert before <= got <= date.today()

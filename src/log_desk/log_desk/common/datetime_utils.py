from __future__ import annotations

from datetime import date, datetime
from typing import Protocol


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def shift_years(value: date, years: int) -> date:
    """Same month/day `years` away; Feb 29 rolls over to Mar 1 when missing."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return date(value.year + years, 3, 1)


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Local wall clock (no timezone handling)."""

    def now(self) -> datetime:
        return now_local()

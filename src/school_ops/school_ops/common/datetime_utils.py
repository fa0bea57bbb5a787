from __future__ import annotations

import calendar
from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_day_string(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_epoch_ms() -> int:
    return int(now_local().timestamp() * 1000)


def days_in_month(year: int, month0: int) -> int:
    return calendar.monthrange(year, month0 + 1)[1]


def first_weekday_sunday_based(year: int, month0: int) -> int:
    """Weekday of day 1 with 0 = Sunday ... 6 = Saturday."""
    return (date(year, month0 + 1, 1).weekday() + 1) % 7


def shift_month(year: int, month0: int, delta: int) -> tuple[int, int]:
    """Shift a (year, 0-based month) pair, wrapping across year boundaries."""
    total = year * 12 + month0 + delta
    return total // 12, total % 12

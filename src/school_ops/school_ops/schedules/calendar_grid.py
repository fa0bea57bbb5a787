"""Month grid for the scheduling calendar.

Cells are laid out in Sunday-first weekday columns: the grid starts with one
``None`` per weekday before day 1.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import days_in_month, first_weekday_sunday_based, shift_month
from .model import Appointment, DayCell, MonthCursor, MonthView


def build_month_grid(year: int, month0: int) -> list[Optional[int]]:
    leading: list[Optional[int]] = [None] * first_weekday_sunday_based(year, month0)
    return leading + list(range(1, days_in_month(year, month0) + 1))


def day_string(year: int, month0: int, day: int) -> str:
    return f"{year:04d}-{month0 + 1:02d}-{day:02d}"


def month_day_strings(year: int, month0: int) -> list[str]:
    return [day_string(year, month0, d) for d in range(1, days_in_month(year, month0) + 1)]


def previous_month(cursor: MonthCursor) -> MonthCursor:
    return MonthCursor(*shift_month(cursor.year, cursor.month0, -1))


def next_month(cursor: MonthCursor) -> MonthCursor:
    return MonthCursor(*shift_month(cursor.year, cursor.month0, 1))


def count_by_date(appointments: Iterable[Appointment]) -> Counter:
    return Counter(a.date for a in appointments)


def annotate_month(cursor: MonthCursor, counts: Mapping[str, int]) -> MonthView:
    cells: list[Optional[DayCell]] = []
    for day in build_month_grid(cursor.year, cursor.month0):
        if day is None:
            cells.append(None)
            continue
        date = day_string(cursor.year, cursor.month0, day)
        cells.append(DayCell(day=day, date=date, appointment_count=int(counts.get(date, 0))))
    return MonthView(cursor=cursor, cells=tuple(cells))

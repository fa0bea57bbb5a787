from __future__ import annotations

import calendar

import pytest

from src.school_ops.school_ops.common.datetime_utils import first_weekday_sunday_based
from src.school_ops.school_ops.schedules.calendar_grid import (
    annotate_month,
    build_month_grid,
    month_day_strings,
    next_month,
    previous_month,
)
from src.school_ops.school_ops.schedules.model import MonthCursor


def test_february_2024_leap_year():
    grid = build_month_grid(2024, 1)

    assert grid[:4] == [None, None, None, None]
    assert grid[4:] == list(range(1, 30))
    assert len(grid) == 33


@pytest.mark.parametrize("year", [1999, 2000, 2023, 2024, 2100])
def test_grid_length_matches_leading_blanks_plus_days(year):
    for month0 in range(12):
        grid = build_month_grid(year, month0)
        leading = first_weekday_sunday_based(year, month0)
        assert len(grid) == leading + calendar.monthrange(year, month0 + 1)[1]
        assert grid.count(None) == leading


def test_sunday_first_month_has_no_blanks():
    # 2026-03-01 is a Sunday.
    assert build_month_grid(2026, 2)[0] == 1


def test_grid_is_idempotent():
    assert build_month_grid(2025, 11) == build_month_grid(2025, 11)


def test_month_navigation_wraps_years():
    assert previous_month(MonthCursor(2026, 0)) == MonthCursor(2025, 11)
    assert next_month(MonthCursor(2025, 11)) == MonthCursor(2026, 0)
    assert next_month(MonthCursor(2026, 4)) == MonthCursor(2026, 5)


def test_day_strings_are_zero_padded():
    days = month_day_strings(2026, 8)

    assert days[0] == "2026-09-01"
    assert days[-1] == "2026-09-30"


def test_annotate_month_counts_per_day():
    view = annotate_month(MonthCursor(2024, 1), {"2024-02-01": 2, "2024-02-29": 1, "2024-03-01": 5})

    cells = [c for c in view.cells if c is not None]
    assert view.cells[:4] == (None, None, None, None)
    assert cells[0].appointment_count == 2
    assert cells[-1].date == "2024-02-29"
    assert cells[-1].appointment_count == 1
    assert sum(c.appointment_count for c in cells) == 3

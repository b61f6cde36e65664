from __future__ import annotations

from datetime import date, timedelta

import pytest

from swimmg.application.use_cases.calendar_grid import (
    GRID_SIZE,
    CalendarGridBuilder,
    grid_start,
    weekday_order,
)
from swimmg.domain.entities.calendar_month import CalendarMonth, Weekday
from swimmg.domain.entities.grid_cell import DayCell, EmptyCell
from swimmg.domain.exceptions import InvalidArgument

MONTHS = [CalendarMonth(year, month) for year in (2023, 2024, 2025, 2026) for month in range(1, 13)]


def test_march_2025_sunday_start():
    """Grid for March 2025 runs from Sun Feb 23 to Sat Apr 5."""
    start = grid_start(CalendarMonth(2025, 3), Weekday.SUNDAY)
    cells = CalendarGridBuilder().build(CalendarMonth(2025, 3), Weekday.SUNDAY)

    assert start == date(2025, 2, 23)
    assert start + timedelta(days=GRID_SIZE - 1) == date(2025, 4, 5)
    # March 1 2025 is a Saturday
    assert cells[:6] == [EmptyCell()] * 6
    assert cells[6] == DayCell(date(2025, 3, 1))
    assert cells[7] == DayCell(date(2025, 3, 2))
    assert cells[36] == DayCell(date(2025, 3, 31))
    assert cells[37:] == [EmptyCell()] * 5


@pytest.mark.parametrize("week_start", [Weekday.SUNDAY, Weekday.MONDAY])
@pytest.mark.parametrize("month", MONTHS, ids=str)
def test_grid_shape_and_alignment(month, week_start):
    cells = CalendarGridBuilder().build(month, week_start)

    assert len(cells) == 42
    day_indexes = [i for i, cell in enumerate(cells) if isinstance(cell, DayCell)]
    assert len(day_indexes) == month.days_in_month

    first_index = day_indexes[0]
    first_day = cells[first_index].date
    assert first_day == month.first_day
    assert (first_day - timedelta(days=first_index)).weekday() == week_start

    # Day cells are consecutive and in order
    dates = [cells[i].date for i in day_indexes]
    assert day_indexes == list(range(first_index, first_index + len(dates)))
    assert dates == [month.first_day + timedelta(days=n) for n in range(len(dates))]


def test_first_of_month_on_week_start_has_no_leading_padding():
    # June 1 2025 is a Sunday
    cells = CalendarGridBuilder().build(CalendarMonth(2025, 6), Weekday.SUNDAY)
    assert cells[0] == DayCell(date(2025, 6, 1))


def test_february_in_leap_year():
    cells = CalendarGridBuilder().build(CalendarMonth(2024, 2), "monday")
    days = [cell.date for cell in cells if isinstance(cell, DayCell)]
    assert days[-1] == date(2024, 2, 29)
    # Feb 1 2024 is a Thursday
    assert cells[3] == DayCell(date(2024, 2, 1))


def test_build_returns_fresh_lists():
    builder = CalendarGridBuilder()
    first = builder.build(CalendarMonth(2025, 3), Weekday.SUNDAY)
    first.clear()
    second = builder.build(CalendarMonth(2025, 3), Weekday.SUNDAY)
    assert len(second) == 42


def test_weekday_order():
    assert weekday_order(Weekday.SUNDAY) == [
        Weekday.SUNDAY,
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
        Weekday.SATURDAY,
    ]
    assert weekday_order("monday")[0] is Weekday.MONDAY
    assert weekday_order("monday")[-1] is Weekday.SUNDAY


def test_invalid_inputs_raise_invalid_argument():
    builder = CalendarGridBuilder()
    with pytest.raises(InvalidArgument):
        builder.build((2025, 3), Weekday.SUNDAY)
    with pytest.raises(InvalidArgument):
        builder.build(CalendarMonth(2025, 3), "someday")


def test_months_at_calendar_edges_raise_invalid_argument():
    builder = CalendarGridBuilder()
    with pytest.raises(InvalidArgument):
        builder.build(CalendarMonth(9999, 12), Weekday.SUNDAY)
    # Jan 1, year 1 is a Monday; a Sunday grid would start before it
    with pytest.raises(InvalidArgument):
        builder.build(CalendarMonth(1, 1), Weekday.SUNDAY)

from __future__ import annotations

from datetime import date, timedelta
from functools import lru_cache

from swimmg.domain.entities.calendar_month import CalendarMonth, Weekday
from swimmg.domain.entities.grid_cell import DayCell, EmptyCell, GridCell
from swimmg.domain.exceptions import InvalidArgument

GRID_WEEKS = 6
DAYS_PER_WEEK = 7
GRID_SIZE = GRID_WEEKS * DAYS_PER_WEEK


def weekday_order(week_starts_on: Weekday | str | int) -> list[Weekday]:
    """Weekdays in grid column order for the given week start."""
    start = Weekday.parse(week_starts_on)
    return [Weekday((start + i) % DAYS_PER_WEEK) for i in range(DAYS_PER_WEEK)]


def grid_start(month: CalendarMonth, week_starts_on: Weekday | str | int) -> date:
    """First date shown in the grid: the week-start day on or before the 1st."""
    start = Weekday.parse(week_starts_on)
    first = month.first_day
    offset = (first.weekday() - start) % DAYS_PER_WEEK
    try:
        return first - timedelta(days=offset)
    except OverflowError as e:
        raise InvalidArgument(f"{month} is outside the supported calendar range") from e


@lru_cache(maxsize=128)
def _build_grid(month: CalendarMonth, week_starts_on: Weekday) -> tuple[GridCell, ...]:
    first = grid_start(month, week_starts_on)
    cells: list[GridCell] = []
    for offset in range(GRID_SIZE):
        try:
            day = first + timedelta(days=offset)
        except OverflowError as e:
            raise InvalidArgument(f"{month} is outside the supported calendar range") from e
        cells.append(DayCell(day) if month.contains(day) else EmptyCell())
    return tuple(cells)


class CalendarGridBuilder:
    """Builds the 6x7 month grid shown on the booking screen.

    Only dates are involved (no time of day), so daylight-saving changes can
    never shift a cell. Grids are cached per (month, week start).
    """

    def build(self, reference_month: CalendarMonth, week_starts_on: Weekday | str | int) -> list[GridCell]:
        if not isinstance(reference_month, CalendarMonth):
            raise InvalidArgument(f"Expected CalendarMonth, got {reference_month!r}")
        return list(_build_grid(reference_month, Weekday.parse(week_starts_on)))

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum

from swimmg.domain.exceptions import InvalidArgument


class Weekday(IntEnum):
    # Numbered like date.weekday()
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: "str | int | Weekday") -> "Weekday":
        """Accept a Weekday, a 0-6 index or a case-insensitive English name."""
        if isinstance(value, Weekday):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidArgument(f"Weekday index out of range: {value!r}") from e
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError as e:
                raise InvalidArgument(f"Unknown weekday: {value!r}") from e
        raise InvalidArgument(f"Unsupported weekday value: {value!r}")


@dataclass(frozen=True, order=True)
class CalendarMonth:
    year: int
    month: int

    def __post_init__(self) -> None:
        for name in ("year", "month"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidArgument(f"CalendarMonth.{name} must be an int, got {value!r}")
        if not 1 <= self.month <= 12:
            raise InvalidArgument(f"Month out of range: {self.month}")
        if not 1 <= self.year <= 9999:
            raise InvalidArgument(f"Year out of range: {self.year}")

    @classmethod
    def from_date(cls, value: date) -> CalendarMonth:
        return cls(value.year, value.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    def contains(self, value: date) -> bool:
        if isinstance(value, datetime):
            value = value.date()
        return self.first_day <= value <= self.last_day

    def shifted(self, delta: int) -> CalendarMonth:
        """Return the month `delta` months away (negative goes back)."""
        year, month_index = divmod(self.year * 12 + self.month - 1 + delta, 12)
        return CalendarMonth(year, month_index + 1)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

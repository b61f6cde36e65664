from __future__ import annotations

from datetime import date, datetime

from swimmg.application.ports.locale import LocalePort
from swimmg.application.use_cases.calendar_grid import weekday_order
from swimmg.domain.entities.calendar_month import CalendarMonth, Weekday

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
SHORT_MONTH_NAMES = tuple(name[:3] for name in MONTH_NAMES)
SHORT_WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class EnglishLocale(LocalePort):
    """en-US style labels, independent of the process locale."""

    def __init__(self, week_starts_on: Weekday | str | int = Weekday.SUNDAY) -> None:
        self._week_starts_on = Weekday.parse(week_starts_on)

    @property
    def week_starts_on(self) -> Weekday:
        return self._week_starts_on

    def month_title(self, month: CalendarMonth) -> str:
        return f"{MONTH_NAMES[month.month - 1]} {month.year}"

    def day_label(self, value: date) -> str:
        return str(value.day)

    def weekday_symbols(self) -> list[str]:
        return [SHORT_WEEKDAY_NAMES[day] for day in weekday_order(self._week_starts_on)]

    def slot_label(self, value: datetime) -> str:
        hour = value.hour % 12 or 12
        suffix = "AM" if value.hour < 12 else "PM"
        return f"{hour}:{value.minute:02d} {suffix}"

    def confirmation_prompt(self, value: datetime) -> str:
        date_str = f"{SHORT_MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"
        return f"Book on {date_str} at {self.slot_label(value)}?"

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime

from swimmg.domain.entities.calendar_month import CalendarMonth, Weekday


class LocalePort(ABC):
    @property
    @abstractmethod
    def week_starts_on(self) -> Weekday:
        raise NotImplementedError

    @abstractmethod
    def month_title(self, month: CalendarMonth) -> str:
        """Header above the grid, e.g. "March 2025"."""
        raise NotImplementedError

    @abstractmethod
    def day_label(self, value: date) -> str:
        raise NotImplementedError

    @abstractmethod
    def weekday_symbols(self) -> list[str]:
        """Short weekday names in grid column order."""
        raise NotImplementedError

    @abstractmethod
    def slot_label(self, value: datetime) -> str:
        raise NotImplementedError

    @abstractmethod
    def confirmation_prompt(self, value: datetime) -> str:
        raise NotImplementedError

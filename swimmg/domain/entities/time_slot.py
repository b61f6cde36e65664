from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from swimmg.domain.exceptions import InvalidArgument

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class OperatingHours:
    start_hour: int  # inclusive
    end_hour: int  # inclusive, last slot starts here
    slot_duration_minutes: int = 60

    def __post_init__(self) -> None:
        for name in ("start_hour", "end_hour", "slot_duration_minutes"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidArgument(f"OperatingHours.{name} must be an int, got {value!r}")
        if not 0 <= self.start_hour <= 23:
            raise InvalidArgument(f"start_hour out of range: {self.start_hour}")
        if not 0 <= self.end_hour <= 23:
            raise InvalidArgument(f"end_hour out of range: {self.end_hour}")
        if self.start_hour > self.end_hour:
            raise InvalidArgument(
                f"start_hour ({self.start_hour}) must not be after end_hour ({self.end_hour})"
            )
        if not 0 < self.slot_duration_minutes <= MINUTES_PER_DAY:
            raise InvalidArgument(f"slot_duration_minutes out of range: {self.slot_duration_minutes}")


@dataclass(frozen=True)
class TimeSlot:
    start: datetime
    duration_minutes: int = 60
    available: bool = True

    @property
    def end(self) -> datetime:
        return self.start + timedelta(minutes=self.duration_minutes)

    @property
    def date(self) -> date:
        return self.start.date()

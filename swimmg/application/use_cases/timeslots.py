from __future__ import annotations

from collections.abc import Collection
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from swimmg.domain.entities.time_slot import OperatingHours, TimeSlot
from swimmg.domain.exceptions import InvalidArgument


class TimeslotProvider:
    """Lists the lesson slots offered on a date.

    Existing bookings are not consulted here; the submission port decides at
    confirmation time. Starts passed in `unavailable` are still listed, with
    available=False.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz

    def slots_for(
        self,
        lesson_date: date | None,
        operating_hours: OperatingHours,
        unavailable: Collection[datetime] = (),
    ) -> list[TimeSlot]:
        if not isinstance(operating_hours, OperatingHours):
            raise InvalidArgument(f"Expected OperatingHours, got {operating_hours!r}")
        if lesson_date is None:
            return []
        if isinstance(lesson_date, datetime):
            lesson_date = lesson_date.date()

        # Wall-clock offsets from local midnight
        midnight = datetime.combine(lesson_date, time.min, tzinfo=self._tz)
        duration = operating_hours.slot_duration_minutes
        first_minute = operating_hours.start_hour * 60
        last_minute = operating_hours.end_hour * 60

        slots: list[TimeSlot] = []
        for minute in range(first_minute, last_minute + 1, duration):
            start = midnight + timedelta(minutes=minute)
            if self._tz is not None and not _exists(start, self._tz):
                # Skipped by a spring-forward transition
                continue
            slots.append(
                TimeSlot(
                    start=start,
                    duration_minutes=duration,
                    available=start not in unavailable,
                )
            )
        return slots


def _exists(start: datetime, tz: tzinfo) -> bool:
    round_trip = start.astimezone(timezone.utc).astimezone(tz)
    return round_trip.replace(tzinfo=None) == start.replace(tzinfo=None)

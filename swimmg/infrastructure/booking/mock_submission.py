from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from datetime import date, datetime

from swimmg.application.exceptions import SlotNoLongerAvailable, SubmissionError, UnknownSubmissionError
from swimmg.application.ports.booking_submission import BookingSubmissionPort


class MockBookingSubmission(BookingSubmissionPort):
    def __init__(
        self,
        booked: Iterable[datetime] = (),
        delay_seconds: float = 0.0,
    ) -> None:
        self._booked: set[datetime] = set(booked)
        self._bookings: dict[str, datetime] = {}
        self._next_error: SubmissionError | None = None
        self._delay_seconds = delay_seconds
        self.calls: list[tuple[date, datetime]] = []
        self._logger = logging.getLogger(__name__)

    @property
    def bookings(self) -> dict[str, datetime]:
        return dict(self._bookings)

    def fail_next(self, error: SubmissionError) -> None:
        """Make the next submit() raise `error` once."""
        self._next_error = error

    async def submit(self, lesson_date: date, slot_start: datetime) -> str:
        self.calls.append((lesson_date, slot_start))
        if self._delay_seconds:
            await asyncio.sleep(self._delay_seconds)

        if self._next_error is not None:
            error, self._next_error = self._next_error, None
            raise error
        if slot_start.date() != lesson_date:
            raise UnknownSubmissionError(f"Slot {slot_start.isoformat()} is not on {lesson_date.isoformat()}")
        if slot_start in self._booked:
            raise SlotNoLongerAvailable(f"Slot {slot_start.isoformat()} is already booked")

        booking_id = f"mock_booking_{len(self._bookings) + 1}"
        self._booked.add(slot_start)
        self._bookings[booking_id] = slot_start
        self._logger.info(
            "Mock booking created",
            extra={"booking_id": booking_id, "slot": slot_start.isoformat()},
        )
        return booking_id

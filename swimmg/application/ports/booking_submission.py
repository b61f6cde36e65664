from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime


class BookingSubmissionPort(ABC):
    @abstractmethod
    async def submit(self, lesson_date: date, slot_start: datetime) -> str:
        """Persist a confirmed booking. Returns booking_id.

        Raises a SubmissionError subclass (SlotNoLongerAvailable,
        NetworkUnavailable, Unauthorized, UnknownSubmissionError) on failure.
        """
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum

from swimmg.domain.entities.calendar_month import CalendarMonth
from swimmg.domain.entities.time_slot import TimeSlot
from swimmg.domain.exceptions import InvalidArgument


class SelectionPhase(str, Enum):
    BROWSING = "browsing"
    DATE_CHOSEN = "date_chosen"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (SelectionPhase.CONFIRMED, SelectionPhase.CANCELLED)


class SubmissionErrorKind(str, Enum):
    SLOT_NO_LONGER_AVAILABLE = "slot_no_longer_available"
    NETWORK_UNAVAILABLE = "network_unavailable"
    UNAUTHORIZED = "unauthorized"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class BookingFailure:
    kind: SubmissionErrorKind
    message: str  # user-visible


@dataclass
class BookingSelection:
    reference_month: CalendarMonth
    selected_date: date | None = None
    selected_slot: TimeSlot | None = None
    phase: SelectionPhase = SelectionPhase.BROWSING
    failure: BookingFailure | None = None
    booking_id: str | None = None

    def choose_date(self, value: date) -> None:
        self.selected_date = value
        self.selected_slot = None

    def choose_slot(self, slot: TimeSlot) -> None:
        # A slot only ever belongs to the selected date
        if self.selected_date is None or slot.date != self.selected_date:
            raise InvalidArgument("slot must fall on the selected date")
        self.selected_slot = slot

    def clear_slot(self) -> None:
        self.selected_slot = None

    def snapshot(self) -> BookingSelection:
        return replace(self)

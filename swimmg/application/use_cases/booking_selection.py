from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import date, datetime

from swimmg.application.exceptions import (
    InvalidArgument,
    InvalidTransition,
    StaleSelection,
    SubmissionError,
)
from swimmg.application.ports.booking_submission import BookingSubmissionPort
from swimmg.application.ports.clock import ClockPort
from swimmg.application.ports.locale import LocalePort
from swimmg.application.use_cases.calendar_grid import CalendarGridBuilder
from swimmg.application.use_cases.timeslots import TimeslotProvider
from swimmg.domain.entities.booking_selection import (
    BookingFailure,
    BookingSelection,
    SelectionPhase,
    SubmissionErrorKind,
)
from swimmg.domain.entities.calendar_month import CalendarMonth, Weekday
from swimmg.domain.entities.grid_cell import GridCell
from swimmg.domain.entities.time_slot import OperatingHours, TimeSlot

SelectionListener = Callable[[BookingSelection], None]

FAILURE_MESSAGES = {
    SubmissionErrorKind.SLOT_NO_LONGER_AVAILABLE: "That time was just booked. Please pick another slot.",
    SubmissionErrorKind.NETWORK_UNAVAILABLE: "We couldn't reach the booking service. Check your connection and try again.",
    SubmissionErrorKind.UNAUTHORIZED: "Your session has expired. Please sign in again and retry.",
    SubmissionErrorKind.UNKNOWN: "Something went wrong while booking. Please try again.",
}

DATE_PICKABLE = (SelectionPhase.BROWSING, SelectionPhase.DATE_CHOSEN, SelectionPhase.FAILED)
CANCELLABLE = (SelectionPhase.AWAITING_CONFIRMATION, SelectionPhase.FAILED)


class BookingSelectionController:
    """Drives one booking flow: month navigation, date pick, slot pick, confirmation.

    The controller is the single owner of the BookingSelection. Every event
    either moves it through the phase table or raises InvalidTransition; while
    a submission is in flight, selection events are ignored (and logged) and
    return False. Listeners receive a snapshot after each change.
    """

    def __init__(
        self,
        submission: BookingSubmissionPort,
        clock: ClockPort,
        locale: LocalePort,
        operating_hours: OperatingHours,
        grid_builder: CalendarGridBuilder | None = None,
        slot_provider: TimeslotProvider | None = None,
    ) -> None:
        self._submission = submission
        self._clock = clock
        self._locale = locale
        self._operating_hours = operating_hours
        self._grid_builder = grid_builder or CalendarGridBuilder()
        self._slot_provider = slot_provider or TimeslotProvider()
        self._selection = BookingSelection(reference_month=CalendarMonth.from_date(clock.today()))
        self._rejected_starts: set[datetime] = set()
        self._listeners: list[SelectionListener] = []
        self._logger = logging.getLogger(__name__)

    # Queries

    @property
    def selection(self) -> BookingSelection:
        return self._selection.snapshot()

    @property
    def phase(self) -> SelectionPhase:
        return self._selection.phase

    @property
    def week_starts_on(self) -> Weekday:
        return self._locale.week_starts_on

    @property
    def today(self) -> date:
        return self._clock.today()

    @property
    def is_confirmation_visible(self) -> bool:
        return self._selection.phase == SelectionPhase.AWAITING_CONFIRMATION

    @property
    def controls_enabled(self) -> bool:
        phase = self._selection.phase
        return phase != SelectionPhase.SUBMITTING and not phase.is_terminal

    def grid(self) -> list[GridCell]:
        return self._grid_builder.build(self._selection.reference_month, self.week_starts_on)

    def slots(self) -> list[TimeSlot]:
        return self._slot_provider.slots_for(
            self._selection.selected_date,
            self._operating_hours,
            unavailable=self._rejected_starts,
        )

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Events

    def navigate_month(self, delta: int = 1) -> CalendarMonth:
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise InvalidArgument(f"Month delta must be an int, got {delta!r}")
        self._selection.reference_month = self._selection.reference_month.shifted(delta)
        self._changed("navigate_month")
        return self._selection.reference_month

    def pick_date(self, value: date) -> bool:
        if self._ignored_while_submitting("pick_date"):
            return False
        self._require("pick_date", *DATE_PICKABLE)
        if isinstance(value, datetime):
            value = value.date()
        if not isinstance(value, date):
            raise InvalidArgument(f"Expected a date, got {value!r}")

        self._selection.choose_date(value)
        self._selection.failure = None
        self._selection.phase = SelectionPhase.DATE_CHOSEN
        self._changed("pick_date")
        return True

    def pick_slot(self, slot: TimeSlot) -> bool:
        if self._ignored_while_submitting("pick_slot"):
            return False
        self._require("pick_slot", SelectionPhase.DATE_CHOSEN)
        if not isinstance(slot, TimeSlot):
            raise InvalidArgument(f"Expected a TimeSlot, got {slot!r}")
        offered = {candidate.start: candidate for candidate in self.slots()}.get(slot.start)
        if offered is None:
            raise InvalidArgument(f"Slot {slot.start.isoformat()} is not offered on the selected date")
        if not offered.available:
            raise StaleSelection(f"Slot {slot.start.isoformat()} is no longer available")

        self._selection.choose_slot(offered)
        self._selection.failure = None
        self._selection.phase = SelectionPhase.AWAITING_CONFIRMATION
        self._changed("pick_slot")
        return True

    def cancel(self) -> bool:
        if self._ignored_while_submitting("cancel"):
            return False
        self._require("cancel", *CANCELLABLE)

        self._selection.clear_slot()
        self._selection.failure = None
        self._selection.phase = SelectionPhase.DATE_CHOSEN
        self._changed("cancel")
        return True

    def retry(self) -> bool:
        if self._ignored_while_submitting("retry"):
            return False
        self._require("retry", SelectionPhase.FAILED)

        self._selection.failure = None
        self._selection.phase = SelectionPhase.AWAITING_CONFIRMATION
        self._changed("retry")
        return True

    def abandon(self) -> bool:
        """Leave the booking screen without booking."""
        if self._ignored_while_submitting("abandon"):
            return False
        if self._selection.phase.is_terminal:
            raise InvalidTransition(f"abandon not allowed in phase {self._selection.phase.value}")

        self._selection.phase = SelectionPhase.CANCELLED
        self._changed("abandon")
        return True

    async def confirm(self) -> bool:
        if self._ignored_while_submitting("confirm"):
            return False
        self._require("confirm", SelectionPhase.AWAITING_CONFIRMATION)

        lesson_date = self._selection.selected_date
        slot = self._selection.selected_slot
        if lesson_date is None or slot is None:
            raise InvalidTransition("confirm requires a selected date and slot")

        self._selection.phase = SelectionPhase.SUBMITTING
        self._changed("confirm")

        try:
            booking_id = await self._submission.submit(lesson_date, slot.start)
        except asyncio.CancelledError:
            self._selection.phase = SelectionPhase.AWAITING_CONFIRMATION
            self._changed("submission_interrupted")
            raise
        except StaleSelection as e:
            self._logger.warning(
                "Selected slot no longer available",
                extra={"date": lesson_date.isoformat(), "slot": slot.start.isoformat(), "error": str(e)},
            )
            self._rejected_starts.add(slot.start)
            self._selection.clear_slot()
            self._selection.failure = _failure(e.kind)
            self._selection.phase = SelectionPhase.DATE_CHOSEN
        except SubmissionError as e:
            self._logger.warning(
                "Booking submission failed",
                extra={"slot": slot.start.isoformat(), "reason": e.kind.value, "error": str(e)},
            )
            self._selection.failure = _failure(e.kind)
            self._selection.phase = SelectionPhase.FAILED
        except Exception as e:
            self._logger.exception(
                "Unexpected error submitting booking",
                extra={"slot": slot.start.isoformat(), "error": str(e)},
            )
            self._selection.failure = _failure(SubmissionErrorKind.UNKNOWN)
            self._selection.phase = SelectionPhase.FAILED
        else:
            self._logger.info(
                "Booking confirmed",
                extra={"booking_id": booking_id, "slot": slot.start.isoformat()},
            )
            self._selection.booking_id = booking_id
            self._selection.failure = None
            self._selection.phase = SelectionPhase.CONFIRMED

        self._changed("submission_result")
        return True

    # Internals

    def _require(self, event: str, *phases: SelectionPhase) -> None:
        phase = self._selection.phase
        if phase not in phases:
            raise InvalidTransition(f"{event} not allowed in phase {phase.value}")

    def _ignored_while_submitting(self, event: str) -> bool:
        if self._selection.phase != SelectionPhase.SUBMITTING:
            return False
        self._logger.info("Event ignored while submitting", extra={"event": event})
        return True

    def _changed(self, event: str) -> None:
        self._logger.debug("Selection changed", extra={"event": event, "phase": self._selection.phase.value})
        snapshot = self._selection.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                self._logger.exception("Selection listener failed", extra={"event": event, "error": str(e)})


def _failure(kind: SubmissionErrorKind) -> BookingFailure:
    return BookingFailure(kind=kind, message=FAILURE_MESSAGES[kind])

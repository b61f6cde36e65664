from __future__ import annotations

from datetime import datetime

import pytest

from swimmg.application.use_cases.booking_selection import BookingSelectionController
from swimmg.domain.entities.calendar_month import Weekday
from swimmg.domain.entities.time_slot import OperatingHours
from swimmg.infrastructure.booking.mock_submission import MockBookingSubmission
from swimmg.infrastructure.clock.system_clock import FixedClock
from swimmg.infrastructure.locale.english_locale import EnglishLocale


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 5, 1, 9, 0))


@pytest.fixture
def locale() -> EnglishLocale:
    return EnglishLocale(week_starts_on=Weekday.SUNDAY)


@pytest.fixture
def hours() -> OperatingHours:
    return OperatingHours(start_hour=6, end_hour=20, slot_duration_minutes=60)


@pytest.fixture
def submission() -> MockBookingSubmission:
    return MockBookingSubmission()


@pytest.fixture
def controller(submission, clock, locale, hours) -> BookingSelectionController:
    return BookingSelectionController(
        submission=submission,
        clock=clock,
        locale=locale,
        operating_hours=hours,
    )

from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from swimmg.core.config import settings
from swimmg.application.ports.booking_submission import BookingSubmissionPort
from swimmg.application.ports.clock import ClockPort
from swimmg.application.ports.locale import LocalePort
from swimmg.application.use_cases.booking_screen import BookingScreenPresenter
from swimmg.application.use_cases.booking_selection import BookingSelectionController
from swimmg.application.use_cases.calendar_grid import CalendarGridBuilder
from swimmg.application.use_cases.timeslots import TimeslotProvider
from swimmg.domain.entities.time_slot import OperatingHours
from swimmg.infrastructure.booking.http_submission import HttpBookingSubmission
from swimmg.infrastructure.booking.mock_submission import MockBookingSubmission
from swimmg.infrastructure.clock.system_clock import SystemClock
from swimmg.infrastructure.locale.english_locale import EnglishLocale


logger = logging.getLogger(__name__)

_submission: BookingSubmissionPort | None = None


@lru_cache
def get_timezone() -> ZoneInfo:
    return ZoneInfo(settings.TIMEZONE)


@lru_cache
def get_operating_hours() -> OperatingHours:
    return OperatingHours(
        start_hour=settings.LESSON_START_HOUR,
        end_hour=settings.LESSON_END_HOUR,
        slot_duration_minutes=settings.LESSON_SLOT_MINUTES,
    )


def get_clock() -> ClockPort:
    return SystemClock(get_timezone())


def get_locale() -> LocalePort:
    return EnglishLocale(week_starts_on=settings.WEEK_STARTS_ON)


@lru_cache
def get_grid_builder() -> CalendarGridBuilder:
    return CalendarGridBuilder()


def get_submission() -> BookingSubmissionPort:
    global _submission
    if _submission is None:
        if not settings.BOOKING_API_BASE_URL or settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockBookingSubmission (ENV=%s)", settings.ENV)
            _submission = MockBookingSubmission()
        else:
            logger.info("Using HttpBookingSubmission")
            _submission = HttpBookingSubmission()
    return _submission


def get_booking_controller(
    submission: BookingSubmissionPort | None = None,
    clock: ClockPort | None = None,
) -> BookingSelectionController:
    """New controller for one booking flow. Call again when the screen is re-entered."""
    return BookingSelectionController(
        submission=submission or get_submission(),
        clock=clock or get_clock(),
        locale=get_locale(),
        operating_hours=get_operating_hours(),
        grid_builder=get_grid_builder(),
        slot_provider=TimeslotProvider(get_timezone()),
    )


def get_presenter() -> BookingScreenPresenter:
    return BookingScreenPresenter(get_locale())


async def close_submission() -> None:
    """Release the submission adapter's HTTP client, if one was created."""
    global _submission
    if isinstance(_submission, HttpBookingSubmission):
        await _submission.aclose()
    _submission = None

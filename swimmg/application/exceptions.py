from __future__ import annotations

from swimmg.domain.entities.booking_selection import SubmissionErrorKind
from swimmg.domain.exceptions import BookingError, InvalidArgument

__all__ = [
    "BookingError",
    "InvalidArgument",
    "InvalidTransition",
    "SubmissionError",
    "StaleSelection",
    "SlotNoLongerAvailable",
    "TransportError",
    "NetworkUnavailable",
    "Unauthorized",
    "UnknownSubmissionError",
]


class InvalidTransition(BookingError):
    """Raised when an event is not allowed in the controller's current phase."""
    pass


class SubmissionError(BookingError):
    """Raised by BookingSubmissionPort adapters when a booking cannot be stored."""

    kind = SubmissionErrorKind.UNKNOWN


class StaleSelection(SubmissionError):
    """Raised when the selected slot stopped being bookable before submission."""

    kind = SubmissionErrorKind.SLOT_NO_LONGER_AVAILABLE


class SlotNoLongerAvailable(StaleSelection):
    pass


class TransportError(SubmissionError):
    """Raised for network and auth failures; recoverable by retrying."""

    kind = SubmissionErrorKind.NETWORK_UNAVAILABLE


class NetworkUnavailable(TransportError):
    pass


class Unauthorized(TransportError):
    kind = SubmissionErrorKind.UNAUTHORIZED


class UnknownSubmissionError(SubmissionError):
    kind = SubmissionErrorKind.UNKNOWN

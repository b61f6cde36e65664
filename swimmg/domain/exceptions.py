class BookingError(Exception):
    """Base class for every error raised by the booking core."""
    pass


class InvalidArgument(BookingError, ValueError):
    """Raised for malformed months, dates, weekdays or operating hours."""
    pass

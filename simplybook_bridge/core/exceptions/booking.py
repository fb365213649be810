"""
Booking-related exceptions.
"""


class BookingFlowError(Exception):
    """Base exception for booking flow errors."""
    pass


class BookingFailed(BookingFlowError):
    """Exception raised when the remote side returns no booking record."""
    pass


class NotFound(BookingFlowError):
    """Exception raised when a booking does not exist remotely."""
    pass


class MalformedUpstreamData(BookingFlowError):
    """Exception raised when remote data does not have the expected shape."""
    pass


class TooLate(BookingFlowError):
    """Exception raised when a booking is too close to be changed."""
    pass


class InvalidInput(BookingFlowError):
    """Exception raised when a caller-supplied date or time cannot be parsed."""
    pass


class SlotUnavailable(BookingFlowError):
    """Exception raised when a booking slot is no longer available."""
    pass

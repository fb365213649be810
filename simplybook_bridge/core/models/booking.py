"""
Booking-related data models.
"""

from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _as_flag(value: Any) -> bool:
    """Remote flags arrive as bools, ints or numeric strings."""
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false")
    return bool(value)


class Slot(BaseModel):
    """One bookable start time for a provider on a given date."""

    model_config = ConfigDict(frozen=True)

    provider_id: Union[int, str]
    time: str  # HH:MM:SS


class BookingResult(BaseModel):
    """Normalized subset of a booking created remotely."""

    # serialized as bookingId, bookingHash, ... for widget clients
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    booking_id: Union[int, str]
    booking_hash: str
    require_payment: bool = False
    start_date_time: Optional[str] = None
    end_date_time: Optional[str] = None

    @classmethod
    def from_api_response(cls, result: Any) -> Optional["BookingResult"]:
        """Build from a `book` result; None when it carries no booking."""
        if not isinstance(result, dict):
            return None

        bookings = result.get("bookings") or []
        if not bookings or not isinstance(bookings[0], dict):
            return None

        booking = bookings[0]
        if booking.get("id") is None or not booking.get("hash"):
            return None

        # booking-level flag, then response-level flag, then False
        require_payment = booking.get("require_payment")
        if require_payment is None:
            require_payment = result.get("require_payment", False)

        return cls(
            booking_id=booking["id"],
            booking_hash=str(booking["hash"]),
            require_payment=_as_flag(require_payment),
            start_date_time=booking.get("start_date_time"),
            end_date_time=booking.get("end_date_time"),
        )


class RescheduleResult(BaseModel):
    """Outcome of moving a booking to a new start time."""

    old_start: str
    new_start: str
    new_end: str
    moved: bool

"""
Booking service for creating, reading and moving SimplyBook bookings.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Union

from ...core.exceptions import BookingFailed, InvalidInput
from ...core.models import BookingResult
from ...utils.date import DATE_FORMAT, TIME_FORMAT
from ...utils.logging import get_logger
from ...utils.signing import sign_booking
from ..remote import RpcGateway

logger = get_logger("bridge.booking")

BookingId = Union[int, str]


def _as_id(booking_id: BookingId) -> int:
    try:
        return int(booking_id)
    except (TypeError, ValueError):
        raise InvalidInput("Invalid booking id.")


class BookingService:
    """Thin, typed wrappers over the SimplyBook booking methods."""

    def __init__(
        self,
        gateway: RpcGateway,
        secret_key: str,
        timezone: str,
        utc_offset_minutes: int,
    ):
        self.gateway = gateway
        self.secret_key = secret_key
        self.timezone = timezone
        self.utc_offset_minutes = utc_offset_minutes

    def sign(self, booking_id: BookingId, booking_hash: str) -> str:
        return sign_booking(booking_id, booking_hash, self.secret_key)

    async def create_booking(
        self,
        service_id: Union[int, str],
        provider_id: Optional[Union[int, str]],
        date: str,
        time: str,
        name: str,
        email: str,
        phone: str,
    ) -> BookingResult:
        """Book one seat; ``time`` is passed through as HH:MM:SS."""
        client = {"name": name, "email": email, "phone": phone}
        result = await self.gateway.call(
            "book",
            [int(service_id), int(provider_id or 0), date, time, client, [], 1],
        )

        booking = BookingResult.from_api_response(result)
        if booking is None:
            logger.error(f"book returned no booking record for service {service_id} at {date} {time}")
            raise BookingFailed("Booking created but no booking data returned")

        logger.info(f"booking {booking.booking_id} created for {date} {time}")
        return booking

    async def get_booking_details(self, booking_id: BookingId, booking_hash: str) -> Optional[Dict[str, Any]]:
        """
        Fetch a booking by id.

        The call is signed the same way as ``rescheduleBook``. That the
        remote side accepts this signature here is assumed, not documented.
        """
        details = await self.gateway.call(
            "getBookingDetails",
            [_as_id(booking_id), self.sign(booking_id, booking_hash)],
        )
        return details if isinstance(details, dict) else None

    async def reschedule_booking(
        self,
        booking_id: BookingId,
        booking_hash: str,
        new_start: datetime,
        new_end: datetime,
    ) -> bool:
        """Move a booking; True when the remote side confirms the move."""
        result = await self.gateway.call(
            "rescheduleBook",
            [
                _as_id(booking_id),
                self.sign(booking_id, booking_hash),
                new_start.strftime(DATE_FORMAT),
                new_start.strftime(TIME_FORMAT),
                new_end.strftime(DATE_FORMAT),
                new_end.strftime(TIME_FORMAT),
                [],
                self.utc_offset_minutes,
                self.timezone,
            ],
        )
        return result is True

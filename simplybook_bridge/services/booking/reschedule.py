"""
Reschedule workflow.

Steps run in a fixed order: look up the booking, parse its times, check
the minimum-notice rule against the original start, keep the original
duration, re-verify the new slot, then commit. The remote side offers no
transaction across these steps and nothing is compensated: if the commit
fails after the slot was verified, the caller re-queries and retries.
"""

import re
from typing import Union

from ...core.exceptions import (
    InvalidInput,
    MalformedUpstreamData,
    NotFound,
    RpcError,
    SlotUnavailable,
    TooLate,
)
from ...core.models import RescheduleResult
from ...utils.date import SalonClock, TIME_FORMAT
from ...utils.logging import get_logger
from ..availability import AvailabilityService
from .service import BookingService

logger = get_logger("bridge.reschedule")

_MISSING_BOOKING = re.compile(r"not\s*found|no such|signature|\bsign\b", re.IGNORECASE)


def too_late_message(min_hours: float) -> str:
    unit = "hour" if min_hours == 1 else "hours"
    return f"Bookings can only be changed at least {min_hours:g} {unit} in advance."


class RescheduleWorkflow:
    """Moves an existing booking while preserving its duration."""

    def __init__(
        self,
        bookings: BookingService,
        availability: AvailabilityService,
        clock: SalonClock,
        min_notice_hours: float = 24.0,
    ):
        self.bookings = bookings
        self.availability = availability
        self.clock = clock
        self.min_notice_hours = min_notice_hours

    async def run(
        self,
        booking_id: Union[int, str],
        booking_hash: str,
        new_date: str,
        new_time: str,
    ) -> RescheduleResult:
        try:
            booking = await self.bookings.get_booking_details(booking_id, booking_hash)
        except RpcError as e:
            # unknown id and wrong hash both mean there is no such booking for this caller
            if _MISSING_BOOKING.search(e.message or ""):
                logger.info(f"reschedule: booking {booking_id} rejected by lookup: {e.message}")
                raise NotFound("Booking not found.") from e
            raise
        if not booking or not booking.get("start_date_time") or not booking.get("end_date_time"):
            logger.info(f"reschedule: booking {booking_id} not found")
            raise NotFound("Booking not found.")

        original_start = self.clock.parse(booking["start_date_time"])
        original_end = self.clock.parse(booking["end_date_time"])
        if original_start is None or original_end is None:
            logger.error(
                f"reschedule: booking {booking_id} has unparsable times "
                f"{booking['start_date_time']!r} / {booking['end_date_time']!r}"
            )
            raise MalformedUpstreamData("Invalid booking time format.")

        hours_left = self.clock.hours_until(original_start)
        if hours_left < self.min_notice_hours:
            logger.info(f"reschedule: booking {booking_id} starts in {hours_left:.1f}h, refusing")
            raise TooLate(too_late_message(self.min_notice_hours))

        # always the original length, never a caller-supplied end
        duration = self.clock.minutes_between(original_start, original_end)

        new_start = self.clock.parse_date_time(new_date, new_time)
        if new_start is None:
            raise InvalidInput("Invalid new date or time.")
        new_end = self.clock.add_minutes(new_start, duration)

        service_id = booking.get("event_id")
        if service_id in (None, ""):
            logger.error(f"reschedule: booking {booking_id} has no event_id")
            raise MalformedUpstreamData("Booking has no service.")

        wanted = new_start.strftime(TIME_FORMAT)
        slots = await self.availability.resolve(service_id, new_date, booking.get("unit_id"))
        if not any(slot.time == wanted for slot in slots):
            logger.info(f"reschedule: {new_date} {wanted} no longer free for booking {booking_id}")
            raise SlotUnavailable("Selected time is no longer available. Please choose another slot.")

        try:
            moved = await self.bookings.reschedule_booking(booking_id, booking_hash, new_start, new_end)
        except RpcError:
            logger.error(f"reschedule: commit failed for booking {booking_id} after slot check; not compensated")
            raise

        if not moved:
            logger.warning(f"reschedule: remote did not confirm move of booking {booking_id}")
        else:
            logger.info(f"reschedule: booking {booking_id} moved to {self.clock.format(new_start)}")

        return RescheduleResult(
            old_start=booking["start_date_time"],
            new_start=self.clock.format(new_start),
            new_end=self.clock.format(new_end),
            moved=moved,
        )

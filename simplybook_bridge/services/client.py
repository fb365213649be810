"""
Scheduling client: the operations the HTTP layer consumes.
"""

from typing import Any, Dict, List, Optional, Union

import httpx

from ..config import Settings
from ..core.models import BookingResult, RescheduleResult, Slot
from ..utils.date import SalonClock
from .availability import AvailabilityService, filter_window
from .booking import BookingService, RescheduleWorkflow
from .remote import JsonRpcTransport, RpcGateway, ServiceDurationCache, SessionManager


class SchedulingClient:
    """One wired-up set of SimplyBook services sharing a single session."""

    def __init__(
        self,
        session: SessionManager,
        gateway: RpcGateway,
        durations: ServiceDurationCache,
        availability: AvailabilityService,
        bookings: BookingService,
        reschedule: RescheduleWorkflow,
    ):
        self.session = session
        self.gateway = gateway
        self.durations = durations
        self.availability = availability
        self.bookings = bookings
        self.reschedule = reschedule

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "SchedulingClient":
        config = settings.simplybook()
        rpc = JsonRpcTransport(timeout=config.timeout, transport=transport)
        session = SessionManager(config, rpc)
        gateway = RpcGateway(config, session, rpc)
        clock = SalonClock(settings.salon_timezone)
        availability = AvailabilityService(gateway)
        bookings = BookingService(
            gateway,
            secret_key=config.secret_key,
            timezone=settings.salon_timezone,
            utc_offset_minutes=settings.salon_utc_offset_minutes,
        )
        return cls(
            session=session,
            gateway=gateway,
            durations=ServiceDurationCache(gateway, ttl_seconds=settings.service_duration_ttl),
            availability=availability,
            bookings=bookings,
            reschedule=RescheduleWorkflow(
                bookings,
                availability,
                clock,
                min_notice_hours=settings.min_reschedule_hours,
            ),
        )

    async def get_availability(
        self,
        service_id: Union[int, str],
        date: str,
        provider_id: Optional[Union[int, str]] = None,
        from_time: Optional[str] = None,
        to_time: Optional[str] = None,
    ) -> List[Slot]:
        slots = await self.availability.resolve(service_id, date, provider_id, from_time, to_time)
        return filter_window(slots, from_time, to_time)

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
        return await self.bookings.create_booking(service_id, provider_id, date, time, name, email, phone)

    async def reschedule_booking(
        self,
        booking_id: Union[int, str],
        booking_hash: str,
        new_date: str,
        new_time: str,
    ) -> RescheduleResult:
        return await self.reschedule.run(booking_id, booking_hash, new_date, new_time)

    async def get_booking_details(self, booking_id: Union[int, str], booking_hash: str) -> Optional[Dict[str, Any]]:
        return await self.bookings.get_booking_details(booking_id, booking_hash)

    async def get_service_duration(self, service_id: Union[int, str]) -> Optional[Union[int, float]]:
        return await self.durations.duration_for(service_id)

    def reset(self) -> None:
        """Drop the session token and cached reference data."""
        self.session.reset()
        self.durations.reset()

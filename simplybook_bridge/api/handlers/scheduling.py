"""
Availability, booking and reschedule endpoints.
"""

from fastapi import APIRouter

from ...services import SchedulingClient
from ...utils.logging import get_logger
from ..errors import describe_error
from ..responses import failure, success
from ..schemas import (
    AvailabilityRequest,
    BookingLookupRequest,
    BookingRequest,
    RescheduleRequest,
)

logger = get_logger("bridge.api")


class SchedulingHandler:
    """Handler for the scheduling endpoints."""

    def __init__(self, client: SchedulingClient):
        self.client = client
        self.router = APIRouter()
        self._setup_routes()

    def _fail(self, error: Exception, operation: str):
        status_code, message = describe_error(error, operation)
        if status_code >= 500:
            logger.error(f"{operation} failed: {error}")
        else:
            logger.warning(f"{operation} failed: {error}")
        return failure(message, status_code)

    def _setup_routes(self):
        """Setup scheduling routes."""

        @self.router.post("/availability")
        async def availability(body: AvailabilityRequest):
            try:
                slots = await self.client.get_availability(
                    body.service_id,
                    body.date,
                    body.provider_id,
                    body.from_time,
                    body.to_time,
                )
            except Exception as e:
                return self._fail(e, "fetch availability")
            return success(slots)

        @self.router.post("/booking")
        async def create_booking(body: BookingRequest):
            try:
                booking = await self.client.create_booking(
                    body.service_id,
                    body.provider_id,
                    body.date,
                    body.time,
                    body.name,
                    body.email,
                    body.phone,
                )
            except Exception as e:
                return self._fail(e, "create booking")
            return success(booking)

        @self.router.post("/booking/details")
        async def booking_details(body: BookingLookupRequest):
            try:
                details = await self.client.get_booking_details(body.booking_id, body.booking_hash)
            except Exception as e:
                return self._fail(e, "fetch booking")
            if not details:
                return failure("Booking not found.", 404)
            return success(details)

        @self.router.post("/reschedule")
        async def reschedule(body: RescheduleRequest):
            try:
                result = await self.client.reschedule_booking(
                    body.booking_id,
                    body.booking_hash,
                    body.new_date,
                    body.new_time,
                )
            except Exception as e:
                return self._fail(e, "reschedule booking")
            return success(result)

        @self.router.get("/services/{service_id}")
        async def service_duration(service_id: int):
            try:
                duration = await self.client.get_service_duration(service_id)
            except Exception as e:
                return self._fail(e, "fetch service")
            if duration is None:
                return failure("Service not found.", 404)
            return success({"service_id": service_id, "duration": duration})

"""
Service layer for the SimplyBook bridge.
"""

from .client import SchedulingClient
from .availability import AvailabilityService
from .booking import BookingService, RescheduleWorkflow
from .remote import RpcGateway, SessionManager, ServiceDurationCache

__all__ = [
    "SchedulingClient",
    "AvailabilityService",
    "BookingService",
    "RescheduleWorkflow",
    "RpcGateway",
    "SessionManager",
    "ServiceDurationCache",
]

"""
Booking service module.
"""

from .service import BookingService
from .reschedule import RescheduleWorkflow

__all__ = [
    "BookingService",
    "RescheduleWorkflow",
]

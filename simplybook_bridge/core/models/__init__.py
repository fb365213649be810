"""
Core data models for the SimplyBook bridge.
"""

from .booking import Slot, BookingResult, RescheduleResult

__all__ = [
    "Slot",
    "BookingResult",
    "RescheduleResult",
]

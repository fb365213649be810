"""
Availability service module.
"""

from .service import AvailabilityService, filter_window

__all__ = [
    "AvailabilityService",
    "filter_window",
]

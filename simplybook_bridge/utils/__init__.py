"""
Utility modules for the SimplyBook bridge.
"""

from .date import SalonClock
from .logging import get_logger, configure_logging
from .signing import sign_booking

__all__ = [
    "SalonClock",
    "get_logger",
    "configure_logging",
    "sign_booking",
]

"""
HTTP route handlers.
"""

from .health import HealthHandler
from .scheduling import SchedulingHandler

__all__ = [
    "HealthHandler",
    "SchedulingHandler",
]

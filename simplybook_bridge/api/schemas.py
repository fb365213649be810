"""
Request models for the HTTP layer.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
HHMM_PATTERN = r"^\d{2}:\d{2}$"
HHMMSS_PATTERN = r"^\d{2}:\d{2}:\d{2}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class AvailabilityRequest(BaseModel):
    """Availability query."""

    model_config = ConfigDict(extra="ignore")

    service_id: int = Field(gt=0)
    date: str = Field(pattern=DATE_PATTERN)
    from_time: Optional[str] = Field(default=None, pattern=HHMM_PATTERN)
    to_time: Optional[str] = Field(default=None, pattern=HHMM_PATTERN)
    provider_id: Optional[int] = Field(default=None, gt=0)


class BookingRequest(BaseModel):
    """New booking."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=2)
    phone: str = Field(min_length=5)
    email: str = Field(pattern=EMAIL_PATTERN)
    service_id: int = Field(gt=0)
    provider_id: Optional[int] = Field(default=None, gt=0)
    date: str = Field(pattern=DATE_PATTERN)
    time: str = Field(pattern=HHMMSS_PATTERN)


class BookingLookupRequest(BaseModel):
    """Booking reference."""

    model_config = ConfigDict(extra="ignore")

    booking_id: str = Field(min_length=1)
    booking_hash: str = Field(min_length=1)


class RescheduleRequest(BookingLookupRequest):
    """Move a booking to a new start."""

    new_date: str = Field(pattern=DATE_PATTERN)
    new_time: str = Field(pattern=HHMMSS_PATTERN)

"""
Mapping of internal failures to caller-facing messages.

Upstream error text is never relayed; unknown failures get a generic
"Failed to <operation>" message.
"""

from typing import Tuple

from ..core.exceptions import (
    AuthenticationFailed,
    InvalidInput,
    MalformedUpstreamData,
    NotFound,
    RpcError,
    SlotUnavailable,
    TooLate,
)


def describe_error(error: Exception, operation: str = "complete the operation") -> Tuple[int, str]:
    """Return ``(status_code, message)`` safe to show to callers."""
    if isinstance(error, NotFound):
        return 404, "Booking not found."
    if isinstance(error, MalformedUpstreamData):
        return 500, str(error)
    if isinstance(error, TooLate):
        return 400, str(error)
    if isinstance(error, InvalidInput):
        return 400, str(error)
    if isinstance(error, SlotUnavailable):
        return 400, "Selected time is no longer available. Please choose another slot."
    if isinstance(error, AuthenticationFailed):
        return 400, "Authentication failed. Please try again."
    if isinstance(error, RpcError):
        message = (error.message or "").lower()
        if "token" in message or "unauthorized" in message:
            return 400, "Authentication failed. Please try again."
        if "validation" in message or "invalid" in message:
            return 400, "Invalid request parameters."
        if "timed out" in message or "timeout" in message:
            return 400, "Request timed out. Please try again."
        if "request failed" in message or "network" in message:
            return 400, "Service unavailable. Please try again later."
        if "booking" in message and "not found" in message:
            return 404, "Booking not found. Please verify the booking ID."
    return 400, f"Failed to {operation}. Please try again later."

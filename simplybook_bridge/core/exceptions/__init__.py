"""
Custom exceptions for the SimplyBook bridge.
"""

from .rpc import RpcError, AuthenticationFailed
from .booking import (
    BookingFlowError,
    BookingFailed,
    NotFound,
    MalformedUpstreamData,
    TooLate,
    InvalidInput,
    SlotUnavailable,
)

__all__ = [
    "RpcError",
    "AuthenticationFailed",
    "BookingFlowError",
    "BookingFailed",
    "NotFound",
    "MalformedUpstreamData",
    "TooLate",
    "InvalidInput",
    "SlotUnavailable",
]

"""
SimplyBook remote API client.
"""

from .transport import JsonRpcTransport, RemoteFault
from .session import SessionManager
from .gateway import RpcGateway
from .cache import ServiceDurationCache

__all__ = [
    "JsonRpcTransport",
    "RemoteFault",
    "SessionManager",
    "RpcGateway",
    "ServiceDurationCache",
]

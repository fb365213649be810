"""
Remote RPC exceptions.
"""


class RpcError(Exception):
    """Raised when a remote call fails for good."""

    def __init__(self, method: str, message: str):
        self.method = method
        self.message = message
        super().__init__(f"RPC call failed ({method}): {message}")


class AuthenticationFailed(RpcError):
    """Raised when the remote side rejects the login."""

    def __init__(self, message: str):
        super().__init__("getToken", message)

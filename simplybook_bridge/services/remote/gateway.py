"""
Authenticated RPC gateway with one re-login retry on token rejection.
"""

import re
from typing import Any, List, Optional

from ...config import SimplyBookConfig
from ...core.exceptions import RpcError
from ...utils.logging import get_logger
from .session import SessionManager
from .transport import JsonRpcTransport, RemoteFault

logger = get_logger("bridge.gateway")

_TOKEN_FAILURE = re.compile(r"token|unauthorized", re.IGNORECASE)


class RpcGateway:
    """Issues authenticated JSON-RPC calls against the SimplyBook API."""

    def __init__(
        self,
        config: SimplyBookConfig,
        session: SessionManager,
        transport: JsonRpcTransport,
    ):
        self.config = config
        self.session = session
        self.transport = transport

    def is_token_failure(self, fault: RemoteFault) -> bool:
        """
        Decide whether a failure means the session token was rejected.

        Structured signals win: HTTP 401, or an upstream error code listed
        in ``auth_error_codes``. Without either, fall back to matching
        "token" / "unauthorized" in the message.
        """
        if fault.status_code == 401:
            return True
        if fault.code is not None and fault.code in self.config.auth_error_codes:
            return True
        return bool(_TOKEN_FAILURE.search(fault.message or ""))

    async def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Call a remote method with the current session token.

        A token rejection triggers one forced re-login and one retry. Any
        other failure, or a second failure, raises RpcError.
        """
        params = list(params or [])
        token = await self.session.ensure_token()
        try:
            return await self._invoke(method, params, token)
        except RemoteFault as e:
            if not self.is_token_failure(e):
                logger.error(f"rpc {method} failed: {e.message}")
                raise RpcError(method, e.message) from e
            logger.warning(f"rpc {method}: token rejected ({e.message}), retrying once")

        token = await self.session.refresh(token)
        try:
            return await self._invoke(method, params, token)
        except RemoteFault as e:
            logger.error(f"rpc {method} failed after re-login: {e.message}")
            raise RpcError(method, e.message) from e

    async def _invoke(self, method: str, params: List[Any], token: str) -> Any:
        return await self.transport.post(
            self.config.get_rpc_url(),
            method,
            params,
            headers=self.config.get_auth_headers(token),
        )

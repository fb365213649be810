"""
Session token management for the SimplyBook API.
"""

import asyncio
from typing import Optional

from ...config import SimplyBookConfig
from ...core.exceptions import AuthenticationFailed
from ...utils.logging import get_logger
from .transport import JsonRpcTransport, RemoteFault

logger = get_logger("bridge.session")


class SessionManager:
    """
    Owns the process-wide bearer token.

    The token has no expiry timer: it is kept until a call reports it as
    rejected. Concurrent callers without a token share one login task, so
    a token-acquisition episode costs exactly one ``getToken`` call.
    """

    def __init__(self, config: SimplyBookConfig, transport: JsonRpcTransport):
        self.config = config
        self.transport = transport
        self._token: Optional[str] = None
        self._pending: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    @property
    def token(self) -> Optional[str]:
        return self._token

    async def ensure_token(self) -> str:
        """Return the held token, logging in first if there is none."""
        token = self._token
        if token is not None:
            return token

        async with self._lock:
            if self._token is not None:
                return self._token
            if self._pending is None:
                self._pending = asyncio.ensure_future(self._acquire())
            pending = self._pending

        return await asyncio.shield(pending)

    async def refresh(self, stale_token: Optional[str]) -> str:
        """Drop a rejected token and log in again.

        Only the token that was rejected is dropped; if another caller has
        already replaced it, the newer token is reused.
        """
        async with self._lock:
            if self._token is not None and self._token == stale_token:
                logger.info("session: token rejected, re-authenticating")
                self._token = None
        return await self.ensure_token()

    def reset(self) -> None:
        """Forget the token and any in-flight login."""
        self._token = None
        self._pending = None

    async def _acquire(self) -> str:
        try:
            token = await self._login()
            # a reset() during login orphans this task; its token is dropped
            if self._pending is asyncio.current_task():
                self._token = token
            return token
        finally:
            if self._pending is asyncio.current_task():
                self._pending = None

    async def _login(self) -> str:
        logger.info(f"session: logging in as {self.config.company}")
        try:
            token = await self.transport.post(
                self.config.get_login_url(),
                "getToken",
                [self.config.company, self.config.api_key],
            )
        except RemoteFault as e:
            logger.error(f"session: login failed: {e.message}")
            raise AuthenticationFailed(e.message or "Login failed") from e

        if not isinstance(token, str) or not token:
            logger.error("session: login returned no token")
            raise AuthenticationFailed("Login returned no token")
        return token

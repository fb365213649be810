"""
Service duration cache.
"""

import math
import time
from typing import Callable, Dict, Optional, Union

from ...utils.logging import get_logger
from .gateway import RpcGateway

logger = get_logger("bridge.cache")

Minutes = Union[int, float]


class ServiceDurationCache:
    """Per-service durations from ``getEventList``, refreshed whole after a TTL."""

    def __init__(
        self,
        gateway: RpcGateway,
        ttl_seconds: float = 600.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.gateway = gateway
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._durations: Optional[Dict[str, Minutes]] = None
        self._fetched_at = 0.0

    def is_fresh(self) -> bool:
        return (
            self._durations is not None
            and self._clock() - self._fetched_at < self.ttl_seconds
        )

    async def duration_for(self, service_id: Union[int, str]) -> Optional[Minutes]:
        """Duration in minutes, or None when the service has none."""
        if not self.is_fresh():
            await self.refresh()
        return (self._durations or {}).get(str(service_id))

    async def refresh(self) -> None:
        events = await self.gateway.call("getEventList", [])
        durations: Dict[str, Minutes] = {}
        if isinstance(events, list):
            events = {event.get("id"): event for event in events if isinstance(event, dict)}
        elif not isinstance(events, dict):
            events = {}
        for service_id, event in events.items():
            if service_id is None:
                continue
            duration = _as_minutes(event.get("duration") if isinstance(event, dict) else None)
            if duration is not None:
                durations[str(service_id)] = duration

        self._durations = durations
        self._fetched_at = self._clock()
        logger.info(f"cache: loaded durations for {len(durations)} services")

    def reset(self) -> None:
        self._durations = None
        self._fetched_at = 0.0


def _as_minutes(value) -> Optional[Minutes]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number

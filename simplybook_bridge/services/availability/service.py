"""
Availability lookups against the SimplyBook start-time matrix.
"""

from typing import List, Optional, Union

from ...core.models import Slot
from ..remote import RpcGateway

DAY_START = "00:00:00"
DAY_END = "23:59:59"


def _with_seconds(time_str: str) -> str:
    return time_str if time_str.count(":") == 2 else f"{time_str}:00"


def filter_window(slots: List[Slot], from_time: Optional[str], to_time: Optional[str]) -> List[Slot]:
    """
    Keep slots whose time falls within ``from_time``..``to_time`` inclusive.

    Times share the ``HH:MM:SS`` shape, so string order is time order.
    Without both bounds the slots are returned unchanged.
    """
    if not (from_time and to_time):
        return list(slots)
    lower = _with_seconds(from_time)
    upper = _with_seconds(to_time)
    return [slot for slot in slots if lower <= slot.time <= upper]


class AvailabilityService:
    """Resolves bookable start times for a service on one date."""

    def __init__(self, gateway: RpcGateway):
        self.gateway = gateway

    async def resolve(
        self,
        service_id: Union[int, str],
        date: str,
        provider_id: Optional[Union[int, str]] = None,
        from_time: Optional[str] = None,
        to_time: Optional[str] = None,
    ) -> List[Slot]:
        """
        Get available start times as a flat slot list.

        Args:
            service_id: SimplyBook event id
            date: Date in YYYY-MM-DD format
            provider_id: SimplyBook unit id; None or 0 means any provider
            from_time: Optional window start, HH:MM
            to_time: Optional window end, HH:MM

        Returns:
            Slots in the order the remote API lists providers and times
        """
        start = f"{date} {_with_seconds(from_time) if from_time else DAY_START}"
        end = f"{date} {_with_seconds(to_time) if to_time else DAY_END}"
        unit_id = int(provider_id) if provider_id else 0

        matrix = await self.gateway.call(
            "getCartesianStartTimeMatrix",
            [start, end, int(service_id), unit_id, 1, 0, []],
        )

        slots: List[Slot] = []
        for item in matrix or []:
            if not isinstance(item, dict):
                continue
            timeslots = item.get("timeslots") or {}
            times = timeslots.get(date) if isinstance(timeslots, dict) else None
            for time_str in times or []:
                if isinstance(time_str, str):
                    slots.append(Slot(provider_id=item.get("provider_id"), time=time_str))

        return slots

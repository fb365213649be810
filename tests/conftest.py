"""
Pytest configuration and fixtures.
"""

import asyncio
import hashlib
import itertools
import json
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import httpx
import pytest

from simplybook_bridge.config import Settings
from simplybook_bridge.services import SchedulingClient
from simplybook_bridge.services.remote import JsonRpcTransport, RpcGateway, SessionManager
from simplybook_bridge.utils.date import SalonClock

BASE_URL = "https://user-api.simplybook.test"
COMPANY = "salon"
API_KEY = "api-key"
SECRET = "secret-key"


def _error(message: str, code: int = -32000) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": 1, "error": {"code": code, "message": message}}


def _result(value: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": 1, "result": value}


class FakeSimplyBook:
    """In-process stand-in for the SimplyBook JSON-RPC API."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.valid_tokens = set()
        self._token_ids = itertools.count(1)
        self._booking_ids = itertools.count(100)
        self.login_delay = 0.0
        self.login_error: Optional[str] = None
        self.reschedule_result: Any = True
        self.events: Dict[str, Dict[str, Any]] = {
            "1": {"id": "1", "name": "Lash lift", "duration": 45},
            "2": {"id": "2", "name": "Full set", "duration": "90"},
        }
        # service id -> date -> provider id -> times
        self.open_slots: Dict[str, Dict[str, Dict[int, List[str]]]] = {}
        self.bookings: Dict[int, Dict[str, Any]] = {}
        self._faults: List[Dict[str, Any]] = []

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def count(self, method: str) -> int:
        return sum(1 for call in self.calls if call["method"] == method)

    def params_of(self, method: str) -> List[List[Any]]:
        return [call["params"] for call in self.calls if call["method"] == method]

    def expire_tokens(self) -> None:
        self.valid_tokens.clear()

    def fail_next(self, method: str, message: str, code: int = -32000, times: int = 1, status: int = 200) -> None:
        for _ in range(times):
            self._faults.append({"method": method, "message": message, "code": code, "status": status})

    def open(self, service_id: int, date: str, provider_id: int, times: List[str]) -> None:
        providers = self.open_slots.setdefault(str(service_id), {}).setdefault(date, {})
        providers.setdefault(provider_id, []).extend(times)

    def add_booking(
        self,
        start: str,
        end: str,
        event_id: Any = "1",
        unit_id: Any = "7",
        booking_hash: str = "abc123",
    ) -> int:
        booking_id = next(self._booking_ids)
        self.bookings[booking_id] = {
            "id": str(booking_id),
            "hash": booking_hash,
            "event_id": event_id,
            "unit_id": unit_id,
            "start_date_time": start,
            "end_date_time": end,
        }
        return booking_id

    async def handle(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        method, params = payload["method"], payload["params"]
        self.calls.append({
            "path": request.url.path,
            "method": method,
            "params": params,
            "headers": dict(request.headers),
        })

        if request.url.path == "/login":
            return await self._login(params)

        for fault in self._faults:
            if fault["method"] == method:
                self._faults.remove(fault)
                return httpx.Response(fault["status"], json=_error(fault["message"], fault["code"]))

        if request.headers.get("x-company-login") != COMPANY:
            return httpx.Response(200, json=_error("Company login is invalid"))
        if request.headers.get("x-token") not in self.valid_tokens:
            return httpx.Response(200, json=_error("Access denied: token is invalid", -32600))

        dispatch = getattr(self, f"_rpc_{method}")
        return httpx.Response(200, json=dispatch(*params))

    async def _login(self, params: List[Any]) -> httpx.Response:
        if self.login_delay:
            await asyncio.sleep(self.login_delay)
        if self.login_error:
            return httpx.Response(200, json=_error(self.login_error))
        if params != [COMPANY, API_KEY]:
            return httpx.Response(200, json=_error("Wrong api key"))
        token = f"token-{next(self._token_ids)}"
        self.valid_tokens.add(token)
        return httpx.Response(200, json=_result(token))

    def _sign(self, booking_id: int) -> str:
        booking = self.bookings[booking_id]
        raw = f"{booking_id}{booking['hash']}{SECRET}"
        return hashlib.md5(raw.encode()).hexdigest()

    def _rpc_getEventList(self):
        return _result(self.events)

    def _rpc_getCartesianStartTimeMatrix(self, start, end, service_id, unit_id, count, group, extra):
        # The window is deliberately ignored so callers must post-filter.
        date = start.split(" ")[0]
        providers = self.open_slots.get(str(service_id), {}).get(date, {})
        return _result([
            {"provider_id": provider, "timeslots": {date: list(times)}}
            for provider, times in providers.items()
            if unit_id in (0, provider)
        ])

    def _rpc_book(self, service_id, provider_id, date, time, client, additional, count):
        providers = self.open_slots.get(str(service_id), {}).get(date, {})
        candidates = [provider_id] if provider_id else list(providers)
        for provider in candidates:
            if time in providers.get(provider, []):
                providers[provider].remove(time)
                break
        else:
            return _error("Selected time start is not available")

        duration = int(float(self.events[str(service_id)]["duration"]))
        start = datetime.strptime(f"{date} {time}", "%Y-%m-%d %H:%M:%S")
        booking_id = self.add_booking(
            start=start.strftime("%Y-%m-%d %H:%M:%S"),
            end=(start + timedelta(minutes=duration)).strftime("%Y-%m-%d %H:%M:%S"),
            event_id=str(service_id),
            unit_id=str(provider),
            booking_hash="hash-" + time.replace(":", ""),
        )
        booking = dict(self.bookings[booking_id], id=booking_id)
        return _result({"bookings": [booking], "require_payment": False})

    def _rpc_getBookingDetails(self, booking_id, sign):
        if booking_id not in self.bookings:
            return _error("Booking not found")
        if sign != self._sign(booking_id):
            return _error("Signature is wrong")
        return _result(self.bookings[booking_id])

    def _rpc_rescheduleBook(self, booking_id, sign, start_date, start_time, end_date, end_time, extra, offset, tz):
        if booking_id not in self.bookings or sign != self._sign(booking_id):
            return _error("Signature is wrong")
        if self.reschedule_result is True:
            self.bookings[booking_id].update(
                start_date_time=f"{start_date} {start_time}",
                end_date_time=f"{end_date} {end_time}",
            )
        return _result(self.reschedule_result)


@pytest.fixture
def fake_api():
    """Fresh stub of the remote API."""
    return FakeSimplyBook()


@pytest.fixture
def settings():
    """Settings for the stub API; salon options left at their defaults."""
    return Settings(
        _env_file=None,
        simplybook_base_url=BASE_URL,
        simplybook_company=COMPANY,
        simplybook_api_key=API_KEY,
        simplybook_secret_key=SECRET,
    )


@pytest.fixture
def rpc(fake_api, settings):
    """JSON-RPC transport wired to the stub."""
    return JsonRpcTransport(timeout=settings.rpc_timeout, transport=fake_api.transport())


@pytest.fixture
def session(settings, rpc):
    return SessionManager(settings.simplybook(), rpc)


@pytest.fixture
def gateway(settings, session, rpc):
    return RpcGateway(settings.simplybook(), session, rpc)


@pytest.fixture
def client(fake_api, settings):
    """Fully wired scheduling client talking to the stub."""
    return SchedulingClient.from_settings(settings, transport=fake_api.transport())


@pytest.fixture
def clock(settings):
    return SalonClock(settings.salon_timezone)


@pytest.fixture
def hours_from_now(clock):
    """Build a salon-local moment some hours ahead, truncated to the minute."""

    def build(hours: float) -> datetime:
        moment = clock.now() + timedelta(hours=hours)
        return moment.replace(second=0, microsecond=0)

    return build

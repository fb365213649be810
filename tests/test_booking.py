"""
Tests for booking operations.
"""

import pytest

from simplybook_bridge.core.exceptions import BookingFailed, InvalidInput, RpcError
from simplybook_bridge.core.models import BookingResult

DATE = "2030-03-04"


class TestCreateBooking:
    """Test booking creation."""

    @pytest.mark.asyncio
    async def test_create_booking_normalizes_result(self, fake_api, client):
        fake_api.open(1, DATE, 11, ["09:00:00", "10:00:00"])

        booking = await client.create_booking(1, 11, DATE, "10:00:00", "Mia", "mia@example.com", "+6591234567")

        assert isinstance(booking, BookingResult)
        assert booking.start_date_time == f"{DATE} 10:00:00"
        assert booking.end_date_time == f"{DATE} 10:45:00"
        assert booking.require_payment is False
        assert booking.booking_hash

    @pytest.mark.asyncio
    async def test_book_call_shape(self, fake_api, client):
        fake_api.open(1, DATE, 11, ["09:00:00"])

        await client.create_booking(1, None, DATE, "09:00:00", "Mia", "mia@example.com", "+6591234567")

        params = fake_api.params_of("book")[-1]
        assert params == [
            1, 0, DATE, "09:00:00",
            {"name": "Mia", "email": "mia@example.com", "phone": "+6591234567"},
            [], 1,
        ]

    @pytest.mark.asyncio
    async def test_booked_time_is_no_longer_available(self, fake_api, client):
        fake_api.open(1, DATE, 11, ["09:00:00", "10:00:00"])

        await client.create_booking(1, 11, DATE, "09:00:00", "Mia", "mia@example.com", "+6591234567")
        slots = await client.get_availability(1, DATE)

        assert [s.time for s in slots] == ["10:00:00"]

    @pytest.mark.asyncio
    async def test_missing_booking_record_fails(self, fake_api, client, monkeypatch):
        monkeypatch.setattr(
            fake_api, "_rpc_book",
            lambda *params: {"jsonrpc": "2.0", "id": 1, "result": {"bookings": []}},
        )

        with pytest.raises(BookingFailed):
            await client.create_booking(1, 11, DATE, "09:00:00", "Mia", "mia@example.com", "+6591234567")

    @pytest.mark.asyncio
    async def test_booking_without_hash_fails(self, fake_api, client, monkeypatch):
        monkeypatch.setattr(
            fake_api, "_rpc_book",
            lambda *params: {"jsonrpc": "2.0", "id": 1, "result": {"bookings": [{"id": 5}]}},
        )

        # without the hash the booking could never be looked up or moved
        with pytest.raises(BookingFailed):
            await client.create_booking(1, 11, DATE, "09:00:00", "Mia", "mia@example.com", "+6591234567")

    @pytest.mark.asyncio
    async def test_remote_rejection_is_rpc_error(self, client):
        with pytest.raises(RpcError):
            await client.create_booking(1, 11, DATE, "09:00:00", "Mia", "mia@example.com", "+6591234567")


class TestBookingResult:
    """Test normalization of book results."""

    def test_require_payment_prefers_booking_flag(self):
        result = BookingResult.from_api_response({
            "bookings": [{"id": 5, "hash": "h", "require_payment": True}],
            "require_payment": False,
        })
        assert result.require_payment is True

    def test_require_payment_falls_back_to_response_flag(self):
        result = BookingResult.from_api_response({
            "bookings": [{"id": 5, "hash": "h"}],
            "require_payment": "1",
        })
        assert result.require_payment is True

    def test_require_payment_defaults_to_false(self):
        result = BookingResult.from_api_response({"bookings": [{"id": 5, "hash": "h"}]})
        assert result.require_payment is False

    def test_no_booking_record(self):
        assert BookingResult.from_api_response({"bookings": []}) is None
        assert BookingResult.from_api_response(None) is None
        assert BookingResult.from_api_response({"bookings": [{"hash": "h"}]}) is None

    def test_missing_hash_is_no_booking(self):
        assert BookingResult.from_api_response({"bookings": [{"id": 5}]}) is None
        assert BookingResult.from_api_response({"bookings": [{"id": 5, "hash": ""}]}) is None

    def test_serializes_camel_case(self):
        result = BookingResult.from_api_response({"bookings": [{"id": 5, "hash": "h"}]})
        assert set(result.model_dump(by_alias=True)) == {
            "bookingId", "bookingHash", "requirePayment", "startDateTime", "endDateTime",
        }


class TestBookingDetails:
    """Test signed booking lookup."""

    @pytest.mark.asyncio
    async def test_details_are_signed(self, fake_api, client):
        booking_id = fake_api.add_booking("2030-03-04 10:00:00", "2030-03-04 10:45:00")

        details = await client.get_booking_details(str(booking_id), "abc123")

        assert details["start_date_time"] == "2030-03-04 10:00:00"

    @pytest.mark.asyncio
    async def test_wrong_hash_is_rejected_remotely(self, fake_api, client):
        booking_id = fake_api.add_booking("2030-03-04 10:00:00", "2030-03-04 10:45:00")

        with pytest.raises(RpcError):
            await client.get_booking_details(booking_id, "not-the-hash")

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_invalid_input(self, client):
        with pytest.raises(InvalidInput):
            await client.get_booking_details("abc", "abc123")

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

API = "/api/v1"


def _payload(room, tourist, start, end, **overrides) -> dict:
    payload = {
        "room_id": room.id,
        "tourist_id": tourist.id,
        "check_in_date": start.isoformat(),
        "check_out_date": end.isoformat(),
        "guest_count": 2,
    }
    payload.update(overrides)
    return payload


def test_create_booking_returns_201(client, room, tourist, future_dates):
    start, end = future_dates

    response = client.post(f"{API}/bookings", json=_payload(room, tourist, start, end))

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Pending"
    assert body["guest_count"] == 2
    assert body["total_nights"] == 2
    assert Decimal(body["total_amount"]) == Decimal("2000.00")
    assert body["booking_reference"].startswith("BK-")
    assert "X-Request-ID" in response.headers


def test_conflicting_booking_returns_409(client, room, tourist, future_dates):
    start, end = future_dates
    first = client.post(f"{API}/bookings", json=_payload(room, tourist, start, end)).json()

    response = client.post(
        f"{API}/bookings",
        json=_payload(room, tourist, start + timedelta(days=1), end + timedelta(days=1)),
    )

    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "BOOKING_CONFLICT"
    assert error["details"]["conflicts"][0]["reference"] == first["booking_reference"]


def test_unknown_room_returns_404(client, room, tourist, future_dates):
    start, end = future_dates

    response = client.post(f"{API}/bookings", json=_payload(room, tourist, start, end, room_id="missing"))

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


def test_invalid_dates_return_422(client, room, tourist, future_dates):
    start, _ = future_dates

    response = client.post(f"{API}/bookings", json=_payload(room, tourist, start, start))

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_DATE_RANGE"


def test_past_check_in_returns_422(client, room, tourist):
    start = date.today() - timedelta(days=10)

    response = client.post(f"{API}/bookings", json=_payload(room, tourist, start, start + timedelta(days=2)))

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_malformed_body_uses_error_envelope(client, room, tourist):
    response = client.post(f"{API}/bookings", json={"room_id": room.id, "tourist_id": tourist.id})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "check_out_date" in str(error["details"])


def test_status_flow_and_history(client, room, tourist, future_dates):
    start, end = future_dates
    booking = client.post(f"{API}/bookings", json=_payload(room, tourist, start, end)).json()

    confirmed = client.patch(f"{API}/bookings/{booking['id']}/status", json={"status": "Confirmed"})
    invalid = client.patch(f"{API}/bookings/{booking['id']}/status", json={"status": "CheckedOut"})
    history = client.get(f"{API}/bookings/{booking['id']}/history")

    assert confirmed.status_code == 200
    assert confirmed.json()["confirmed_at"] is not None
    assert invalid.status_code == 409
    assert invalid.json()["error"]["details"] == {
        "current_status": "Confirmed",
        "requested_status": "CheckedOut",
    }
    assert [h["to_status"] for h in history.json()] == ["Pending", "Confirmed"]


def test_cancel_endpoint(client, room, tourist, future_dates):
    start, end = future_dates
    booking = client.post(f"{API}/bookings", json=_payload(room, tourist, start, end)).json()

    cancelled = client.post(f"{API}/bookings/{booking['id']}/cancel", json={"reason": "Sick"})
    again = client.post(f"{API}/bookings/{booking['id']}/cancel", json={"reason": "Sick"})
    rebooked = client.post(f"{API}/bookings", json=_payload(room, tourist, start, end))

    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "Cancelled"
    assert cancelled.json()["cancellation_reason"] == "Sick"
    assert again.status_code == 409
    assert rebooked.status_code == 201


def test_cancel_without_reason_is_rejected(client, room, tourist, future_dates):
    start, end = future_dates
    booking = client.post(f"{API}/bookings", json=_payload(room, tourist, start, end)).json()

    response = client.patch(f"{API}/bookings/{booking['id']}/status", json={"status": "Cancelled"})

    assert response.status_code == 422


def test_lookups(client, room, tourist, future_dates):
    start, end = future_dates
    booking = client.post(f"{API}/bookings", json=_payload(room, tourist, start, end)).json()

    by_id = client.get(f"{API}/bookings/{booking['id']}")
    by_reference = client.get(f"{API}/bookings/reference/{booking['booking_reference']}")
    listed = client.get(f"{API}/bookings", params={"room_id": room.id, "status": "Pending"})
    missing = client.get(f"{API}/bookings/missing")

    assert by_id.json()["id"] == booking["id"]
    assert by_reference.json()["id"] == booking["id"]
    assert [b["id"] for b in listed.json()] == [booking["id"]]
    assert missing.status_code == 404


def test_walk_in_endpoint(client, room, business):
    response = client.post(
        f"{API}/bookings/walk-in",
        json={
            "room_id": room.id,
            "check_out_date": (date.today() + timedelta(days=3)).isoformat(),
            "guest_count": 1,
            "guest_name": "Pedro Reyes",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "CheckedIn"
    assert body["booking_source"] == "walk-in"

    occupied = client.get(f"{API}/businesses/{business.id}/occupied")
    assert [b["id"] for b in occupied.json()] == [body["id"]]


def test_walk_in_without_guest_identity_returns_422(client, room):
    response = client.post(
        f"{API}/bookings/walk-in",
        json={
            "room_id": room.id,
            "check_out_date": (date.today() + timedelta(days=3)).isoformat(),
            "guest_count": 1,
        },
    )

    assert response.status_code == 422

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

API = "/api/v1"


def _book(client, room, tourist, start, end) -> dict:
    response = client.post(
        f"{API}/bookings",
        json={
            "room_id": room.id,
            "tourist_id": tourist.id,
            "check_in_date": start.isoformat(),
            "check_out_date": end.isoformat(),
            "guest_count": 1,
        },
    )
    assert response.status_code == 201
    return response.json()


# ==================== AVAILABILITY ====================

def test_availability_of_free_room(client, room):
    response = client.get(
        f"{API}/rooms/{room.id}/availability",
        params={"start_date": "2030-01-01", "end_date": "2030-01-05"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["available"] is True
    assert body["status"] == "AVAILABLE"
    assert body["blocking_reason"] is None
    assert body["conflicts"] == []


def test_availability_reports_booking_conflict(client, room, tourist, future_dates):
    start, end = future_dates
    booking = _book(client, room, tourist, start, end)

    same = client.get(
        f"{API}/rooms/{room.id}/availability",
        params={"start_date": start.isoformat(), "end_date": end.isoformat()},
    ).json()
    after = client.get(
        f"{API}/rooms/{room.id}/availability",
        params={"start_date": end.isoformat(), "end_date": (end + timedelta(days=3)).isoformat()},
    ).json()

    assert same["available"] is False
    assert same["status"] == "BLOCKED"
    assert same["conflicts"][0]["reference"] == booking["booking_reference"]
    assert after["available"] is True


def test_availability_requires_dates(client, room):
    response = client.get(f"{API}/rooms/{room.id}/availability", params={"start_date": "2030-01-01"})

    assert response.status_code == 422
    assert "end_date" in response.json()["error"]["details"]["field_errors"]


def test_availability_unknown_room(client):
    response = client.get(
        f"{API}/rooms/missing/availability",
        params={"start_date": "2030-01-01", "end_date": "2030-01-02"},
    )

    assert response.status_code == 404


def test_available_rooms_for_business(client, business, room, second_room, tourist, future_dates):
    start, end = future_dates
    _book(client, room, tourist, start, end)

    response = client.get(
        f"{API}/businesses/{business.id}/available-rooms",
        params={"start_date": start.isoformat(), "end_date": end.isoformat()},
    )

    assert [r["room_number"] for r in response.json()] == ["102"]


# ==================== BLOCKED DATES ====================

def test_blocked_dates_lifecycle(client, room):
    created = client.post(
        f"{API}/rooms/{room.id}/blocked-dates",
        json={"start_date": "2030-03-10", "end_date": "2030-03-15", "reason": "Renovation"},
    )
    assert created.status_code == 201
    blocked_id = created.json()["id"]

    check = client.get(
        f"{API}/rooms/{room.id}/availability",
        params={"start_date": "2030-03-12", "end_date": "2030-03-13"},
    ).json()
    assert check["available"] is False
    assert check["blocking_reason"] == "Renovation"

    listed = client.get(f"{API}/rooms/{room.id}/blocked-dates").json()
    assert [b["id"] for b in listed] == [blocked_id]

    deleted = client.delete(f"{API}/blocked-dates/{blocked_id}")
    assert deleted.status_code == 204
    assert client.get(f"{API}/rooms/{room.id}/blocked-dates").json() == []
    assert client.delete(f"{API}/blocked-dates/{blocked_id}").status_code == 404


def test_blocked_range_must_be_ordered(client, room):
    response = client.post(
        f"{API}/rooms/{room.id}/blocked-dates",
        json={"start_date": "2030-03-15", "end_date": "2030-03-15"},
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_DATE_RANGE"


# ==================== PRICES ====================

def test_single_date_price(client, room, weekend_pricing):
    response = client.get(f"{API}/rooms/{room.id}/price", params={"date": "2030-01-12"})

    assert response.status_code == 200
    body = response.json()
    assert body["day_name"] == "Saturday"
    assert body["price_type"] == "weekend"
    assert Decimal(body["price"]) == Decimal("1500.00")


def test_price_range(client, room, weekend_pricing):
    response = client.get(
        f"{API}/rooms/{room.id}/price-range",
        params={"start_date": "2030-01-11", "end_date": "2030-01-14"},
    )

    body = response.json()
    assert Decimal(body["total_price"]) == Decimal("4000.00")
    assert body["nights"] == 3
    assert body["currency"] == "PHP"
    assert [b["date"] for b in body["breakdown"]] == ["2030-01-11", "2030-01-12", "2030-01-13"]


def test_price_without_schedule_is_default(client, room):
    body = client.get(f"{API}/rooms/{room.id}/price", params={"date": "2030-01-07"}).json()

    assert body["price_type"] == "default"
    assert Decimal(body["price"]) == Decimal("1000.00")


def test_price_range_rejects_empty_range(client, room):
    response = client.get(
        f"{API}/rooms/{room.id}/price-range",
        params={"start_date": "2030-01-11", "end_date": "2030-01-11"},
    )

    assert response.status_code == 422


# ==================== SEASONAL PRICING ====================

def test_seasonal_pricing_upsert_and_resolution(client, business, room):
    business_wide = client.put(
        f"{API}/seasonal-pricing",
        json={"business_id": business.id, "base_price": "1200.00"},
    )
    assert business_wide.status_code == 201
    assert client.get(f"{API}/rooms/{room.id}/seasonal-pricing").json()["id"] == business_wide.json()["id"]

    room_level = client.put(
        f"{API}/seasonal-pricing",
        json={
            "business_id": business.id,
            "room_id": room.id,
            "base_price": "1000.00",
            "peak_season_price": "2500.00",
            "peak_season_months": [12, 1],
            "weekend_price": "1500.00",
            "weekend_days": ["saturday", "Sunday"],
        },
    )
    assert room_level.status_code == 201
    assert room_level.json()["peak_season_months"] == [1, 12]
    assert room_level.json()["weekend_days"] == ["Saturday", "Sunday"]

    updated = client.put(
        f"{API}/seasonal-pricing",
        json={"business_id": business.id, "room_id": room.id, "base_price": "1100.00"},
    )
    assert updated.status_code == 200
    assert updated.json()["id"] == room_level.json()["id"]

    listed = client.get(f"{API}/businesses/{business.id}/seasonal-pricing").json()
    assert len(listed) == 2

    price = client.get(f"{API}/rooms/{room.id}/price", params={"date": "2030-01-12"}).json()
    assert price["price_type"] == "base"
    assert Decimal(price["price"]) == Decimal("1100.00")


def test_seasonal_pricing_validation(client, business):
    bad_month = client.put(
        f"{API}/seasonal-pricing",
        json={"business_id": business.id, "base_price": "1000", "high_season_months": [13]},
    )
    bad_day = client.put(
        f"{API}/seasonal-pricing",
        json={"business_id": business.id, "base_price": "1000", "weekend_days": ["Caturday"]},
    )
    negative = client.put(
        f"{API}/seasonal-pricing",
        json={"business_id": business.id, "base_price": "-1"},
    )

    assert bad_month.status_code == 422
    assert bad_day.status_code == 422
    assert negative.status_code == 422


def test_seasonal_pricing_scope_checks(client, business, other_business, room):
    unknown_business = client.put(
        f"{API}/seasonal-pricing",
        json={"business_id": "missing", "base_price": "1000"},
    )
    foreign_room = client.put(
        f"{API}/seasonal-pricing",
        json={"business_id": other_business.id, "room_id": room.id, "base_price": "1000"},
    )

    assert unknown_business.status_code == 404
    assert foreign_room.status_code == 422


def test_seasonal_pricing_get_and_delete(client, business, room):
    created = client.put(
        f"{API}/seasonal-pricing",
        json={"business_id": business.id, "room_id": room.id, "base_price": "900"},
    ).json()

    fetched = client.get(f"{API}/seasonal-pricing/{created['id']}")
    deleted = client.delete(f"{API}/seasonal-pricing/{created['id']}")

    assert fetched.status_code == 200
    assert deleted.status_code == 204
    assert client.get(f"{API}/seasonal-pricing/{created['id']}").status_code == 404
    assert client.get(f"{API}/rooms/{room.id}/seasonal-pricing").json() is None


# ==================== FRONT DESK ====================

def test_arrivals_and_departures(client, business, room, tourist):
    start = date.today() + timedelta(days=30)
    booking = _book(client, room, tourist, start, start + timedelta(days=2))

    arrivals = client.get(f"{API}/businesses/{business.id}/arrivals", params={"on": start.isoformat()})
    departures = client.get(
        f"{API}/businesses/{business.id}/departures",
        params={"on": (start + timedelta(days=2)).isoformat()},
    )

    assert [b["id"] for b in arrivals.json()] == [booking["id"]]
    assert departures.json() == []


def test_front_desk_unknown_business(client):
    assert client.get(f"{API}/businesses/missing/occupied").status_code == 404

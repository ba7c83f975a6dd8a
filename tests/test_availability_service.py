from __future__ import annotations

from datetime import date, time
from decimal import Decimal

import pytest

from venture_booking.core.exceptions import (
    BusinessNotFoundError,
    InvalidDateRangeError,
    RoomNotFoundError,
    ValidationError,
)
from venture_booking.models.base.enums import AvailabilityStatus, BookingStatus, ConflictSource
from venture_booking.models.booking import Booking
from venture_booking.models.room import RoomBlockedDate
from venture_booking.services.booking import AvailabilityService


def _add_booking(db_session, room, check_in, check_out, status=BookingStatus.CONFIRMED, reference="BK-TEST-0001"):
    booking = Booking(
        booking_reference=reference,
        room_id=room.id,
        business_id=room.business_id,
        check_in_date=check_in,
        check_out_date=check_out,
        check_in_time=time(14, 0),
        check_out_time=time(12, 0),
        pax=1,
        total_nights=(check_out - check_in).days,
        total_amount=Decimal("0.00"),
        balance=Decimal("0.00"),
        status=status,
    )
    db_session.add(booking)
    db_session.commit()
    return booking


def _block(db_session, room, start, end, reason="Maintenance"):
    blocked = RoomBlockedDate(
        room_id=room.id,
        business_id=room.business_id,
        start_date=start,
        end_date=end,
        reason=reason,
    )
    db_session.add(blocked)
    db_session.commit()
    return blocked


def test_empty_room_is_available(db_session, room):
    result = AvailabilityService(db_session).check_availability(room.id, date(2030, 1, 1), date(2030, 1, 5))

    assert result.available
    assert result.status is AvailabilityStatus.AVAILABLE
    assert result.blocking_reason is None


def test_adjacent_booking_does_not_conflict(db_session, room):
    _add_booking(db_session, room, date(2030, 1, 1), date(2030, 1, 5))

    result = AvailabilityService(db_session).check_availability(room.id, date(2030, 1, 5), date(2030, 1, 10))

    assert result.available


def test_stay_ending_on_existing_check_in_does_not_conflict(db_session, room):
    _add_booking(db_session, room, date(2030, 1, 5), date(2030, 1, 10))

    result = AvailabilityService(db_session).check_availability(room.id, date(2030, 1, 1), date(2030, 1, 5))

    assert result.available


def test_overlapping_booking_conflicts_with_reference(db_session, room):
    _add_booking(db_session, room, date(2030, 1, 1), date(2030, 1, 5), reference="BK-ABC-1234")

    result = AvailabilityService(db_session).check_availability(room.id, date(2030, 1, 4), date(2030, 1, 6))

    assert not result.available
    assert result.status is AvailabilityStatus.BLOCKED
    assert result.conflicts[0].source is ConflictSource.BOOKING
    assert result.conflicts[0].reference == "BK-ABC-1234"
    assert "BK-ABC-1234" in result.blocking_reason


@pytest.mark.parametrize(
    "status",
    [BookingStatus.CANCELLED, BookingStatus.NO_SHOW, BookingStatus.REFUNDED],
)
def test_inactive_bookings_do_not_block(db_session, room, status):
    _add_booking(db_session, room, date(2030, 1, 1), date(2030, 1, 5), status=status)

    result = AvailabilityService(db_session).check_availability(room.id, date(2030, 1, 2), date(2030, 1, 3))

    assert result.available


def test_blocked_range_inside_request(db_session, room):
    _block(db_session, room, date(2030, 3, 10), date(2030, 3, 15), reason="Repainting")

    result = AvailabilityService(db_session).check_availability(room.id, date(2030, 3, 12), date(2030, 3, 13))

    assert not result.available
    assert result.blocking_reason == "Repainting"
    assert result.conflicts[0].source is ConflictSource.BLOCKED_DATE


def test_blocked_end_date_itself_is_blocked(db_session, room):
    _block(db_session, room, date(2030, 3, 10), date(2030, 3, 15))

    service = AvailabilityService(db_session)

    assert not service.check_availability(room.id, date(2030, 3, 15), date(2030, 3, 16)).available
    assert service.check_availability(room.id, date(2030, 3, 16), date(2030, 3, 18)).available
    assert service.check_availability(room.id, date(2030, 3, 8), date(2030, 3, 10)).available


def test_invalid_ranges(db_session, room):
    service = AvailabilityService(db_session)

    with pytest.raises(InvalidDateRangeError):
        service.check_availability(room.id, date(2030, 1, 5), date(2030, 1, 5))
    with pytest.raises(ValidationError):
        service.check_availability(room.id, None, date(2030, 1, 5))


def test_unknown_room(db_session):
    with pytest.raises(RoomNotFoundError):
        AvailabilityService(db_session).check_availability("nope", date(2030, 1, 1), date(2030, 1, 2))


def test_list_available_rooms(db_session, room, second_room):
    _add_booking(db_session, room, date(2030, 1, 1), date(2030, 1, 5))
    _block(db_session, second_room, date(2030, 2, 1), date(2030, 2, 3))
    service = AvailabilityService(db_session)

    january = service.list_available_rooms(room.business_id, date(2030, 1, 2), date(2030, 1, 4))
    february = service.list_available_rooms(room.business_id, date(2030, 2, 2), date(2030, 2, 4))
    later = service.list_available_rooms(room.business_id, date(2030, 1, 5), date(2030, 1, 7))

    assert [r.room_number for r in january] == ["102"]
    assert [r.room_number for r in february] == ["101"]
    assert [r.room_number for r in later] == ["101", "102"]


def test_list_available_rooms_unknown_business(db_session):
    with pytest.raises(BusinessNotFoundError):
        AvailabilityService(db_session).list_available_rooms("nope", date(2030, 1, 1), date(2030, 1, 2))


@pytest.mark.parametrize(
    "a, b",
    [
        ((date(2030, 1, 1), date(2030, 1, 5)), (date(2030, 1, 4), date(2030, 1, 8))),
        ((date(2030, 1, 1), date(2030, 1, 5)), (date(2030, 1, 5), date(2030, 1, 10))),
        ((date(2030, 1, 1), date(2030, 1, 10)), (date(2030, 1, 3), date(2030, 1, 4))),
        ((date(2030, 1, 1), date(2030, 1, 2)), (date(2030, 2, 1), date(2030, 2, 2))),
    ],
)
def test_booking_overlap_is_symmetric(db_session, room, second_room, a, b):
    _add_booking(db_session, room, *a, reference="BK-SYM-0001")
    _add_booking(db_session, second_room, *b, reference="BK-SYM-0002")
    service = AvailabilityService(db_session)

    b_against_a = service.check_availability(room.id, *b).available
    a_against_b = service.check_availability(second_room.id, *a).available

    assert b_against_a == a_against_b

"""
Booking status state machine.
"""

from typing import Dict, FrozenSet, Optional

from venture_booking.core.exceptions import InvalidStateTransitionError
from venture_booking.models.base.enums import BookingStatus

ALLOWED_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset(
        {BookingStatus.CHECKED_IN, BookingStatus.CANCELLED, BookingStatus.NO_SHOW}
    ),
    BookingStatus.CHECKED_IN: frozenset({BookingStatus.CHECKED_OUT}),
    BookingStatus.CHECKED_OUT: frozenset({BookingStatus.REFUNDED}),
    BookingStatus.CANCELLED: frozenset(),
    BookingStatus.NO_SHOW: frozenset(),
    BookingStatus.REFUNDED: frozenset(),
}

# Timestamp column stamped when a booking enters each status
STATUS_TIMESTAMP_FIELDS: Dict[BookingStatus, str] = {
    BookingStatus.CONFIRMED: "confirmed_at",
    BookingStatus.CHECKED_IN: "checked_in_at",
    BookingStatus.CHECKED_OUT: "checked_out_at",
    BookingStatus.CANCELLED: "cancelled_at",
    BookingStatus.NO_SHOW: "no_show_at",
    BookingStatus.REFUNDED: "refunded_at",
}


def can_transition(current: BookingStatus, requested: BookingStatus) -> bool:
    return requested in ALLOWED_TRANSITIONS.get(current, frozenset())


def ensure_transition(current: BookingStatus, requested: BookingStatus) -> None:
    if not can_transition(current, requested):
        raise InvalidStateTransitionError(
            BookingStatus(current).value,
            BookingStatus(requested).value,
        )


def timestamp_field(status: BookingStatus) -> Optional[str]:
    return STATUS_TIMESTAMP_FIELDS.get(status)

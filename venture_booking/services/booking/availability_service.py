"""
Room availability checks over half-open night intervals.

A requested stay [start, end) conflicts with an active booking
[check_in, check_out) or a blocked range [start_date, end_date] (both ends
blocked) when the two share at least one night. A guest checking out on
day N never blocks a check-in on day N.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from venture_booking.core.exceptions import (
    BusinessNotFoundError,
    InvalidDateRangeError,
    RoomNotFoundError,
    ValidationError,
)
from venture_booking.core.logging import get_logger
from venture_booking.models.base.enums import AvailabilityStatus, ConflictSource
from venture_booking.models.booking import Booking
from venture_booking.models.room import Room, RoomBlockedDate
from venture_booking.repositories.booking import BookingRepository
from venture_booking.repositories.business import BusinessRepository
from venture_booking.repositories.room import BlockedDateRepository, RoomRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class AvailabilityConflict:
    """An existing booking or blocked range overlapping a requested stay."""

    source: ConflictSource
    start_date: date
    end_date: date
    reference: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def from_booking(cls, booking: Booking) -> "AvailabilityConflict":
        return cls(
            source=ConflictSource.BOOKING,
            start_date=booking.check_in_date,
            end_date=booking.check_out_date,
            reference=booking.booking_reference,
            reason=f"Booked ({booking.booking_reference})",
        )

    @classmethod
    def from_blocked_date(cls, blocked: RoomBlockedDate) -> "AvailabilityConflict":
        return cls(
            source=ConflictSource.BLOCKED_DATE,
            start_date=blocked.start_date,
            end_date=blocked.end_date,
            reason=blocked.reason or "Room is blocked",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source.value,
            "reference": self.reference,
            "reason": self.reason,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
        }


@dataclass
class AvailabilityResult:
    room_id: str
    start_date: date
    end_date: date
    conflicts: List[AvailabilityConflict] = field(default_factory=list)

    @property
    def available(self) -> bool:
        return not self.conflicts

    @property
    def status(self) -> AvailabilityStatus:
        return AvailabilityStatus.AVAILABLE if self.available else AvailabilityStatus.BLOCKED

    @property
    def blocking_reason(self) -> Optional[str]:
        """Reason of the earliest conflict, for user-facing messages."""
        if self.available:
            return None
        return self.conflicts[0].reason


def validate_stay_range(start_date: Optional[date], end_date: Optional[date]) -> None:
    """
    Raises:
        ValidationError: If either date is missing
        InvalidDateRangeError: If end_date is not after start_date
    """
    missing = {
        name: ["This field is required"]
        for name, value in (("start_date", start_date), ("end_date", end_date))
        if value is None
    }
    if missing:
        raise ValidationError("Start and end dates are required", field_errors=missing)
    if end_date <= start_date:
        raise InvalidDateRangeError(start_date, end_date)


class AvailabilityService:
    """
    Read-only availability checks for rooms.

    Responsibilities:
    - Detect bookings and blocked ranges overlapping a requested stay
    - List the bookable rooms of a business for a date range
    """

    def __init__(self, session: Session):
        self.session = session
        self.room_repository = RoomRepository(session)
        self.booking_repository = BookingRepository(session)
        self.blocked_date_repository = BlockedDateRepository(session)
        self.business_repository = BusinessRepository(session)

    def find_conflicts(
        self,
        room: Room,
        start_date: date,
        end_date: date,
    ) -> List[AvailabilityConflict]:
        """Conflicts for an already-loaded room, ordered by start date."""
        conflicts = [
            AvailabilityConflict.from_blocked_date(blocked)
            for blocked in self.blocked_date_repository.find_overlapping(room.id, start_date, end_date)
        ]
        conflicts.extend(
            AvailabilityConflict.from_booking(booking)
            for booking in self.booking_repository.find_overlapping_active(room.id, start_date, end_date)
        )
        conflicts.sort(key=lambda c: c.start_date)
        return conflicts

    def check_availability(
        self,
        room_id: str,
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> AvailabilityResult:
        """
        Determine whether a room can be booked for [start_date, end_date).

        Raises:
            ValidationError: If a date is missing or the range is empty
            RoomNotFoundError: If the room does not exist
        """
        validate_stay_range(start_date, end_date)

        room = self.room_repository.get(room_id).one_or_none()
        if room is None:
            raise RoomNotFoundError(room_id)

        result = AvailabilityResult(
            room_id=room.id,
            start_date=start_date,
            end_date=end_date,
            conflicts=self.find_conflicts(room, start_date, end_date),
        )
        logger.debug(
            f"Availability for room {room.id} {start_date}..{end_date}: {result.status.value}",
            extra={"room_id": room.id, "conflicts": len(result.conflicts)},
        )
        return result

    def list_available_rooms(
        self,
        business_id: str,
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> List[Room]:
        validate_stay_range(start_date, end_date)

        if not self.business_repository.exists(business_id):
            raise BusinessNotFoundError(business_id)

        return self.room_repository.list_available(business_id, start_date, end_date).all()

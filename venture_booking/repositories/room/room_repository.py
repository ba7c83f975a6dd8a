"""
Room and blocked-date repositories.

Overlap queries use half-open night intervals. A blocked range covers
start_date through end_date inclusive, so it overlaps a requested
[start, end) when blocked.start_date < end and blocked.end_date >= start.
"""

from datetime import date

from sqlalchemy import and_, exists, select
from sqlalchemy.orm import Session

from venture_booking.models.base.enums import INACTIVE_BOOKING_STATUSES
from venture_booking.models.booking import Booking
from venture_booking.models.room import Room, RoomBlockedDate
from venture_booking.repositories.base.base_repository import BaseRepository
from venture_booking.repositories.base.query_result import QueryResult


def _blocked_overlap_clause(start: date, end: date):
    return and_(
        RoomBlockedDate.start_date < end,
        RoomBlockedDate.end_date >= start,
    )


def _booking_overlap_clause(start: date, end: date):
    return and_(
        Booking.check_in_date < end,
        Booking.check_out_date > start,
        Booking.status.not_in(list(INACTIVE_BOOKING_STATUSES)),
        Booking.is_deleted.is_(False),
    )


class RoomRepository(BaseRepository[Room]):
    """Repository for rooms."""

    def __init__(self, db: Session):
        super().__init__(Room, db)

    def get_for_update(self, room_id: str) -> QueryResult[Room]:
        """
        Load a room and lock its row until the transaction ends.

        Serializes concurrent booking attempts on the same room on
        databases that support row locks; a no-op on SQLite.
        """
        stmt = select(Room).where(Room.id == room_id).with_for_update()
        return QueryResult.single_or_empty(self.db.scalars(stmt).first())

    def list_available(self, business_id: str, start: date, end: date) -> QueryResult[Room]:
        """
        Rooms of a business with no active booking and no blocked range
        overlapping [start, end).
        """
        booked = exists().where(
            Booking.room_id == Room.id,
            _booking_overlap_clause(start, end),
        )
        blocked = exists().where(
            RoomBlockedDate.room_id == Room.id,
            _blocked_overlap_clause(start, end),
        )
        stmt = (
            select(Room)
            .where(Room.business_id == business_id, ~booked, ~blocked)
            .order_by(Room.room_number)
        )
        return QueryResult.rows(self.db.scalars(stmt).all())


class BlockedDateRepository(BaseRepository[RoomBlockedDate]):
    """Repository for explicit room unavailability windows."""

    def __init__(self, db: Session):
        super().__init__(RoomBlockedDate, db)

    def list_for_room(self, room_id: str) -> QueryResult[RoomBlockedDate]:
        stmt = (
            select(RoomBlockedDate)
            .where(RoomBlockedDate.room_id == room_id)
            .order_by(RoomBlockedDate.start_date)
        )
        return QueryResult.rows(self.db.scalars(stmt).all())

    def find_overlapping(
        self,
        room_id: str,
        start: date,
        end: date,
    ) -> QueryResult[RoomBlockedDate]:
        stmt = select(RoomBlockedDate).where(
            RoomBlockedDate.room_id == room_id,
            _blocked_overlap_clause(start, end),
        ).order_by(RoomBlockedDate.start_date)
        return QueryResult.rows(self.db.scalars(stmt).all())

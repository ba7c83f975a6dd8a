"""
Booking repository: lookups, overlap queries, listings and the
per-night occupancy rows backing the double-booking guard.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import and_, delete, func, select
from sqlalchemy.orm import Session

from venture_booking.models.base.enums import INACTIVE_BOOKING_STATUSES, BookingStatus
from venture_booking.models.booking import BookedNight, Booking, BookingStatusHistory
from venture_booking.repositories.base.base_repository import BaseRepository
from venture_booking.repositories.base.query_result import QueryResult
from venture_booking.utils.date_utils import iter_nights, now_utc


class BookingSearchCriteria:
    """Optional filters for booking listings."""

    def __init__(
        self,
        room_id: Optional[str] = None,
        tourist_id: Optional[str] = None,
        business_id: Optional[str] = None,
        status: Optional[BookingStatus] = None,
    ):
        self.room_id = room_id
        self.tourist_id = tourist_id
        self.business_id = business_id
        self.status = status


class BookingRepository(BaseRepository[Booking]):
    """
    Repository for booking operations.

    Provides:
    - Lookup by id and by reference
    - Active-booking overlap detection for a room
    - Filtered listings and front-desk views (arrivals, departures, occupied)
    - Night reservation rows and status history entries
    """

    def __init__(self, db: Session):
        super().__init__(Booking, db)

    # ==================== SEARCH & RETRIEVAL ====================

    def get(self, booking_id: str) -> QueryResult[Booking]:
        stmt = select(Booking).where(Booking.id == booking_id, Booking.is_deleted.is_(False))
        return QueryResult.single_or_empty(self.db.scalars(stmt).first())

    def get_for_update(self, booking_id: str) -> QueryResult[Booking]:
        """
        Load a booking fresh from the database and lock its row until the
        transaction ends.

        Attributes already held in the session are overwritten with the
        stored values, so a status change committed elsewhere is seen.
        """
        stmt = (
            select(Booking)
            .where(Booking.id == booking_id, Booking.is_deleted.is_(False))
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return QueryResult.single_or_empty(self.db.scalars(stmt).first())

    def find_by_reference(self, booking_reference: str) -> QueryResult[Booking]:
        stmt = select(Booking).where(
            Booking.booking_reference == booking_reference,
            Booking.is_deleted.is_(False),
        )
        return QueryResult.single_or_empty(self.db.scalars(stmt).first())

    def search(self, criteria: BookingSearchCriteria) -> QueryResult[Booking]:
        filters = [Booking.is_deleted.is_(False)]
        if criteria.room_id:
            filters.append(Booking.room_id == criteria.room_id)
        if criteria.tourist_id:
            filters.append(Booking.tourist_id == criteria.tourist_id)
        if criteria.business_id:
            filters.append(Booking.business_id == criteria.business_id)
        if criteria.status:
            filters.append(Booking.status == criteria.status)

        stmt = (
            select(Booking)
            .where(and_(*filters))
            .order_by(Booking.check_in_date, Booking.created_at)
        )
        return QueryResult.rows(self.db.scalars(stmt).all())

    def find_overlapping_active(
        self,
        room_id: str,
        start: date,
        end: date,
    ) -> QueryResult[Booking]:
        """Active bookings of the room whose [check_in, check_out) overlaps [start, end)."""
        stmt = select(Booking).where(
            Booking.room_id == room_id,
            Booking.check_in_date < end,
            Booking.check_out_date > start,
            Booking.status.not_in(list(INACTIVE_BOOKING_STATUSES)),
            Booking.is_deleted.is_(False),
        ).order_by(Booking.check_in_date)
        return QueryResult.rows(self.db.scalars(stmt).all())

    # ==================== FRONT DESK VIEWS ====================

    def _by_business(self, business_id: str, *conditions, order_by=None) -> QueryResult[Booking]:
        stmt = select(Booking).where(
            Booking.business_id == business_id,
            Booking.is_deleted.is_(False),
            *conditions,
        )
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        return QueryResult.rows(self.db.scalars(stmt).all())

    def arrivals_on(self, business_id: str, day: date) -> QueryResult[Booking]:
        return self._by_business(
            business_id,
            Booking.check_in_date == day,
            Booking.status.in_([BookingStatus.PENDING, BookingStatus.CONFIRMED]),
            order_by=Booking.check_in_time,
        )

    def departures_on(self, business_id: str, day: date) -> QueryResult[Booking]:
        return self._by_business(
            business_id,
            Booking.check_out_date == day,
            Booking.status == BookingStatus.CHECKED_IN,
            order_by=Booking.check_out_time,
        )

    def currently_occupied(self, business_id: str) -> QueryResult[Booking]:
        return self._by_business(
            business_id,
            Booking.status == BookingStatus.CHECKED_IN,
            order_by=Booking.check_out_date,
        )

    # ==================== NIGHTS & HISTORY ====================

    def reserve_nights(self, booking: Booking) -> List[BookedNight]:
        """
        Insert one occupancy row per night of the booking and flush.

        Raises IntegrityError when another booking already holds one of
        the nights on this room.
        """
        nights = [
            BookedNight(booking_id=booking.id, room_id=booking.room_id, night=night)
            for night in iter_nights(booking.check_in_date, booking.check_out_date)
        ]
        self.db.add_all(nights)
        self.db.flush()
        return nights

    def release_nights(self, booking: Booking) -> int:
        result = self.db.execute(
            delete(BookedNight).where(BookedNight.booking_id == booking.id)
        )
        self.db.flush()
        return result.rowcount or 0

    def record_status(
        self,
        booking: Booking,
        from_status: Optional[BookingStatus],
        to_status: BookingStatus,
        reason: Optional[str] = None,
    ) -> BookingStatusHistory:
        position = self.db.scalar(
            select(func.count(BookingStatusHistory.id)).where(
                BookingStatusHistory.booking_id == booking.id
            )
        )
        entry = BookingStatusHistory(
            booking_id=booking.id,
            from_status=from_status,
            to_status=to_status,
            reason=reason,
            sequence=position or 0,
            changed_at=now_utc(),
        )
        self.db.add(entry)
        self.db.flush()
        return entry

    def history(self, booking_id: str) -> QueryResult[BookingStatusHistory]:
        stmt = (
            select(BookingStatusHistory)
            .where(BookingStatusHistory.booking_id == booking_id)
            .order_by(BookingStatusHistory.sequence)
        )
        return QueryResult.rows(self.db.scalars(stmt).all())

"""
Blocked date service: explicit unavailability windows for rooms.
"""

from typing import List

from sqlalchemy.orm import Session

from venture_booking.core.exceptions import (
    BlockedDateNotFoundError,
    InvalidDateRangeError,
    RoomNotFoundError,
)
from venture_booking.core.logging import get_logger
from venture_booking.models.room import Room, RoomBlockedDate
from venture_booking.repositories.room import BlockedDateRepository, RoomRepository
from venture_booking.schemas.room import BlockedDateCreate

logger = get_logger(__name__)


class BlockedDateService:
    """Create, list and remove blocked ranges."""

    def __init__(self, session: Session):
        self.session = session
        self.room_repository = RoomRepository(session)
        self.blocked_date_repository = BlockedDateRepository(session)

    def _get_room(self, room_id: str) -> Room:
        room = self.room_repository.get(room_id).one_or_none()
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def list_for_room(self, room_id: str) -> List[RoomBlockedDate]:
        self._get_room(room_id)
        return self.blocked_date_repository.list_for_room(room_id).all()

    def create(self, room_id: str, request: BlockedDateCreate) -> RoomBlockedDate:
        """
        Block a room from start_date through end_date.

        Existing bookings are not affected; the range only prevents new ones.
        """
        if request.start_date >= request.end_date:
            raise InvalidDateRangeError(
                request.start_date,
                request.end_date,
                "Blocked range end date must be after its start date",
            )

        with self.blocked_date_repository.transaction():
            room = self._get_room(room_id)
            blocked = self.blocked_date_repository.add(
                RoomBlockedDate(
                    room_id=room.id,
                    business_id=room.business_id,
                    start_date=request.start_date,
                    end_date=request.end_date,
                    reason=request.reason,
                )
            )

        logger.info(
            f"Room {room_id} blocked {request.start_date}..{request.end_date}",
            extra={"room_id": room_id, "blocked_date_id": blocked.id},
        )
        return blocked

    def delete(self, blocked_date_id: str) -> None:
        with self.blocked_date_repository.transaction():
            blocked = self.blocked_date_repository.get(blocked_date_id).one_or_none()
            if blocked is None:
                raise BlockedDateNotFoundError(blocked_date_id)
            room_id = blocked.room_id
            self.blocked_date_repository.delete(blocked)

        logger.info(
            f"Blocked range {blocked_date_id} removed from room {room_id}",
            extra={"room_id": room_id, "blocked_date_id": blocked_date_id},
        )

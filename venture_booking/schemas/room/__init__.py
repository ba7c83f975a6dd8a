from venture_booking.schemas.room.availability import (
    AvailabilityConflictResponse,
    AvailabilityResponse,
    RoomResponse,
)
from venture_booking.schemas.room.blocked_date import BlockedDateCreate, BlockedDateResponse

__all__ = [
    "RoomResponse",
    "AvailabilityConflictResponse",
    "AvailabilityResponse",
    "BlockedDateCreate",
    "BlockedDateResponse",
]

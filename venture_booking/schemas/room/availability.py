"""
Room and availability schemas.
"""

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from venture_booking.models.base.enums import AvailabilityStatus, ConflictSource, RoomStatus
from venture_booking.schemas.common.base import BaseResponseSchema, BaseSchema

__all__ = [
    "RoomResponse",
    "AvailabilityConflictResponse",
    "AvailabilityResponse",
]


class RoomResponse(BaseResponseSchema):
    business_id: str
    room_number: str
    room_type: Optional[str] = None
    base_price: Decimal
    capacity: int
    status: RoomStatus


class AvailabilityConflictResponse(BaseSchema):
    source: ConflictSource
    reference: Optional[str] = Field(None, description="Booking reference, for booking conflicts")
    reason: Optional[str] = None
    start_date: Date
    end_date: Date


class AvailabilityResponse(BaseSchema):
    room_id: str
    start_date: Date
    end_date: Date
    available: bool
    status: AvailabilityStatus
    blocking_reason: Optional[str] = None
    conflicts: List[AvailabilityConflictResponse] = Field(default_factory=list)

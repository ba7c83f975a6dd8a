"""
Booking response schemas.
"""

from datetime import date as Date, datetime, time as Time
from decimal import Decimal
from typing import Optional

from pydantic import Field

from venture_booking.models.base.enums import BookingSource, BookingStatus, BookingType
from venture_booking.schemas.common.base import BaseResponseSchema, TimestampMixin

__all__ = [
    "BookingResponse",
    "BookingStatusHistoryResponse",
]


class BookingResponse(BaseResponseSchema, TimestampMixin):
    """Booking as returned by the API."""

    booking_reference: str
    room_id: str
    tourist_id: Optional[str] = None
    business_id: str

    booking_type: BookingType
    booking_source: BookingSource
    check_in_date: Date
    check_out_date: Date
    check_in_time: Time
    check_out_time: Time

    pax: int = Field(..., serialization_alias="guest_count")
    num_adults: int
    num_children: int
    num_infants: int
    trip_purpose: Optional[str] = None

    guest_name: Optional[str] = None
    guest_phone: Optional[str] = None
    guest_email: Optional[str] = None

    total_nights: int
    total_amount: Decimal
    balance: Decimal

    status: BookingStatus
    confirmed_at: Optional[datetime] = None
    checked_in_at: Optional[datetime] = None
    checked_out_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    no_show_at: Optional[datetime] = None
    refunded_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None


class BookingStatusHistoryResponse(BaseResponseSchema):
    booking_id: str
    from_status: Optional[BookingStatus] = None
    to_status: BookingStatus
    reason: Optional[str] = None
    changed_at: datetime

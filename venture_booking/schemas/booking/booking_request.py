"""
Booking request schemas.

Cross-field rules (date ordering, guest count, capacity, past dates) are
enforced by the booking service so they surface with domain error codes.
"""

from datetime import date as Date, time as Time
from typing import Optional

from pydantic import EmailStr, Field, model_validator

from venture_booking.models.base.enums import BookingStatus, BookingType
from venture_booking.schemas.common.base import BaseSchema

__all__ = [
    "BookingCreate",
    "WalkInBookingCreate",
    "BookingStatusUpdate",
    "BookingCancelRequest",
]


class BookingBase(BaseSchema):
    """Fields shared by online and walk-in booking requests."""

    room_id: str = Field(..., description="Room being booked")
    business_id: Optional[str] = Field(
        None,
        description="Owning business; defaults to the room's business",
    )

    booking_type: BookingType = Field(
        BookingType.OVERNIGHT,
        description="overnight or short-stay",
    )
    check_out_date: Date = Field(..., description="Check-out date (exclusive)")
    check_in_time: Optional[Time] = Field(
        None,
        description="Check-in time; defaults to the configured check-in time",
    )
    check_out_time: Optional[Time] = Field(
        None,
        description="Check-out time; defaults to the configured check-out time",
    )

    pax: int = Field(
        ...,
        alias="guest_count",
        description="Total number of guests",
    )
    num_adults: int = Field(0, ge=0)
    num_children: int = Field(0, ge=0)
    num_infants: int = Field(0, ge=0)
    trip_purpose: Optional[str] = Field(None, max_length=100)

    guest_name: Optional[str] = Field(None, max_length=255)
    guest_phone: Optional[str] = Field(None, max_length=20)
    guest_email: Optional[EmailStr] = None


class BookingCreate(BookingBase):
    """Online booking made by a registered tourist."""

    tourist_id: str = Field(..., description="Tourist making the booking")
    check_in_date: Date = Field(..., description="Check-in date")


class WalkInBookingCreate(BookingBase):
    """
    Booking registered at the front desk.

    The guest may not have an account, in which case their name is
    required. Check-in defaults to today.
    """

    tourist_id: Optional[str] = Field(None, description="Tourist account, if any")
    check_in_date: Optional[Date] = Field(None, description="Check-in date; defaults to today")
    immediate_checkin: bool = Field(
        True,
        description="Confirm and check the guest in right away",
    )

    @model_validator(mode="after")
    def require_guest_identity(self) -> "WalkInBookingCreate":
        if not self.tourist_id and not self.guest_name:
            raise ValueError("guest_name is required when no tourist_id is given")
        return self


class BookingStatusUpdate(BaseSchema):
    status: BookingStatus = Field(..., description="Requested status")
    reason: Optional[str] = Field(
        None,
        max_length=1000,
        description="Required when cancelling",
    )


class BookingCancelRequest(BaseSchema):
    reason: str = Field(..., min_length=1, max_length=1000)

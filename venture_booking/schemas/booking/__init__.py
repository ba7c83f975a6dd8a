from venture_booking.schemas.booking.booking_request import (
    BookingCancelRequest,
    BookingCreate,
    BookingStatusUpdate,
    WalkInBookingCreate,
)
from venture_booking.schemas.booking.booking_response import (
    BookingResponse,
    BookingStatusHistoryResponse,
)

__all__ = [
    "BookingCreate",
    "WalkInBookingCreate",
    "BookingStatusUpdate",
    "BookingCancelRequest",
    "BookingResponse",
    "BookingStatusHistoryResponse",
]

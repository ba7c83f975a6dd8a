from venture_booking.models.booking.booking import (
    BOOKING_REFERENCE_CONSTRAINT,
    BookedNight,
    Booking,
    BookingStatusHistory,
)

__all__ = ["Booking", "BookingStatusHistory", "BookedNight", "BOOKING_REFERENCE_CONSTRAINT"]

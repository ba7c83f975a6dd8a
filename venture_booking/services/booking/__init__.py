from venture_booking.services.booking.availability_service import (
    AvailabilityConflict,
    AvailabilityResult,
    AvailabilityService,
)
from venture_booking.services.booking.booking_pricing_service import (
    BookingPricingService,
    NightlyPrice,
    PriceQuote,
)
from venture_booking.services.booking.booking_service import BookingService

__all__ = [
    "AvailabilityConflict",
    "AvailabilityResult",
    "AvailabilityService",
    "BookingPricingService",
    "NightlyPrice",
    "PriceQuote",
    "BookingService",
]

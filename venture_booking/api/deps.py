"""
Request dependencies: database session and service instances.

Example usage in a router:
    @router.get("/bookings/{booking_id}")
    def read_booking(booking_id: str, service: BookingService = Depends(deps.get_booking_service)):
        ...
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from venture_booking.db.session import get_db
from venture_booking.services.booking import (
    AvailabilityService,
    BookingPricingService,
    BookingService,
)
from venture_booking.services.pricing import SeasonalPricingService
from venture_booking.services.room import BlockedDateService

__all__ = [
    "get_db",
    "get_availability_service",
    "get_pricing_service",
    "get_booking_service",
    "get_blocked_date_service",
    "get_seasonal_pricing_service",
]


def get_availability_service(db: Session = Depends(get_db)) -> AvailabilityService:
    return AvailabilityService(db)


def get_pricing_service(db: Session = Depends(get_db)) -> BookingPricingService:
    return BookingPricingService(db)


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    return BookingService(db)


def get_blocked_date_service(db: Session = Depends(get_db)) -> BlockedDateService:
    return BlockedDateService(db)


def get_seasonal_pricing_service(db: Session = Depends(get_db)) -> SeasonalPricingService:
    return SeasonalPricingService(db)

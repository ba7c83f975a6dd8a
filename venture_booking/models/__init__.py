"""
ORM models. Importing this package registers every table on Base.metadata.
"""

from venture_booking.models.base import Base, BaseModel, SoftDeleteMixin, TimestampModel
from venture_booking.models.booking import BookedNight, Booking, BookingStatusHistory
from venture_booking.models.business import Business, Tourist
from venture_booking.models.pricing import SeasonalPricing
from venture_booking.models.room import Room, RoomBlockedDate

__all__ = [
    "Base",
    "BaseModel",
    "TimestampModel",
    "SoftDeleteMixin",
    "Business",
    "Tourist",
    "Room",
    "RoomBlockedDate",
    "SeasonalPricing",
    "Booking",
    "BookingStatusHistory",
    "BookedNight",
]

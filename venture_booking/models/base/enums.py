"""
Enumerations shared by models and schemas.
"""

import enum


class RoomStatus(str, enum.Enum):
    """Coarse operational state of a room."""
    AVAILABLE = "Available"
    OCCUPIED = "Occupied"
    MAINTENANCE = "Maintenance"
    UNAVAILABLE = "Unavailable"


class BookingStatus(str, enum.Enum):
    """Booking lifecycle status."""
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CHECKED_IN = "CheckedIn"
    CHECKED_OUT = "CheckedOut"
    CANCELLED = "Cancelled"
    NO_SHOW = "NoShow"
    REFUNDED = "Refunded"


class BookingType(str, enum.Enum):
    OVERNIGHT = "overnight"
    SHORT_STAY = "short-stay"


class BookingSource(str, enum.Enum):
    ONLINE = "online"
    WALK_IN = "walk-in"


class PriceType(str, enum.Enum):
    """Which rule produced a night's price."""
    PEAK_SEASON = "peak_season"
    HIGH_SEASON = "high_season"
    LOW_SEASON = "low_season"
    WEEKEND = "weekend"
    BASE = "base"
    DEFAULT = "default"


class AvailabilityStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    BLOCKED = "BLOCKED"


class ConflictSource(str, enum.Enum):
    BOOKING = "booking"
    BLOCKED_DATE = "blocked_date"


# Bookings in these states no longer hold their nights
INACTIVE_BOOKING_STATUSES = frozenset(
    {BookingStatus.CANCELLED, BookingStatus.NO_SHOW, BookingStatus.REFUNDED}
)

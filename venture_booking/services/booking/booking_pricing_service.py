"""
Booking pricing service for nightly price calculations.

Each night of a stay is priced independently from the room's seasonal
pricing schedule, in this order of precedence:

    peak season > high season > low season > weekend > base price

A season or the weekend rate only applies when its price is configured.
Rooms without an active schedule are charged their flat base price.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from venture_booking.config import settings
from venture_booking.core.exceptions import InvalidDateRangeError, RoomNotFoundError
from venture_booking.core.logging import get_logger
from venture_booking.models.base.enums import PriceType
from venture_booking.models.pricing import SeasonalPricing
from venture_booking.models.room import Room
from venture_booking.repositories.pricing import SeasonalPricingRepository
from venture_booking.repositories.room import RoomRepository
from venture_booking.utils.date_utils import iter_nights, weekday_name

logger = get_logger(__name__)

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Normalize a price to a two-decimal Decimal."""
    return Decimal(str(value)).quantize(CENT)


@dataclass(frozen=True)
class NightlyPrice:
    """Price of a single night and the rule that produced it."""

    date: date
    day_name: str
    price: Decimal
    price_type: PriceType


@dataclass
class PriceQuote:
    """Priced stay with its per-night breakdown."""

    room_id: str
    start_date: date
    end_date: date
    currency: str
    breakdown: List[NightlyPrice] = field(default_factory=list)

    @property
    def nights(self) -> int:
        return len(self.breakdown)

    @property
    def total_price(self) -> Decimal:
        return sum((night.price for night in self.breakdown), Decimal("0.00")).quantize(CENT)


def price_for_night(
    day: date,
    schedule: Optional[SeasonalPricing],
    fallback_price,
) -> NightlyPrice:
    """
    Resolve the price of one night.

    Args:
        day: The night being priced
        schedule: Active seasonal pricing for the room, if any
        fallback_price: Room base price used when no schedule exists

    Returns:
        NightlyPrice with the matching price type
    """
    name = weekday_name(day)

    if schedule is None:
        return NightlyPrice(day, name, to_money(fallback_price), PriceType.DEFAULT)

    seasons = (
        (PriceType.PEAK_SEASON, schedule.peak_season_price, schedule.peak_season_months),
        (PriceType.HIGH_SEASON, schedule.high_season_price, schedule.high_season_months),
        (PriceType.LOW_SEASON, schedule.low_season_price, schedule.low_season_months),
    )
    for price_type, price, months in seasons:
        if price is not None and months and day.month in months:
            return NightlyPrice(day, name, to_money(price), price_type)

    if schedule.weekend_price is not None and name in (schedule.weekend_days or []):
        return NightlyPrice(day, name, to_money(schedule.weekend_price), PriceType.WEEKEND)

    return NightlyPrice(day, name, to_money(schedule.base_price), PriceType.BASE)


class BookingPricingService:
    """
    Service for booking pricing calculations.

    Responsibilities:
    - Resolve the pricing schedule that applies to a room
    - Price single nights and whole stays
    - Produce per-night breakdowns for display
    """

    def __init__(self, session: Session):
        """Initialize pricing service."""
        self.session = session
        self.room_repository = RoomRepository(session)
        self.pricing_repository = SeasonalPricingRepository(session)

    # ==================== SCHEDULE RESOLUTION ====================

    def _get_room(self, room_id: str) -> Room:
        room = self.room_repository.get(room_id).one_or_none()
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def resolve_schedule(self, room: Room) -> Optional[SeasonalPricing]:
        """Room-level schedule if active, else the business-wide one."""
        return self.pricing_repository.resolve_for_room(room.id, room.business_id).one_or_none()

    # ==================== PRICE CALCULATION ====================

    def price_for_date(self, room_id: str, day: date) -> NightlyPrice:
        room = self._get_room(room_id)
        return price_for_night(day, self.resolve_schedule(room), room.base_price)

    def price_for_range(self, room_id: str, start_date: date, end_date: date) -> PriceQuote:
        """
        Price every night in [start_date, end_date).

        Raises:
            InvalidDateRangeError: If end_date is not after start_date
            RoomNotFoundError: If the room does not exist
        """
        if end_date <= start_date:
            raise InvalidDateRangeError(start_date, end_date)

        room = self._get_room(room_id)
        return self.quote_stay(room, start_date, end_date)

    def quote_stay(self, room: Room, start_date: date, end_date: date) -> PriceQuote:
        schedule = self.resolve_schedule(room)
        quote = PriceQuote(
            room_id=room.id,
            start_date=start_date,
            end_date=end_date,
            currency=settings.CURRENCY,
            breakdown=[
                price_for_night(night, schedule, room.base_price)
                for night in iter_nights(start_date, end_date)
            ],
        )
        logger.debug(
            f"Priced {quote.nights} night(s) for room {room.id}: {quote.total_price}",
            extra={"room_id": room.id, "schedule_id": schedule.id if schedule else None},
        )
        return quote

    def quote_short_stay(self, room: Room, check_in_date: date, total_nights: int) -> Decimal:
        """Short stays are charged the check-in night's rate per counted night."""
        nightly = price_for_night(check_in_date, self.resolve_schedule(room), room.base_price)
        return (nightly.price * total_nights).quantize(CENT)

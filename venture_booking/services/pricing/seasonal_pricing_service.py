"""
Seasonal pricing service: maintains the price schedules read by the
booking pricing service.
"""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from venture_booking.core.exceptions import (
    BusinessNotFoundError,
    RoomNotFoundError,
    SeasonalPricingNotFoundError,
    ValidationError,
)
from venture_booking.core.logging import get_logger
from venture_booking.models.pricing import SeasonalPricing
from venture_booking.repositories.business import BusinessRepository
from venture_booking.repositories.pricing import SeasonalPricingRepository
from venture_booking.repositories.room import RoomRepository
from venture_booking.schemas.pricing import SeasonalPricingUpsert

logger = get_logger(__name__)

_SCHEDULE_FIELDS = (
    "base_price",
    "weekend_price",
    "weekend_days",
    "peak_season_price",
    "peak_season_months",
    "high_season_price",
    "high_season_months",
    "low_season_price",
    "low_season_months",
)


class SeasonalPricingService:
    """
    Seasonal pricing management.

    At most one active schedule is kept per room and one business-wide
    schedule per business; upserting into an occupied scope replaces its
    prices in place.
    """

    def __init__(self, session: Session):
        self.session = session
        self.pricing_repository = SeasonalPricingRepository(session)
        self.room_repository = RoomRepository(session)
        self.business_repository = BusinessRepository(session)

    def _validate_scope(self, business_id: str, room_id: Optional[str]) -> None:
        if not self.business_repository.exists(business_id):
            raise BusinessNotFoundError(business_id)
        if room_id is None:
            return

        room = self.room_repository.get(room_id).one_or_none()
        if room is None:
            raise RoomNotFoundError(room_id)
        if room.business_id != business_id:
            raise ValidationError(
                "Room does not belong to the given business",
                field_errors={"room_id": [f"Room {room_id} belongs to another business"]},
            )

    def upsert(self, request: SeasonalPricingUpsert) -> Tuple[SeasonalPricing, bool]:
        """
        Create or update the active schedule for the request's scope.

        Returns:
            The schedule and whether it was newly created
        """
        self._validate_scope(request.business_id, request.room_id)
        values = request.model_dump(include=set(_SCHEDULE_FIELDS))

        with self.pricing_repository.transaction():
            if request.room_id:
                existing = self.pricing_repository.find_active_for_room(request.room_id)
            else:
                existing = self.pricing_repository.find_active_for_business(request.business_id)

            pricing = existing.one_or_none()
            created = pricing is None
            if created:
                pricing = self.pricing_repository.add(
                    SeasonalPricing(
                        business_id=request.business_id,
                        room_id=request.room_id,
                        is_active=True,
                        **values,
                    )
                )
            else:
                for name, value in values.items():
                    setattr(pricing, name, value)
                self.session.flush()

        logger.info(
            f"Seasonal pricing {'created' if created else 'updated'} for "
            f"{'room ' + request.room_id if request.room_id else 'business ' + request.business_id}",
            extra={"pricing_id": pricing.id, "business_id": request.business_id, "room_id": request.room_id},
        )
        return pricing, created

    def get(self, pricing_id: str) -> SeasonalPricing:
        pricing = self.pricing_repository.get(pricing_id).one_or_none()
        if pricing is None:
            raise SeasonalPricingNotFoundError(pricing_id)
        return pricing

    def get_for_room(self, room_id: str) -> Optional[SeasonalPricing]:
        """The schedule in effect for a room: its own, else its business's, else None."""
        room = self.room_repository.get(room_id).one_or_none()
        if room is None:
            raise RoomNotFoundError(room_id)
        return self.pricing_repository.resolve_for_room(room.id, room.business_id).one_or_none()

    def list_for_business(self, business_id: str) -> List[SeasonalPricing]:
        if not self.business_repository.exists(business_id):
            raise BusinessNotFoundError(business_id)
        return self.pricing_repository.list_active_by_business(business_id).all()

    def delete(self, pricing_id: str) -> None:
        with self.pricing_repository.transaction():
            pricing = self.get(pricing_id)
            self.pricing_repository.delete(pricing)
        logger.info(f"Seasonal pricing {pricing_id} deleted", extra={"pricing_id": pricing_id})

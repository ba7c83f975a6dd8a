"""
Seasonal pricing repository.

A room resolves its schedule from its own active row first and falls
back to the active business-wide row (room_id NULL).
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from venture_booking.models.pricing import SeasonalPricing
from venture_booking.repositories.base.base_repository import BaseRepository
from venture_booking.repositories.base.query_result import QueryResult


class SeasonalPricingRepository(BaseRepository[SeasonalPricing]):
    """Repository for seasonal pricing schedules."""

    def __init__(self, db: Session):
        super().__init__(SeasonalPricing, db)

    def find_active_for_room(self, room_id: str) -> QueryResult[SeasonalPricing]:
        stmt = (
            select(SeasonalPricing)
            .where(
                SeasonalPricing.room_id == room_id,
                SeasonalPricing.is_active.is_(True),
            )
            .order_by(SeasonalPricing.updated_at.desc())
        )
        return QueryResult.single_or_empty(self.db.scalars(stmt).first())

    def find_active_for_business(self, business_id: str) -> QueryResult[SeasonalPricing]:
        """The business-wide schedule, ignoring room-level rows."""
        stmt = (
            select(SeasonalPricing)
            .where(
                SeasonalPricing.business_id == business_id,
                SeasonalPricing.room_id.is_(None),
                SeasonalPricing.is_active.is_(True),
            )
            .order_by(SeasonalPricing.updated_at.desc())
        )
        return QueryResult.single_or_empty(self.db.scalars(stmt).first())

    def resolve_for_room(self, room_id: str, business_id: str) -> QueryResult[SeasonalPricing]:
        result = self.find_active_for_room(room_id)
        if result:
            return result
        return self.find_active_for_business(business_id)

    def list_active_by_business(self, business_id: str) -> QueryResult[SeasonalPricing]:
        stmt = (
            select(SeasonalPricing)
            .where(
                SeasonalPricing.business_id == business_id,
                SeasonalPricing.is_active.is_(True),
            )
            .order_by(SeasonalPricing.room_id.is_(None).desc(), SeasonalPricing.created_at)
        )
        return QueryResult.rows(self.db.scalars(stmt).all())

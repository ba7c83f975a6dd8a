"""
Seasonal pricing schedule for a room or for a whole business.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import JSON, Boolean, CheckConstraint, ForeignKey, Index, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from venture_booking.models.base.base_model import TimestampModel

__all__ = ["SeasonalPricing"]


class SeasonalPricing(TimestampModel):
    """
    Month-based price schedule with an optional weekend rate.

    A row with room_id NULL applies to every room of the business that
    has no active room-level schedule of its own.

    Attributes:
        base_price: Nightly price outside any season or weekend
        weekend_price: Nightly price on weekend_days
        weekend_days: English weekday names, e.g. ["Saturday", "Sunday"]
        peak_season_price / peak_season_months: Highest priority season
        high_season_price / high_season_months: Second priority season
        low_season_price / low_season_months: Third priority season
        is_active: Only active schedules are consulted
    """

    __tablename__ = "seasonal_pricing"

    business_id: Mapped[str] = mapped_column(
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    room_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    weekend_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    weekend_days: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)

    peak_season_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    peak_season_months: Mapped[Optional[List[int]]] = mapped_column(JSON, nullable=True)

    high_season_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    high_season_months: Mapped[Optional[List[int]]] = mapped_column(JSON, nullable=True)

    low_season_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    low_season_months: Mapped[Optional[List[int]]] = mapped_column(JSON, nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    __table_args__ = (
        CheckConstraint("base_price >= 0", name="ck_seasonal_base_price_non_negative"),
        Index("ix_seasonal_pricing_business_room", "business_id", "room_id"),
    )

    def __repr__(self) -> str:
        scope = f"room={self.room_id}" if self.room_id else f"business={self.business_id}"
        return f"<SeasonalPricing({scope}, active={self.is_active})>"

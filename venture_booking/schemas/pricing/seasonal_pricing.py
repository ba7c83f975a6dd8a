"""
Seasonal pricing schemas with month and weekday validation.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator

from venture_booking.schemas.common.base import BaseResponseSchema, BaseSchema, TimestampMixin
from venture_booking.utils.date_utils import WEEKDAY_NAMES

__all__ = ["SeasonalPricingUpsert", "SeasonalPricingResponse"]


class SeasonalPricingBase(BaseSchema):
    business_id: str = Field(..., description="Owning business")
    room_id: Optional[str] = Field(
        None,
        description="Room the schedule applies to; omit for a business-wide schedule",
    )

    base_price: Decimal = Field(..., ge=0)
    weekend_price: Optional[Decimal] = Field(None, ge=0)
    weekend_days: Optional[List[str]] = Field(
        None,
        description="English weekday names, e.g. ['Saturday', 'Sunday']",
    )

    peak_season_price: Optional[Decimal] = Field(None, ge=0)
    peak_season_months: Optional[List[int]] = None
    high_season_price: Optional[Decimal] = Field(None, ge=0)
    high_season_months: Optional[List[int]] = None
    low_season_price: Optional[Decimal] = Field(None, ge=0)
    low_season_months: Optional[List[int]] = None

    @field_validator("weekend_days")
    @classmethod
    def validate_weekend_days(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return v
        normalized = []
        for name in v:
            day = name.strip().capitalize()
            if day not in WEEKDAY_NAMES:
                raise ValueError(f"Invalid weekday name: {name}")
            if day not in normalized:
                normalized.append(day)
        return normalized

    @field_validator("peak_season_months", "high_season_months", "low_season_months")
    @classmethod
    def validate_months(cls, v: Optional[List[int]]) -> Optional[List[int]]:
        if v is None:
            return v
        invalid = [month for month in v if not 1 <= month <= 12]
        if invalid:
            raise ValueError(f"Months must be between 1 and 12, got {invalid}")
        return sorted(set(v))


class SeasonalPricingUpsert(SeasonalPricingBase):
    """Create the active schedule for its scope or replace its prices."""


class SeasonalPricingResponse(SeasonalPricingBase, BaseResponseSchema, TimestampMixin):
    is_active: bool

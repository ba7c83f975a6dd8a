"""
Price query schemas.
"""

from datetime import date as Date
from decimal import Decimal
from typing import List

from pydantic import Field

from venture_booking.models.base.enums import PriceType
from venture_booking.schemas.common.base import BaseSchema

__all__ = ["NightlyPriceResponse", "RoomDatePriceResponse", "PriceQuoteResponse"]


class NightlyPriceResponse(BaseSchema):
    date: Date
    day_name: str
    price: Decimal
    price_type: PriceType


class RoomDatePriceResponse(NightlyPriceResponse):
    room_id: str


class PriceQuoteResponse(BaseSchema):
    room_id: str
    start_date: Date
    end_date: Date
    total_price: Decimal
    nights: int
    currency: str
    breakdown: List[NightlyPriceResponse] = Field(default_factory=list)

"""
Blocked date schemas.
"""

from datetime import date as Date
from typing import Optional

from pydantic import Field

from venture_booking.schemas.common.base import BaseResponseSchema, BaseSchema

__all__ = ["BlockedDateCreate", "BlockedDateResponse"]


class BlockedDateCreate(BaseSchema):
    """Both start_date and end_date are blocked."""

    start_date: Date
    end_date: Date
    reason: Optional[str] = Field(None, max_length=1000)


class BlockedDateResponse(BaseResponseSchema):
    room_id: str
    business_id: str
    start_date: Date
    end_date: Date
    reason: Optional[str] = None

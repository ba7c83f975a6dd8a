"""
Base schema classes with common fields and configurations.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BaseSchema",
    "BaseResponseSchema",
    "TimestampMixin",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    All request and response schemas inherit from this to share
    attribute loading, alias handling and whitespace stripping.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class BaseResponseSchema(BaseSchema):
    """Base schema for persisted entities returned by the API."""

    id: str = Field(..., description="Unique identifier")

from venture_booking.schemas.common.base import BaseResponseSchema, BaseSchema, TimestampMixin

__all__ = ["BaseSchema", "BaseResponseSchema", "TimestampMixin"]

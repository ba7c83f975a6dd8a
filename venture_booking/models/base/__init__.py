from venture_booking.models.base.base_model import Base, BaseModel, TimestampModel
from venture_booking.models.base.mixins import SoftDeleteMixin

__all__ = ["Base", "BaseModel", "TimestampModel", "SoftDeleteMixin"]

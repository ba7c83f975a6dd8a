"""
Business and tourist models.

Only the attributes the booking domain reads are mapped here; account,
profile and approval data live with their own services.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from venture_booking.models.base.base_model import TimestampModel

if TYPE_CHECKING:
    from venture_booking.models.room.room import Room

__all__ = ["Business", "Tourist"]


class Business(TimestampModel):
    """Accommodation business owning rooms."""

    __tablename__ = "businesses"

    business_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name of the business",
    )

    rooms: Mapped[List["Room"]] = relationship(
        "Room",
        back_populates="business",
        lazy="select",
    )


class Tourist(TimestampModel):
    """Registered guest account that can hold bookings."""

    __tablename__ = "tourists"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

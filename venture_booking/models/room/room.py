"""
Room and room blocked-date models.

A room's status is a coarse operational flag; date-level availability is
computed from bookings and blocked ranges, never stored on the room.
"""

from datetime import date as Date
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import (
    CheckConstraint,
    Date as SQLDate,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from venture_booking.models.base.base_model import TimestampModel
from venture_booking.models.base.enums import RoomStatus

if TYPE_CHECKING:
    from venture_booking.models.business.business import Business

__all__ = ["Room", "RoomBlockedDate"]


class Room(TimestampModel):
    """
    Bookable unit belonging to a business.

    Attributes:
        room_number: Number or label shown to guests and staff
        room_type: Free-form type (Deluxe, Standard, Family, ...)
        base_price: Flat nightly price used when no pricing schedule exists
        capacity: Maximum number of guests
        status: Operational status
    """

    __tablename__ = "rooms"

    business_id: Mapped[str] = mapped_column(
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    room_number: Mapped[str] = mapped_column(String(20), nullable=False)
    room_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    base_price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        comment="Flat nightly price",
    )

    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    status: Mapped[RoomStatus] = mapped_column(
        Enum(RoomStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=RoomStatus.AVAILABLE,
        index=True,
    )

    business: Mapped["Business"] = relationship(
        "Business",
        back_populates="rooms",
        lazy="select",
    )

    blocked_dates: Mapped[List["RoomBlockedDate"]] = relationship(
        "RoomBlockedDate",
        back_populates="room",
        cascade="all, delete-orphan",
        order_by="RoomBlockedDate.start_date",
        lazy="select",
    )

    __table_args__ = (
        CheckConstraint("capacity >= 1", name="ck_room_capacity_positive"),
        CheckConstraint("base_price >= 0", name="ck_room_base_price_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, number={self.room_number}, status={self.status})>"


class RoomBlockedDate(TimestampModel):
    """
    Explicit unavailability window for a room (maintenance, manual hold).

    Both start_date and end_date are blocked; the window covers every
    night from start_date through end_date.
    """

    __tablename__ = "room_blocked_dates"

    room_id: Mapped[str] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    business_id: Mapped[str] = mapped_column(
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    start_date: Mapped[Date] = mapped_column(SQLDate, nullable=False)
    end_date: Mapped[Date] = mapped_column(SQLDate, nullable=False)

    reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    room: Mapped["Room"] = relationship(
        "Room",
        back_populates="blocked_dates",
        lazy="select",
    )

    __table_args__ = (
        CheckConstraint("start_date < end_date", name="ck_blocked_date_range"),
        Index("ix_blocked_dates_room_range", "room_id", "start_date", "end_date"),
    )

    def __repr__(self) -> str:
        return f"<RoomBlockedDate(room={self.room_id}, {self.start_date}..{self.end_date})>"

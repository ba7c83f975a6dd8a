"""
Booking models for room reservations.

This module defines the booking entity with its lifecycle timestamps,
the append-only status history, and the per-night occupancy rows that
let the database reject double bookings.
"""

from datetime import date as Date, datetime, time as Time
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import (
    CheckConstraint,
    Date as SQLDate,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    Time as SQLTime,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from venture_booking.models.base.base_model import BaseModel, TimestampModel
from venture_booking.models.base.enums import BookingSource, BookingStatus, BookingType
from venture_booking.models.base.mixins import SoftDeleteMixin

if TYPE_CHECKING:
    from venture_booking.models.business.business import Tourist
    from venture_booking.models.room.room import Room

BOOKING_REFERENCE_CONSTRAINT = "uq_bookings_booking_reference"

__all__ = [
    "Booking",
    "BOOKING_REFERENCE_CONSTRAINT",
    "BookingStatusHistory",
    "BookedNight",
]


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Booking(TimestampModel, SoftDeleteMixin):
    """
    Reserved stay for a guest in a room.

    Bookings are never physically deleted; they move through the status
    lifecycle and are retained for history.

    Attributes:
        booking_reference: Unique human-readable reference (BK-<base36>-<rand>)
        room_id / tourist_id / business_id: Owning references
        booking_type: overnight or short-stay
        check_in_date / check_out_date: Stay interval, check-out exclusive
        check_in_time / check_out_time: Times of day used for night counting
        pax: Number of guests
        total_nights: Nights charged
        total_amount: Price of the stay
        balance: Amount still to be paid
        status: Current lifecycle status
        confirmed_at ... refunded_at: Transition timestamps
        cancellation_reason: Required when cancelled
    """

    __tablename__ = "bookings"

    booking_reference: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Unique human-readable booking reference",
    )

    # Foreign Keys
    room_id: Mapped[str] = mapped_column(
        ForeignKey("rooms.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    tourist_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("tourists.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Registered guest; NULL for walk-ins without an account",
    )

    business_id: Mapped[str] = mapped_column(
        ForeignKey("businesses.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # Stay
    booking_type: Mapped[BookingType] = mapped_column(
        Enum(BookingType, values_callable=_enum_values),
        nullable=False,
        default=BookingType.OVERNIGHT,
    )

    check_in_date: Mapped[Date] = mapped_column(SQLDate, nullable=False, index=True)
    check_out_date: Mapped[Date] = mapped_column(SQLDate, nullable=False, index=True)
    check_in_time: Mapped[Time] = mapped_column(SQLTime, nullable=False)
    check_out_time: Mapped[Time] = mapped_column(SQLTime, nullable=False)

    # Guests
    pax: Mapped[int] = mapped_column(Integer, nullable=False)
    num_adults: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    num_children: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    num_infants: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    trip_purpose: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    guest_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    guest_phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    guest_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    booking_source: Mapped[BookingSource] = mapped_column(
        Enum(BookingSource, values_callable=_enum_values),
        nullable=False,
        default=BookingSource.ONLINE,
        index=True,
    )

    # Pricing (precision: 10, scale: 2)
    total_nights: Mapped[int] = mapped_column(Integer, nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    balance: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    # Status
    status: Mapped[BookingStatus] = mapped_column(
        Enum(BookingStatus, values_callable=_enum_values),
        nullable=False,
        default=BookingStatus.PENDING,
        index=True,
    )

    confirmed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    checked_in_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    checked_out_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    cancelled_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    no_show_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    refunded_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    cancellation_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Bumped on every UPDATE; a stale write fails instead of overwriting
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    room: Mapped["Room"] = relationship("Room", lazy="select")
    tourist: Mapped[Optional["Tourist"]] = relationship("Tourist", lazy="select")

    status_history: Mapped[List["BookingStatusHistory"]] = relationship(
        "BookingStatusHistory",
        back_populates="booking",
        cascade="all, delete-orphan",
        order_by="BookingStatusHistory.sequence",
        lazy="select",
    )

    nights: Mapped[List["BookedNight"]] = relationship(
        "BookedNight",
        back_populates="booking",
        cascade="all, delete-orphan",
        lazy="select",
    )

    __table_args__ = (
        UniqueConstraint("booking_reference", name=BOOKING_REFERENCE_CONSTRAINT),
        CheckConstraint("check_out_date > check_in_date", name="ck_booking_date_order"),
        CheckConstraint("pax >= 1", name="ck_booking_pax_positive"),
        CheckConstraint("total_amount >= 0", name="ck_booking_amount_non_negative"),
        Index("ix_bookings_room_dates", "room_id", "check_in_date", "check_out_date"),
    )
    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self) -> str:
        return f"<Booking(ref={self.booking_reference}, status={self.status})>"


class BookingStatusHistory(BaseModel):
    """Append-only record of every status a booking has entered."""

    __tablename__ = "booking_status_history"

    booking_id: Mapped[str] = mapped_column(
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    from_status: Mapped[Optional[BookingStatus]] = mapped_column(
        Enum(BookingStatus, values_callable=_enum_values),
        nullable=True,
    )
    to_status: Mapped[BookingStatus] = mapped_column(
        Enum(BookingStatus, values_callable=_enum_values),
        nullable=False,
    )
    reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    sequence: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Position of the entry within its booking history",
    )

    changed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    booking: Mapped["Booking"] = relationship(
        "Booking",
        back_populates="status_history",
        lazy="select",
    )


class BookedNight(BaseModel):
    """
    One occupied night of an active booking.

    The (room_id, night) unique constraint is the storage-level guard
    against two bookings holding the same night on the same room.
    """

    __tablename__ = "booked_nights"

    booking_id: Mapped[str] = mapped_column(
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_id: Mapped[str] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
    )
    night: Mapped[Date] = mapped_column(SQLDate, nullable=False)

    booking: Mapped["Booking"] = relationship(
        "Booking",
        back_populates="nights",
        lazy="select",
    )

    __table_args__ = (
        UniqueConstraint("room_id", "night", name="uq_booked_nights_room_night"),
    )

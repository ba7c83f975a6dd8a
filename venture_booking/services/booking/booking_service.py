"""
Core booking service: creation, lifecycle transitions and queries.

Creation runs as one unit of work: the room row is locked, availability is
checked, the stay is priced, and the booking is inserted together with one
occupancy row per night. The (room_id, night) uniqueness of those rows
rejects a concurrent booking that slipped past the availability check.
"""

from datetime import date, time
from typing import Callable, List, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from venture_booking.config import settings
from venture_booking.core.exceptions import (
    BookingConflictError,
    BookingNotFoundError,
    BusinessNotFoundError,
    DatabaseError,
    InvalidStateTransitionError,
    RoomNotFoundError,
    TouristNotFoundError,
    ValidationError,
)
from venture_booking.core.logging import get_logger
from venture_booking.models.base.enums import (
    INACTIVE_BOOKING_STATUSES,
    BookingSource,
    BookingStatus,
    BookingType,
    RoomStatus,
)
from venture_booking.models.booking import BOOKING_REFERENCE_CONSTRAINT, Booking, BookingStatusHistory
from venture_booking.models.room import Room
from venture_booking.repositories.booking import BookingRepository, BookingSearchCriteria
from venture_booking.repositories.business import BusinessRepository, TouristRepository
from venture_booking.repositories.room import RoomRepository
from venture_booking.schemas.booking import BookingCreate, WalkInBookingCreate
from venture_booking.services.base import track_performance
from venture_booking.services.booking.availability_service import (
    AvailabilityService,
    validate_stay_range,
)
from venture_booking.services.booking.booking_pricing_service import BookingPricingService
from venture_booking.services.booking.booking_transitions import ensure_transition, timestamp_field
from venture_booking.utils.date_utils import count_nights, now_utc, parse_time, today_in
from venture_booking.utils.string_utils import generate_booking_reference

BookingRequest = Union[BookingCreate, WalkInBookingCreate]


def _is_reference_collision(error: IntegrityError) -> bool:
    """
    True when the violated constraint is the booking reference one.

    psycopg2 reports the constraint name in its diagnostics. SQLite names
    only the offending table column in the message.
    """
    diag = getattr(error.orig, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None)
    if constraint_name:
        return constraint_name == BOOKING_REFERENCE_CONSTRAINT

    message = str(error.orig)
    return BOOKING_REFERENCE_CONSTRAINT in message or "bookings.booking_reference" in message


class BookingService:
    """
    Booking lifecycle operations.

    Responsibilities:
    - Validate and create online and walk-in bookings atomically
    - Apply status transitions with timestamps and history
    - Keep room occupancy status in step with check-in and check-out
    - Booking lookups and front-desk listings
    """

    def __init__(self, session: Session, today: Optional[Callable[[], date]] = None):
        self.session = session
        self.booking_repository = BookingRepository(session)
        self.room_repository = RoomRepository(session)
        self.business_repository = BusinessRepository(session)
        self.tourist_repository = TouristRepository(session)
        self.availability_service = AvailabilityService(session)
        self.pricing_service = BookingPricingService(session)
        self._today = today or (lambda: today_in(settings.TIMEZONE))
        self._logger = get_logger(f"{__name__}.{self.__class__.__name__}")

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _validate_stay(self, check_in_date: date, check_out_date: date, pax: int) -> None:
        validate_stay_range(check_in_date, check_out_date)

        if pax < 1:
            raise ValidationError(
                "Guest count must be at least 1",
                field_errors={"guest_count": ["Must be greater than or equal to 1"]},
            )

        if check_in_date < self._today():
            raise ValidationError(
                "Check-in date cannot be in the past",
                field_errors={"check_in_date": ["Must be today or later"]},
            )

    def _validate_parties(self, request: BookingRequest, room: Room) -> str:
        """Check the tourist and business references; returns the business id."""
        if request.tourist_id and not self.tourist_repository.exists(request.tourist_id):
            raise TouristNotFoundError(request.tourist_id)

        business_id = request.business_id or room.business_id
        if business_id != room.business_id:
            if not self.business_repository.exists(business_id):
                raise BusinessNotFoundError(business_id)
            raise ValidationError(
                "Room does not belong to the given business",
                field_errors={"business_id": [f"Room {room.id} belongs to another business"]},
            )

        if request.pax > room.capacity:
            raise ValidationError(
                f"Room capacity is {room.capacity} guest(s)",
                field_errors={"guest_count": [f"Must not exceed room capacity of {room.capacity}"]},
            )
        return business_id

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    @track_performance("create_booking")
    def create_booking(self, request: BookingCreate) -> Booking:
        """
        Create a Pending online booking.

        Raises:
            ValidationError: Bad dates, guest count or capacity
            RoomNotFoundError / TouristNotFoundError / BusinessNotFoundError
            BookingConflictError: The room is taken for part of the stay
        """
        self._validate_stay(request.check_in_date, request.check_out_date, request.pax)
        return self._create(request, request.check_in_date, BookingSource.ONLINE)

    @track_performance("create_walk_in_booking")
    def create_walk_in(self, request: WalkInBookingCreate) -> Booking:
        """
        Register a walk-in guest.

        With immediate_checkin the booking is confirmed and checked in
        within the same transaction and the room becomes Occupied.
        """
        check_in_date = request.check_in_date or self._today()
        self._validate_stay(check_in_date, request.check_out_date, request.pax)

        after_insert = None
        if request.immediate_checkin:
            def after_insert(booking: Booking) -> None:
                self._apply_transition(booking, BookingStatus.CONFIRMED, "Walk-in")
                self._apply_transition(booking, BookingStatus.CHECKED_IN, "Walk-in")

        return self._create(request, check_in_date, BookingSource.WALK_IN, after_insert)

    def _create(
        self,
        request: BookingRequest,
        check_in_date: date,
        source: BookingSource,
        after_insert: Optional[Callable[[Booking], None]] = None,
    ) -> Booking:
        max_attempts = settings.BOOKING_REFERENCE_MAX_ATTEMPTS

        for attempt in range(1, max_attempts + 1):
            reference = generate_booking_reference(settings.BOOKING_REFERENCE_PREFIX)
            try:
                with self.booking_repository.transaction():
                    booking = self._insert_booking(request, check_in_date, source, reference)
                    if after_insert:
                        after_insert(booking)
            except IntegrityError as e:
                if not _is_reference_collision(e):
                    self._logger.warning(
                        f"Night reservation lost to a concurrent booking on room {request.room_id}",
                        extra={"room_id": request.room_id},
                    )
                    raise BookingConflictError(
                        "Room was booked by another request for the selected dates",
                        room_id=request.room_id,
                    ) from e
                self._logger.warning(
                    f"Booking reference collision on attempt {attempt}/{max_attempts}",
                    extra={"booking_reference": reference},
                )
                continue

            self._logger.info(
                f"Booking {booking.booking_reference} created",
                extra={
                    "booking_id": booking.id,
                    "booking_reference": booking.booking_reference,
                    "room_id": booking.room_id,
                    "status": booking.status.value,
                },
            )
            return booking

        raise DatabaseError(
            "Could not generate a unique booking reference",
            details={"attempts": max_attempts},
        )

    def _insert_booking(
        self,
        request: BookingRequest,
        check_in_date: date,
        source: BookingSource,
        reference: str,
    ) -> Booking:
        room = self.room_repository.get_for_update(request.room_id).one_or_none()
        if room is None:
            raise RoomNotFoundError(request.room_id)

        business_id = self._validate_parties(request, room)

        conflicts = self.availability_service.find_conflicts(room, check_in_date, request.check_out_date)
        if conflicts:
            raise BookingConflictError(
                conflicts=[conflict.to_dict() for conflict in conflicts],
                room_id=room.id,
            )

        check_in_time = request.check_in_time or parse_time(settings.DEFAULT_CHECK_IN_TIME)
        check_out_time = request.check_out_time or parse_time(settings.DEFAULT_CHECK_OUT_TIME)
        total_nights, total_amount = self._price_stay(
            room, request.booking_type, check_in_date, request.check_out_date,
            check_in_time, check_out_time,
        )

        booking = Booking(
            booking_reference=reference,
            room_id=room.id,
            tourist_id=request.tourist_id,
            business_id=business_id,
            booking_type=request.booking_type,
            booking_source=source,
            check_in_date=check_in_date,
            check_out_date=request.check_out_date,
            check_in_time=check_in_time,
            check_out_time=check_out_time,
            pax=request.pax,
            num_adults=request.num_adults,
            num_children=request.num_children,
            num_infants=request.num_infants,
            trip_purpose=request.trip_purpose,
            guest_name=request.guest_name,
            guest_phone=request.guest_phone,
            guest_email=request.guest_email,
            total_nights=total_nights,
            total_amount=total_amount,
            balance=total_amount,
            status=BookingStatus.PENDING,
        )
        self.booking_repository.add(booking)
        self.booking_repository.reserve_nights(booking)
        self.booking_repository.record_status(booking, None, BookingStatus.PENDING)
        return booking

    def _price_stay(
        self,
        room: Room,
        booking_type: BookingType,
        check_in_date: date,
        check_out_date: date,
        check_in_time: time,
        check_out_time: time,
    ):
        if booking_type == BookingType.SHORT_STAY:
            nights = count_nights(check_in_date, check_out_date, check_in_time, check_out_time)
            return nights, self.pricing_service.quote_short_stay(room, check_in_date, nights)

        quote = self.pricing_service.quote_stay(room, check_in_date, check_out_date)
        return count_nights(check_in_date, check_out_date), quote.total_price

    # -------------------------------------------------------------------------
    # Status transitions
    # -------------------------------------------------------------------------

    def _apply_transition(
        self,
        booking: Booking,
        new_status: BookingStatus,
        reason: Optional[str] = None,
    ) -> None:
        ensure_transition(booking.status, new_status)

        reason = reason.strip() if reason else None
        if new_status == BookingStatus.CANCELLED and not reason:
            raise ValidationError(
                "A cancellation reason is required",
                field_errors={"reason": ["This field is required when cancelling"]},
            )

        previous = booking.status
        booking.status = new_status
        setattr(booking, timestamp_field(new_status), now_utc())
        if new_status == BookingStatus.CANCELLED:
            booking.cancellation_reason = reason

        try:
            self.session.flush()
        except StaleDataError as e:
            raise InvalidStateTransitionError(
                previous.value,
                new_status.value,
                message="Booking was changed by another request; reload it and try again",
            ) from e

        if new_status in INACTIVE_BOOKING_STATUSES:
            self.booking_repository.release_nights(booking)

        if new_status == BookingStatus.CHECKED_IN:
            booking.room.status = RoomStatus.OCCUPIED
        elif new_status == BookingStatus.CHECKED_OUT:
            booking.room.status = RoomStatus.AVAILABLE

        self.session.flush()
        self.booking_repository.record_status(booking, previous, new_status, reason)

    @track_performance("transition_booking")
    def transition(
        self,
        booking_id: str,
        new_status: BookingStatus,
        reason: Optional[str] = None,
    ) -> Booking:
        """
        Move a booking to a new status.

        Raises:
            BookingNotFoundError: Unknown booking
            InvalidStateTransitionError: Status not reachable from the current one,
                or the booking changed in another transaction meanwhile
            ValidationError: Cancelling without a reason
        """
        with self.booking_repository.transaction():
            booking = self.booking_repository.get_for_update(booking_id).one_or_none()
            if booking is None:
                raise BookingNotFoundError(booking_id)
            previous = booking.status
            self._apply_transition(booking, new_status, reason)

        self._logger.info(
            f"Booking {booking.booking_reference} moved from {previous.value} to {new_status.value}",
            extra={
                "booking_id": booking.id,
                "booking_reference": booking.booking_reference,
                "from_status": previous.value,
                "to_status": new_status.value,
            },
        )
        return booking

    def cancel(self, booking_id: str, reason: str) -> Booking:
        return self.transition(booking_id, BookingStatus.CANCELLED, reason)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_booking(self, booking_id: str) -> Booking:
        booking = self.booking_repository.get(booking_id).one_or_none()
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def get_by_reference(self, booking_reference: str) -> Booking:
        booking = self.booking_repository.find_by_reference(booking_reference).one_or_none()
        if booking is None:
            raise BookingNotFoundError(booking_reference)
        return booking

    def list_bookings(
        self,
        room_id: Optional[str] = None,
        tourist_id: Optional[str] = None,
        business_id: Optional[str] = None,
        status: Optional[BookingStatus] = None,
    ) -> List[Booking]:
        criteria = BookingSearchCriteria(
            room_id=room_id,
            tourist_id=tourist_id,
            business_id=business_id,
            status=status,
        )
        return self.booking_repository.search(criteria).all()

    def get_history(self, booking_id: str) -> List[BookingStatusHistory]:
        self.get_booking(booking_id)
        return self.booking_repository.history(booking_id).all()

    def _require_business(self, business_id: str) -> None:
        if not self.business_repository.exists(business_id):
            raise BusinessNotFoundError(business_id)

    def arrivals(self, business_id: str, day: Optional[date] = None) -> List[Booking]:
        """Pending or confirmed bookings checking in on the given day (default today)."""
        self._require_business(business_id)
        return self.booking_repository.arrivals_on(business_id, day or self._today()).all()

    def departures(self, business_id: str, day: Optional[date] = None) -> List[Booking]:
        """Checked-in bookings due to check out on the given day (default today)."""
        self._require_business(business_id)
        return self.booking_repository.departures_on(business_id, day or self._today()).all()

    def occupied(self, business_id: str) -> List[Booking]:
        self._require_business(business_id)
        return self.booking_repository.currently_occupied(business_id).all()

"""
Booking endpoints: creation, walk-ins, status transitions and lookups.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from venture_booking.api import deps
from venture_booking.models.base.enums import BookingStatus
from venture_booking.schemas.booking import (
    BookingCancelRequest,
    BookingCreate,
    BookingResponse,
    BookingStatusHistoryResponse,
    BookingStatusUpdate,
    WalkInBookingCreate,
)
from venture_booking.services.booking import BookingService

router = APIRouter(prefix="/bookings", tags=["Booking Management"])


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    service: BookingService = Depends(deps.get_booking_service),
):
    """Create a Pending booking; 409 when the room is taken for any of the nights."""
    return service.create_booking(payload)


@router.post("/walk-in", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_walk_in_booking(
    payload: WalkInBookingCreate,
    service: BookingService = Depends(deps.get_booking_service),
):
    """Register a front-desk guest, checking them in right away by default."""
    return service.create_walk_in(payload)


@router.get("", response_model=List[BookingResponse])
def list_bookings(
    room_id: Optional[str] = None,
    tourist_id: Optional[str] = None,
    business_id: Optional[str] = None,
    status_filter: Optional[BookingStatus] = Query(None, alias="status"),
    service: BookingService = Depends(deps.get_booking_service),
):
    return service.list_bookings(
        room_id=room_id,
        tourist_id=tourist_id,
        business_id=business_id,
        status=status_filter,
    )


@router.get("/reference/{reference}", response_model=BookingResponse)
def get_booking_by_reference(
    reference: str,
    service: BookingService = Depends(deps.get_booking_service),
):
    return service.get_by_reference(reference)


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: str,
    service: BookingService = Depends(deps.get_booking_service),
):
    return service.get_booking(booking_id)


@router.get("/{booking_id}/history", response_model=List[BookingStatusHistoryResponse])
def get_booking_history(
    booking_id: str,
    service: BookingService = Depends(deps.get_booking_service),
):
    return service.get_history(booking_id)


@router.patch("/{booking_id}/status", response_model=BookingResponse)
def update_booking_status(
    booking_id: str,
    payload: BookingStatusUpdate,
    service: BookingService = Depends(deps.get_booking_service),
):
    """Move a booking along its lifecycle; 409 for transitions the lifecycle does not allow."""
    return service.transition(booking_id, payload.status, payload.reason)


@router.post("/{booking_id}/cancel", response_model=BookingResponse)
def cancel_booking(
    booking_id: str,
    payload: BookingCancelRequest,
    service: BookingService = Depends(deps.get_booking_service),
):
    return service.cancel(booking_id, payload.reason)

"""
Room endpoints: availability, prices, blocked dates and the schedule in effect.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from venture_booking.api import deps
from venture_booking.schemas.pricing import (
    PriceQuoteResponse,
    RoomDatePriceResponse,
    SeasonalPricingResponse,
)
from venture_booking.schemas.room import (
    AvailabilityResponse,
    BlockedDateCreate,
    BlockedDateResponse,
)
from venture_booking.services.booking import AvailabilityService, BookingPricingService
from venture_booking.services.pricing import SeasonalPricingService
from venture_booking.services.room import BlockedDateService

router = APIRouter(tags=["Rooms"])


@router.get("/rooms/{room_id}/availability", response_model=AvailabilityResponse)
def check_room_availability(
    room_id: str,
    start_date: Optional[date] = Query(None, description="First night of the stay"),
    end_date: Optional[date] = Query(None, description="Check-out date (exclusive)"),
    service: AvailabilityService = Depends(deps.get_availability_service),
):
    result = service.check_availability(room_id, start_date, end_date)
    return AvailabilityResponse.model_validate(result)


@router.get("/rooms/{room_id}/price", response_model=RoomDatePriceResponse)
def get_room_price(
    room_id: str,
    day: date = Query(..., alias="date"),
    service: BookingPricingService = Depends(deps.get_pricing_service),
):
    nightly = service.price_for_date(room_id, day)
    return RoomDatePriceResponse(
        room_id=room_id,
        date=nightly.date,
        day_name=nightly.day_name,
        price=nightly.price,
        price_type=nightly.price_type,
    )


@router.get("/rooms/{room_id}/price-range", response_model=PriceQuoteResponse)
def get_room_price_range(
    room_id: str,
    start_date: date = Query(...),
    end_date: date = Query(...),
    service: BookingPricingService = Depends(deps.get_pricing_service),
):
    quote = service.price_for_range(room_id, start_date, end_date)
    return PriceQuoteResponse.model_validate(quote)


@router.get("/rooms/{room_id}/seasonal-pricing", response_model=Optional[SeasonalPricingResponse])
def get_room_seasonal_pricing(
    room_id: str,
    service: SeasonalPricingService = Depends(deps.get_seasonal_pricing_service),
):
    """The room's own schedule, else its business-wide one, else null."""
    return service.get_for_room(room_id)


@router.get("/rooms/{room_id}/blocked-dates", response_model=List[BlockedDateResponse])
def list_blocked_dates(
    room_id: str,
    service: BlockedDateService = Depends(deps.get_blocked_date_service),
):
    return service.list_for_room(room_id)


@router.post(
    "/rooms/{room_id}/blocked-dates",
    response_model=BlockedDateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_blocked_date(
    room_id: str,
    payload: BlockedDateCreate,
    service: BlockedDateService = Depends(deps.get_blocked_date_service),
):
    return service.create(room_id, payload)


@router.delete("/blocked-dates/{blocked_date_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_blocked_date(
    blocked_date_id: str,
    service: BlockedDateService = Depends(deps.get_blocked_date_service),
):
    service.delete(blocked_date_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Business-level views: bookable rooms and the front-desk lists.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from venture_booking.api import deps
from venture_booking.schemas.booking import BookingResponse
from venture_booking.schemas.pricing import SeasonalPricingResponse
from venture_booking.schemas.room import RoomResponse
from venture_booking.services.booking import AvailabilityService, BookingService
from venture_booking.services.pricing import SeasonalPricingService

router = APIRouter(prefix="/businesses/{business_id}", tags=["Businesses"])


@router.get("/available-rooms", response_model=List[RoomResponse])
def list_available_rooms(
    business_id: str,
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    service: AvailabilityService = Depends(deps.get_availability_service),
):
    return service.list_available_rooms(business_id, start_date, end_date)


@router.get("/arrivals", response_model=List[BookingResponse])
def list_arrivals(
    business_id: str,
    on: Optional[date] = Query(None, description="Defaults to today"),
    service: BookingService = Depends(deps.get_booking_service),
):
    return service.arrivals(business_id, on)


@router.get("/departures", response_model=List[BookingResponse])
def list_departures(
    business_id: str,
    on: Optional[date] = Query(None, description="Defaults to today"),
    service: BookingService = Depends(deps.get_booking_service),
):
    return service.departures(business_id, on)


@router.get("/occupied", response_model=List[BookingResponse])
def list_occupied(
    business_id: str,
    service: BookingService = Depends(deps.get_booking_service),
):
    return service.occupied(business_id)


@router.get("/seasonal-pricing", response_model=List[SeasonalPricingResponse])
def list_business_seasonal_pricing(
    business_id: str,
    service: SeasonalPricingService = Depends(deps.get_seasonal_pricing_service),
):
    return service.list_for_business(business_id)

"""
API v1 Router - Main Entry Point
Aggregates all v1 API endpoints of the booking backend
"""

from fastapi import APIRouter

from venture_booking.api.v1 import bookings, businesses, rooms, seasonal_pricing

router = APIRouter(
    responses={
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
        500: {"description": "Internal Server Error"},
    }
)

router.include_router(bookings.router)
router.include_router(rooms.router)
router.include_router(businesses.router)
router.include_router(seasonal_pricing.router)

"""
Seasonal pricing schedule endpoints.
"""

from fastapi import APIRouter, Depends, Response, status

from venture_booking.api import deps
from venture_booking.schemas.pricing import SeasonalPricingResponse, SeasonalPricingUpsert
from venture_booking.services.pricing import SeasonalPricingService

router = APIRouter(prefix="/seasonal-pricing", tags=["Seasonal Pricing"])


@router.put("", response_model=SeasonalPricingResponse)
def upsert_seasonal_pricing(
    payload: SeasonalPricingUpsert,
    response: Response,
    service: SeasonalPricingService = Depends(deps.get_seasonal_pricing_service),
):
    """Create the active schedule for the room or business, or replace its prices."""
    pricing, created = service.upsert(payload)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return pricing


@router.get("/{pricing_id}", response_model=SeasonalPricingResponse)
def get_seasonal_pricing(
    pricing_id: str,
    service: SeasonalPricingService = Depends(deps.get_seasonal_pricing_service),
):
    return service.get(pricing_id)


@router.delete("/{pricing_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_seasonal_pricing(
    pricing_id: str,
    service: SeasonalPricingService = Depends(deps.get_seasonal_pricing_service),
):
    service.delete(pricing_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

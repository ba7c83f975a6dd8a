from venture_booking.schemas.pricing.price_quote import (
    NightlyPriceResponse,
    PriceQuoteResponse,
    RoomDatePriceResponse,
)
from venture_booking.schemas.pricing.seasonal_pricing import (
    SeasonalPricingResponse,
    SeasonalPricingUpsert,
)

__all__ = [
    "NightlyPriceResponse",
    "RoomDatePriceResponse",
    "PriceQuoteResponse",
    "SeasonalPricingUpsert",
    "SeasonalPricingResponse",
]

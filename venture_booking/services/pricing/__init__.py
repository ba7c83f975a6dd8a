from venture_booking.services.pricing.seasonal_pricing_service import SeasonalPricingService

__all__ = ["SeasonalPricingService"]

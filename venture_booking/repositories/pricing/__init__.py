from venture_booking.repositories.pricing.seasonal_pricing_repository import SeasonalPricingRepository

__all__ = ["SeasonalPricingRepository"]

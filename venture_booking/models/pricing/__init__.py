from venture_booking.models.pricing.seasonal_pricing import SeasonalPricing

__all__ = ["SeasonalPricing"]

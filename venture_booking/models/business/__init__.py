from venture_booking.models.business.business import Business, Tourist

__all__ = ["Business", "Tourist"]

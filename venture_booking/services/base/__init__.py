from venture_booking.services.base.performance import track_performance

__all__ = ["track_performance"]

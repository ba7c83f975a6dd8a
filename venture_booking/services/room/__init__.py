from venture_booking.services.room.blocked_date_service import BlockedDateService

__all__ = ["BlockedDateService"]

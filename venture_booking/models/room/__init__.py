from venture_booking.models.room.room import Room, RoomBlockedDate

__all__ = ["Room", "RoomBlockedDate"]

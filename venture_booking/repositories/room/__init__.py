from venture_booking.repositories.room.room_repository import BlockedDateRepository, RoomRepository

__all__ = ["RoomRepository", "BlockedDateRepository"]

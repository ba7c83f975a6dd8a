from venture_booking.repositories.business.business_repository import BusinessRepository, TouristRepository

__all__ = ["BusinessRepository", "TouristRepository"]

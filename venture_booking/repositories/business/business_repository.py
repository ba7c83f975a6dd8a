"""
Lookups for the businesses and tourists that bookings reference.
"""

from sqlalchemy.orm import Session

from venture_booking.models.business import Business, Tourist
from venture_booking.repositories.base.base_repository import BaseRepository


class BusinessRepository(BaseRepository[Business]):
    def __init__(self, db: Session):
        super().__init__(Business, db)


class TouristRepository(BaseRepository[Tourist]):
    def __init__(self, db: Session):
        super().__init__(Tourist, db)

from __future__ import annotations

import os

os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FORMAT"] = "text"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENABLE_STRUCTURED_LOGGING"] = "false"

from datetime import date, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from venture_booking.db.base import Base, import_models
from venture_booking.db.init_db import drop_db
from venture_booking.db.session import get_db
from venture_booking.main import create_app
from venture_booking.models.business import Business, Tourist
from venture_booking.models.pricing import SeasonalPricing
from venture_booking.models.room import Room
from venture_booking.services.booking import BookingService

import_models()

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fixed "today" for service-level tests; 2030-01-07 is a Monday
TODAY = date(2030, 1, 1)
MONDAY = date(2030, 1, 7)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        drop_db(bind=engine)


@pytest.fixture
def client(db_session):
    app = create_app()

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    return TestClient(app)


@pytest.fixture
def business(db_session) -> Business:
    business = Business(business_name="Naga Riverside Inn")
    db_session.add(business)
    db_session.commit()
    return business


@pytest.fixture
def other_business(db_session) -> Business:
    business = Business(business_name="Camsur Lake Lodge")
    db_session.add(business)
    db_session.commit()
    return business


@pytest.fixture
def tourist(db_session) -> Tourist:
    tourist = Tourist(first_name="Maria", last_name="Santos", email="maria@example.com")
    db_session.add(tourist)
    db_session.commit()
    return tourist


@pytest.fixture
def room(db_session, business) -> Room:
    room = Room(
        business_id=business.id,
        room_number="101",
        room_type="Deluxe",
        base_price=Decimal("1000.00"),
        capacity=2,
    )
    db_session.add(room)
    db_session.commit()
    return room


@pytest.fixture
def second_room(db_session, business) -> Room:
    room = Room(
        business_id=business.id,
        room_number="102",
        room_type="Family",
        base_price=Decimal("1800.00"),
        capacity=4,
    )
    db_session.add(room)
    db_session.commit()
    return room


@pytest.fixture
def weekend_pricing(db_session, room) -> SeasonalPricing:
    pricing = SeasonalPricing(
        business_id=room.business_id,
        room_id=room.id,
        base_price=Decimal("1000.00"),
        weekend_price=Decimal("1500.00"),
        weekend_days=["Saturday", "Sunday"],
        is_active=True,
    )
    db_session.add(pricing)
    db_session.commit()
    return pricing


@pytest.fixture
def booking_service(db_session) -> BookingService:
    return BookingService(db_session, today=lambda: TODAY)


@pytest.fixture
def future_dates():
    """A two-night stay safely after the real current date."""
    start = date.today() + timedelta(days=60)
    return start, start + timedelta(days=2)

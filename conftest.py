"""Fixtures shared by the whole test suite."""

from datetime import date
from decimal import Decimal

import pytest

from apps.bookings.application.command_handlers import (
    CreateFlightBookingCommand,
    CreateHotelBookingCommand,
)
from apps.customers.application.command_handlers import RegisterCustomerCommand
from config.bootstrap import bootstrap


@pytest.fixture
def core():
    """A freshly wired core, independent of the one Django built at startup"""
    return bootstrap()


@pytest.fixture
def customer(db, core):
    return core.handle(RegisterCustomerCommand(
        name="Aigerim Sadykova",
        email="aigerim@example.com",
        phone="+77010000001",
        passport_number="N1234567",
    ))


@pytest.fixture
def make_flight(core, customer):
    def _make(price="750.00", customer_id=None, **overrides):
        fields = {
            "customer_id": customer_id or customer.id,
            "booking_date": date(2026, 5, 1),
            "total_price": Decimal(price),
            "flight_number": "KC901",
            "origin": "ALA",
            "destination": "IST",
            "seat_class": "ECONOMY",
        }
        fields.update(overrides)
        return core.handle(CreateFlightBookingCommand(**fields))

    return _make


@pytest.fixture
def make_hotel(core, customer):
    def _make(price="800.00", nights=3, customer_id=None, **overrides):
        fields = {
            "customer_id": customer_id or customer.id,
            "booking_date": date(2026, 5, 2),
            "total_price": Decimal(price),
            "hotel_name": "Pera Palace",
            "nights": nights,
            "room_type": "DELUXE",
        }
        fields.update(overrides)
        return core.handle(CreateHotelBookingCommand(**fields))

    return _make

"""Booking variant construction and the lifecycle state machine."""

from datetime import date, datetime
from decimal import Decimal
from itertools import product

import pytest

from apps.bookings.domain.entities import (
    Booking,
    BookingType,
    FlightBookingParams,
    FlightDetails,
    HotelBookingParams,
    HotelDetails,
    RoomType,
    SeatClass,
    create_flight_booking,
    create_hotel_booking,
)
from apps.bookings.domain.events import BookingStatusChanged
from apps.bookings.domain.lifecycle import (
    TRANSITIONS,
    BookingAction,
    BookingStatus,
    allowed_actions,
    next_status,
)
from shared.domain.exceptions import InvalidInput, InvalidStateTransition


def flight_params(**overrides):
    fields = dict(
        customer_id=1,
        booking_date=date(2026, 5, 1),
        total_price=Decimal("750.00"),
        flight_number="KC901",
        origin="ALA",
        destination="IST",
    )
    fields.update(overrides)
    return FlightBookingParams(**fields)


def hotel_params(**overrides):
    fields = dict(
        customer_id=1,
        booking_date=date(2026, 5, 2),
        total_price=Decimal("800.00"),
        hotel_name="Pera Palace",
        nights=3,
    )
    fields.update(overrides)
    return HotelBookingParams(**fields)


# ===== Construction =====

def test_flight_booking_defaults():
    booking = create_flight_booking(flight_params())
    assert booking.status is BookingStatus.PENDING
    assert booking.booking_type is BookingType.FLIGHT
    assert booking.flight == FlightDetails("KC901", "ALA", "IST", SeatClass.ECONOMY)
    assert booking.hotel is None
    assert booking.total_price.amount == Decimal("750.00")


def test_hotel_booking_defaults():
    booking = create_hotel_booking(hotel_params())
    assert booking.booking_type is BookingType.HOTEL
    assert booking.hotel.room_type is RoomType.STANDARD
    assert booking.hotel.nights == 3
    assert booking.flight is None


def test_datetime_booking_date_is_reduced_to_date():
    booking = create_flight_booking(flight_params(booking_date=datetime(2026, 5, 1, 10, 30)))
    assert booking.booking_date == date(2026, 5, 1)


@pytest.mark.parametrize("field, value", [
    ("total_price", Decimal("-0.01")),
    ("total_price", Decimal("1.001")),
    ("total_price", None),
    ("booking_date", None),
    ("booking_date", "2026-05-01"),
    ("customer_id", 0),
    ("flight_number", ""),
    ("origin", "   "),
    ("destination", None),
    ("seat_class", "PREMIUM"),
])
def test_invalid_flight_field_named(field, value):
    with pytest.raises(InvalidInput) as exc:
        create_flight_booking(flight_params(**{field: value}))
    assert exc.value.field == field


@pytest.mark.parametrize("nights", [0, 366, -1, True, 2.5])
def test_nights_out_of_range_rejected_not_clamped(nights):
    with pytest.raises(InvalidInput) as exc:
        create_hotel_booking(hotel_params(nights=nights))
    assert exc.value.field == "nights"


@pytest.mark.parametrize("nights", [1, 365])
def test_nights_bounds_inclusive(nights):
    assert create_hotel_booking(hotel_params(nights=nights)).hotel.nights == nights


@pytest.mark.parametrize("field, value", [("hotel_name", ""), ("room_type", "PENTHOUSE")])
def test_invalid_hotel_field_named(field, value):
    with pytest.raises(InvalidInput) as exc:
        create_hotel_booking(hotel_params(**{field: value}))
    assert exc.value.field == field


def test_zero_price_allowed():
    assert create_flight_booking(flight_params(total_price=0)).total_price.amount == Decimal("0.00")


def test_extension_must_match_type():
    with pytest.raises(InvalidInput) as exc:
        Booking(
            customer_id=1,
            booking_date=date(2026, 5, 1),
            total_price=Decimal("10"),
            booking_type=BookingType.FLIGHT,
            extension=HotelDetails("Rixos", 2),
        )
    assert exc.value.field == "extension"


# ===== Lifecycle =====

@pytest.mark.parametrize("status, action", list(product(BookingStatus, BookingAction)))
def test_transition_table_is_exhaustive(status, action):
    if (status, action) in TRANSITIONS:
        assert next_status(status, action) is TRANSITIONS[(status, action)]
    else:
        with pytest.raises(InvalidStateTransition) as exc:
            next_status(status, action)
        assert exc.value.to_dict()["current_status"] == status.value
        assert exc.value.to_dict()["action"] == action.value


def test_table_contents():
    assert TRANSITIONS == {
        (BookingStatus.PENDING, BookingAction.CONFIRM): BookingStatus.CONFIRMED,
        (BookingStatus.PENDING, BookingAction.CANCEL): BookingStatus.CANCELLED,
        (BookingStatus.CONFIRMED, BookingAction.CANCEL): BookingStatus.CANCELLED,
        (BookingStatus.CONFIRMED, BookingAction.COMPLETE): BookingStatus.COMPLETED,
    }


def test_terminal_statuses_allow_nothing():
    assert allowed_actions(BookingStatus.CANCELLED) == []
    assert allowed_actions(BookingStatus.COMPLETED) == []
    assert allowed_actions(BookingStatus.PENDING) == [BookingAction.CONFIRM, BookingAction.CANCEL]


def test_apply_records_event_and_returns_previous():
    booking = create_flight_booking(flight_params())
    booking.id = 10
    assert booking.confirm() is BookingStatus.PENDING
    assert booking.status is BookingStatus.CONFIRMED
    [event] = booking.events
    assert isinstance(event, BookingStatusChanged)
    assert (event.old_status, event.new_status, event.action) == ("PENDING", "CONFIRMED", "confirm")


def test_refused_transition_leaves_booking_unchanged():
    booking = create_hotel_booking(hotel_params())
    booking.cancel()
    booking.clear_events()
    with pytest.raises(InvalidStateTransition):
        booking.confirm()
    assert booking.status is BookingStatus.CANCELLED
    assert booking.events == []


def test_repeated_confirm_is_refused():
    booking = create_flight_booking(flight_params())
    booking.confirm()
    with pytest.raises(InvalidStateTransition):
        booking.confirm()

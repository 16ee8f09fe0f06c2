"""
Booking Domain Entities

Core business entities for the booking domain:
- Booking: Aggregate root, a tagged variant over flight and hotel details
- FlightDetails / HotelDetails: The type-specific extension of a booking
- FlightBookingParams / HotelBookingParams: Fully specified constructor input
- BookingDetails: Read model joining a booking with its customer's contact data

A booking's type is fixed at creation. Code that depends on the variant
dispatches on ``booking_type`` or on the details class with ``match``.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from shared.domain.base import Aggregate, ValueObject
from shared.domain.exceptions import InvalidInput
from shared.domain.validation import (
    require_choice,
    require_date,
    require_id,
    require_int,
    require_money,
    require_text,
)
from shared.domain.value_objects import Money
from apps.bookings.domain.lifecycle import BookingAction, BookingStatus, is_terminal, next_status

MIN_NIGHTS = 1
MAX_NIGHTS = 365


class BookingType(Enum):
    """Discriminator of the booking variant"""
    FLIGHT = 'FLIGHT'
    HOTEL = 'HOTEL'


class SeatClass(Enum):
    ECONOMY = 'ECONOMY'
    BUSINESS = 'BUSINESS'
    FIRST_CLASS = 'FIRST_CLASS'


class RoomType(Enum):
    STANDARD = 'STANDARD'
    DELUXE = 'DELUXE'
    SUITE = 'SUITE'
    PRESIDENTIAL = 'PRESIDENTIAL'


@dataclass(frozen=True)
class FlightDetails(ValueObject):
    """Flight extension of a booking"""
    flight_number: str
    origin: str
    destination: str
    seat_class: SeatClass = SeatClass.ECONOMY

    def __post_init__(self):
        object.__setattr__(self, 'flight_number', require_text(self.flight_number, 'flight_number', 20))
        object.__setattr__(self, 'origin', require_text(self.origin, 'origin', 100))
        object.__setattr__(self, 'destination', require_text(self.destination, 'destination', 100))
        object.__setattr__(
            self, 'seat_class',
            require_choice(self.seat_class, SeatClass, 'seat_class', default=SeatClass.ECONOMY),
        )


@dataclass(frozen=True)
class HotelDetails(ValueObject):
    """
    Hotel extension of a booking

    ``nights`` must already be within [1, 365]; it is never clamped.
    """
    hotel_name: str
    nights: int
    room_type: RoomType = RoomType.STANDARD

    def __post_init__(self):
        object.__setattr__(self, 'hotel_name', require_text(self.hotel_name, 'hotel_name', 150))
        object.__setattr__(
            self, 'room_type',
            require_choice(self.room_type, RoomType, 'room_type', default=RoomType.STANDARD),
        )
        object.__setattr__(self, 'nights', require_int(self.nights, 'nights', MIN_NIGHTS, MAX_NIGHTS))


BookingExtension = FlightDetails | HotelDetails


def extension_type(extension: BookingExtension) -> BookingType:
    """Discriminator matching an extension"""
    match extension:
        case FlightDetails():
            return BookingType.FLIGHT
        case HotelDetails():
            return BookingType.HOTEL
        case _:
            raise InvalidInput('extension', "must be flight or hotel details")


@dataclass(kw_only=True, eq=False)
class Booking(Aggregate):
    """
    Booking Aggregate Root

    A single reserved flight or hotel stay owned by a customer.

    Key invariants:
    - Exactly one extension is attached and it matches ``booking_type``
    - total_price is a non-negative amount with two decimal places
    - Status changes only through ``apply`` and only along the lifecycle table
    - Nothing but the status changes after creation
    """

    customer_id: int
    booking_date: date
    total_price: Money
    booking_type: BookingType
    extension: BookingExtension
    status: BookingStatus = BookingStatus.PENDING

    def __post_init__(self):
        self.customer_id = require_id(self.customer_id, 'customer_id')
        self.booking_date = require_date(self.booking_date, 'booking_date')
        self.total_price = require_money(self.total_price, 'total_price')
        self.booking_type = require_choice(self.booking_type, BookingType, 'type')
        self.status = require_choice(self.status, BookingStatus, 'status')

        if extension_type(self.extension) is not self.booking_type:
            raise InvalidInput(
                'extension',
                f"{type(self.extension).__name__} does not match booking type {self.booking_type.value}"
            )

    @property
    def flight(self) -> FlightDetails | None:
        return self.extension if isinstance(self.extension, FlightDetails) else None

    @property
    def hotel(self) -> HotelDetails | None:
        return self.extension if isinstance(self.extension, HotelDetails) else None

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self.status)

    def apply(self, action: BookingAction) -> BookingStatus:
        """
        Apply a lifecycle action

        Returns the status the booking had before, which the repository
        uses as the expected value of its compare-and-set.
        Events: BookingStatusChanged

        Raises:
            InvalidStateTransition: If ``action`` is not allowed in the current status
        """
        previous = self.status
        self.status = next_status(previous, action, booking_id=self.id)

        from apps.bookings.domain.events import BookingStatusChanged

        self.add_event(BookingStatusChanged(
            aggregate_id=self.id,
            booking_id=self.id,
            action=action.value,
            old_status=previous.value,
            new_status=self.status.value,
        ))
        return previous

    def confirm(self) -> BookingStatus:
        """PENDING -> CONFIRMED"""
        return self.apply(BookingAction.CONFIRM)

    def cancel(self) -> BookingStatus:
        """PENDING or CONFIRMED -> CANCELLED"""
        return self.apply(BookingAction.CANCEL)

    def complete(self) -> BookingStatus:
        """CONFIRMED -> COMPLETED"""
        return self.apply(BookingAction.COMPLETE)

    def __str__(self):
        return f"Booking {self.id} ({self.booking_type.value}, {self.status.value})"

    def __repr__(self):
        return (
            f"Booking(id={self.id}, customer_id={self.customer_id}, "
            f"type={self.booking_type.value}, status={self.status.value}, "
            f"total_price={self.total_price.amount})"
        )


# ===== Construction =====

@dataclass
class FlightBookingParams:
    """Everything needed to create a flight booking"""
    customer_id: int
    booking_date: date
    total_price: Decimal
    flight_number: str
    origin: str
    destination: str
    seat_class: SeatClass | str | None = None


@dataclass
class HotelBookingParams:
    """Everything needed to create a hotel booking"""
    customer_id: int
    booking_date: date
    total_price: Decimal
    hotel_name: str
    nights: int
    room_type: RoomType | str | None = None


def create_flight_booking(params: FlightBookingParams) -> Booking:
    """
    Build a PENDING flight booking

    Seat class defaults to ECONOMY. Validation errors raise InvalidInput
    before anything is built, so no partial booking ever exists.
    """
    details = FlightDetails(
        flight_number=params.flight_number,
        origin=params.origin,
        destination=params.destination,
        seat_class=params.seat_class if params.seat_class is not None else SeatClass.ECONOMY,
    )
    return Booking(
        customer_id=params.customer_id,
        booking_date=params.booking_date,
        total_price=params.total_price,
        booking_type=BookingType.FLIGHT,
        extension=details,
        status=BookingStatus.PENDING,
    )


def create_hotel_booking(params: HotelBookingParams) -> Booking:
    """
    Build a PENDING hotel booking

    Room type defaults to STANDARD. Nights outside [1, 365] raise InvalidInput.
    """
    details = HotelDetails(
        hotel_name=params.hotel_name,
        nights=params.nights,
        room_type=params.room_type if params.room_type is not None else RoomType.STANDARD,
    )
    return Booking(
        customer_id=params.customer_id,
        booking_date=params.booking_date,
        total_price=params.total_price,
        booking_type=BookingType.HOTEL,
        extension=details,
        status=BookingStatus.PENDING,
    )


# ===== Read models =====

@dataclass(frozen=True)
class BookingDetails:
    """A booking together with the contact data of its customer"""
    booking: Booking
    customer_name: str
    customer_email: str
    customer_phone: str

"""Booking repository backed by the Django ORM.

Bookings are stored as one ``bookings`` row plus one extension row in
``flight_bookings`` or ``hotel_bookings``. The repository writes and
deletes both as a unit and rebuilds the tagged variant on load.
"""

from __future__ import annotations

import logging

from django.db import transaction  # type: ignore

from shared.domain.exceptions import InvalidStateTransition, NotFound
from shared.infrastructure.locking import lock_queryset_if_possible

from .domain.entities import (
    Booking,
    BookingDetails,
    BookingType,
    FlightDetails,
    HotelDetails,
    RoomType,
    SeatClass,
)
from .domain.lifecycle import BookingAction, BookingStatus
from .models import Booking as BookingModel
from .models import FlightBooking, HotelBooking

logger = logging.getLogger(__name__)


class DjangoBookingRepository:
    """Maps booking rows and their extensions to Booking aggregates."""

    def _queryset(self):
        return BookingModel.objects.select_related("flight", "hotel")

    def get_by_id(self, booking_id: int, lock: bool = False) -> Booking | None:
        """
        Load a booking with its extension

        With ``lock`` the booking row is locked (SELECT ... FOR UPDATE) for
        the rest of the surrounding transaction. The lock is taken on the
        booking row alone because the extension joins are outer joins.
        """
        if lock and not self.lock(booking_id):
            return None
        model = self._queryset().filter(pk=booking_id).first()
        return self._to_domain(model) if model else None

    def lock(self, booking_id: int) -> bool:
        """Lock the booking row; False if it does not exist"""
        queryset = lock_queryset_if_possible(BookingModel.objects.filter(pk=booking_id))
        return bool(list(queryset.values_list("pk", flat=True)))

    def exists(self, booking_id: int) -> bool:
        return BookingModel.objects.filter(pk=booking_id).exists()

    def list_details(self, customer_id: int | None = None) -> list[BookingDetails]:
        """Bookings joined with their customer's name, email and phone"""
        queryset = self._queryset().select_related("customer").order_by("id")
        if customer_id is not None:
            queryset = queryset.filter(customer_id=customer_id)
        return [
            BookingDetails(
                booking=self._to_domain(model),
                customer_name=model.customer.name,
                customer_email=model.customer.email,
                customer_phone=model.customer.phone,
            )
            for model in queryset
        ]

    def get_details(self, booking_id: int) -> BookingDetails | None:
        model = self._queryset().select_related("customer").filter(pk=booking_id).first()
        if not model:
            return None
        return BookingDetails(
            booking=self._to_domain(model),
            customer_name=model.customer.name,
            customer_email=model.customer.email,
            customer_phone=model.customer.phone,
        )

    def add(self, booking: Booking) -> Booking:
        """Insert the booking row and its extension row together"""
        with transaction.atomic():
            model = BookingModel.objects.create(
                customer_id=booking.customer_id,
                booking_date=booking.booking_date,
                total_price=booking.total_price.amount,
                status=booking.status.value,
                type=booking.booking_type.value,
            )
            match booking.extension:
                case FlightDetails() as flight:
                    FlightBooking.objects.create(
                        booking=model,
                        flight_number=flight.flight_number,
                        origin=flight.origin,
                        destination=flight.destination,
                        seat_class=flight.seat_class.value,
                    )
                case HotelDetails() as hotel:
                    HotelBooking.objects.create(
                        booking=model,
                        hotel_name=hotel.hotel_name,
                        room_type=hotel.room_type.value,
                        nights=hotel.nights,
                    )
        booking.id = model.pk
        booking.created_at = model.created_at
        return booking

    def save_status(self, booking: Booking, expected: BookingStatus, action: BookingAction) -> None:
        """
        Compare-and-set the status column

        The UPDATE only matches while the stored status is still
        ``expected``; if another transaction got there first nothing is
        written and the transition is refused with the stored status.
        """
        updated = BookingModel.objects.filter(pk=booking.id, status=expected.value).update(
            status=booking.status.value,
        )
        if updated == 1:
            return

        current = BookingModel.objects.filter(pk=booking.id).values_list("status", flat=True).first()
        if current is None:
            raise NotFound("Booking", booking.id)
        logger.info(
            f"Status of booking {booking.id} moved from {expected.value} to {current} "
            f"before {action.value} could be applied"
        )
        raise InvalidStateTransition(BookingStatus(current), action, entity_id=booking.id)

    def delete(self, booking_id: int) -> int:
        """
        Delete a booking with its extension and package memberships

        Returns the number of membership rows removed.
        """
        with transaction.atomic():
            _, per_model = BookingModel.objects.filter(pk=booking_id).delete()
        return per_model.get("packages.PackageBooking", 0)

    @staticmethod
    def _to_domain(model: BookingModel) -> Booking:
        match BookingType(model.type):
            case BookingType.FLIGHT:
                extension = FlightDetails(
                    flight_number=model.flight.flight_number,
                    origin=model.flight.origin,
                    destination=model.flight.destination,
                    seat_class=SeatClass(model.flight.seat_class),
                )
            case BookingType.HOTEL:
                extension = HotelDetails(
                    hotel_name=model.hotel.hotel_name,
                    nights=model.hotel.nights,
                    room_type=RoomType(model.hotel.room_type),
                )
        return Booking(
            id=model.pk,
            created_at=model.created_at,
            customer_id=model.customer_id,
            booking_date=model.booking_date,
            total_price=model.total_price,
            booking_type=BookingType(model.type),
            extension=extension,
            status=BookingStatus(model.status),
        )

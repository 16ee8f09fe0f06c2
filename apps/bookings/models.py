"""Booking persistence models.

A booking row carries the fields shared by every variant; the
type-specific fields live in exactly one extension table keyed by the
booking id, which is deleted together with the booking.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """Flight or hotel reservation owned by a customer."""

    class Status(models.TextChoices):
        PENDING = "PENDING", _("Pending")
        CONFIRMED = "CONFIRMED", _("Confirmed")
        CANCELLED = "CANCELLED", _("Cancelled")
        COMPLETED = "COMPLETED", _("Completed")

    class Type(models.TextChoices):
        FLIGHT = "FLIGHT", _("Flight")
        HOTEL = "HOTEL", _("Hotel")

    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    booking_date = models.DateField()
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=30,
        choices=Status.choices,
        default=Status.PENDING,
    )
    type = models.CharField(max_length=30, choices=Type.choices)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "bookings"
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(total_price__gte=Decimal("0")),
                name="chk_bookings_total_price_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(status__in=["PENDING", "CONFIRMED", "CANCELLED", "COMPLETED"]),
                name="chk_bookings_status_valid",
            ),
            models.CheckConstraint(
                condition=models.Q(type__in=["FLIGHT", "HOTEL"]),
                name="chk_bookings_type_valid",
            ),
        ]
        indexes = [
            models.Index(fields=["status"], name="idx_bookings_status"),
            models.Index(fields=["booking_date"], name="idx_bookings_date"),
            models.Index(fields=["type"], name="idx_bookings_type"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} ({self.type}, {self.status})"


class FlightBooking(models.Model):
    """Flight extension of a booking."""

    class SeatClass(models.TextChoices):
        ECONOMY = "ECONOMY", _("Economy")
        BUSINESS = "BUSINESS", _("Business")
        FIRST_CLASS = "FIRST_CLASS", _("First class")

    booking = models.OneToOneField(
        Booking,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="flight",
    )
    flight_number = models.CharField(max_length=20)
    origin = models.CharField(max_length=100)
    destination = models.CharField(max_length=100)
    seat_class = models.CharField(max_length=30, choices=SeatClass.choices)

    class Meta:
        db_table = "flight_bookings"
        verbose_name = _("Flight booking")
        verbose_name_plural = _("Flight bookings")
        constraints = [
            models.CheckConstraint(
                condition=models.Q(seat_class__in=["ECONOMY", "BUSINESS", "FIRST_CLASS"]),
                name="chk_flight_bookings_seat_class_valid",
            ),
        ]
        indexes = [
            models.Index(fields=["flight_number"], name="idx_flight_bookings_number"),
        ]

    def __str__(self) -> str:
        return f"{self.flight_number} {self.origin} → {self.destination}"


class HotelBooking(models.Model):
    """Hotel extension of a booking."""

    class RoomType(models.TextChoices):
        STANDARD = "STANDARD", _("Standard")
        DELUXE = "DELUXE", _("Deluxe")
        SUITE = "SUITE", _("Suite")
        PRESIDENTIAL = "PRESIDENTIAL", _("Presidential")

    booking = models.OneToOneField(
        Booking,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="hotel",
    )
    hotel_name = models.CharField(max_length=150)
    room_type = models.CharField(max_length=50, choices=RoomType.choices)
    nights = models.IntegerField()

    class Meta:
        db_table = "hotel_bookings"
        verbose_name = _("Hotel booking")
        verbose_name_plural = _("Hotel bookings")
        constraints = [
            models.CheckConstraint(
                condition=models.Q(room_type__in=["STANDARD", "DELUXE", "SUITE", "PRESIDENTIAL"]),
                name="chk_hotel_bookings_room_type_valid",
            ),
            models.CheckConstraint(
                condition=models.Q(nights__gte=1) & models.Q(nights__lte=365),
                name="chk_hotel_bookings_nights_range",
            ),
        ]
        indexes = [
            models.Index(fields=["hotel_name"], name="idx_hotel_bookings_name"),
        ]

    def __str__(self) -> str:
        return f"{self.hotel_name} ({self.room_type}, {self.nights} nights)"

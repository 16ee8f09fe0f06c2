"""Serializers for the booking domain.

Creation takes a ``type`` discriminator and the fields of that variant;
ranges and required variant fields are checked by the domain, not here.
Output serializers render Booking and BookingDetails dataclasses.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .domain.entities import BookingType, FlightDetails, HotelDetails
from .domain.lifecycle import BookingStatus


class BookingCreateSerializer(serializers.Serializer):
    """Payload for a new flight or hotel booking."""

    type = serializers.ChoiceField(choices=[member.value for member in BookingType])
    customer_id = serializers.IntegerField()
    booking_date = serializers.DateField()
    total_price = serializers.DecimalField(max_digits=None, decimal_places=None)
    # FLIGHT
    flight_number = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    origin = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    destination = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    seat_class = serializers.CharField(required=False, allow_null=True)
    # HOTEL
    hotel_name = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    nights = serializers.IntegerField(required=False)
    room_type = serializers.CharField(required=False, allow_null=True)


def render_details(extension) -> dict:
    match extension:
        case FlightDetails():
            return {
                "flight_number": extension.flight_number,
                "origin": extension.origin,
                "destination": extension.destination,
                "seat_class": extension.seat_class.value,
            }
        case HotelDetails():
            return {
                "hotel_name": extension.hotel_name,
                "room_type": extension.room_type.value,
                "nights": extension.nights,
            }
    return {}


class BookingListQuerySerializer(serializers.Serializer):
    """Query parameters of the booking list."""

    customer_id = serializers.IntegerField(required=False, min_value=1)


class BookingTransitionSerializer(serializers.Serializer):
    """Optional body of the confirm, cancel and complete actions."""

    expected_status = serializers.ChoiceField(
        choices=[member.value for member in BookingStatus], required=False,
    )


class BookingSerializer(serializers.Serializer):
    """A booking with the fields of its variant under ``details``."""

    id = serializers.IntegerField(read_only=True)
    customer_id = serializers.IntegerField(read_only=True)
    booking_date = serializers.DateField(read_only=True)
    total_price = serializers.DecimalField(
        source="total_price.amount", max_digits=12, decimal_places=2, read_only=True
    )
    status = serializers.CharField(source="status.value", read_only=True)
    type = serializers.CharField(source="booking_type.value", read_only=True)
    details = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField(read_only=True)

    def get_details(self, booking) -> dict:
        return render_details(booking.extension)


class BookingDetailsSerializer(serializers.Serializer):
    """A booking joined with its customer's contact data."""

    booking = BookingSerializer(read_only=True)
    customer_name = serializers.CharField(read_only=True)
    customer_email = serializers.CharField(read_only=True)
    customer_phone = serializers.CharField(read_only=True)

    def to_representation(self, instance):  # type: ignore
        data = super().to_representation(instance)
        booking = data.pop("booking")
        return {**booking, **data}

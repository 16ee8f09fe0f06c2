"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from config.bootstrap import get_core

from .application.command_handlers import (
    CancelBookingCommand,
    CompleteBookingCommand,
    ConfirmBookingCommand,
    CreateFlightBookingCommand,
    CreateHotelBookingCommand,
    DeleteBookingCommand,
)
from .domain.entities import BookingType
from .domain.lifecycle import BookingStatus
from .serializers import (
    BookingCreateSerializer,
    BookingDetailsSerializer,
    BookingListQuerySerializer,
    BookingSerializer,
    BookingTransitionSerializer,
)


def build_create_command(data: dict) -> CreateFlightBookingCommand | CreateHotelBookingCommand:
    common = {
        "customer_id": data["customer_id"],
        "booking_date": data["booking_date"],
        "total_price": data["total_price"],
    }
    match BookingType(data["type"]):
        case BookingType.FLIGHT:
            return CreateFlightBookingCommand(
                **common,
                flight_number=data.get("flight_number"),
                origin=data.get("origin"),
                destination=data.get("destination"),
                seat_class=data.get("seat_class"),
            )
        case BookingType.HOTEL:
            return CreateHotelBookingCommand(
                **common,
                hotel_name=data.get("hotel_name"),
                nights=data.get("nights"),
                room_type=data.get("room_type"),
            )


class BookingViewSet(viewsets.ViewSet):
    """Create bookings, drive their lifecycle and delete them."""

    lookup_value_regex = r"[0-9]+"

    def list(self, request):  # type: ignore
        query = BookingListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        details = get_core().bookings.list_bookings(query.validated_data.get("customer_id"))
        return Response(BookingDetailsSerializer(details, many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        details = get_core().bookings.get_booking_details(int(pk))
        return Response(BookingDetailsSerializer(details).data)

    def create(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = get_core().handle(build_create_command(serializer.validated_data))
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):  # type: ignore
        get_core().handle(DeleteBookingCommand(booking_id=int(pk)))
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _transition(self, request, command_class, pk):
        serializer = BookingTransitionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        expected = serializer.validated_data.get("expected_status")
        booking = get_core().handle(command_class(
            booking_id=int(pk),
            expected_status=BookingStatus(expected) if expected else None,
        ))
        return Response(BookingSerializer(booking).data)

    @action(detail=True, methods=["post"])
    def confirm(self, request, pk=None):  # type: ignore
        return self._transition(request, ConfirmBookingCommand, pk)

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        return self._transition(request, CancelBookingCommand, pk)

    @action(detail=True, methods=["post"])
    def complete(self, request, pk=None):  # type: ignore
        return self._transition(request, CompleteBookingCommand, pk)

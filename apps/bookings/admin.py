"""Admin registration for bookings.

Bookings are read-only here: creation, status changes and deletion must
go through the command handlers so the lifecycle and the extension rows
stay consistent.
"""

from __future__ import annotations

from django.contrib import admin

from .models import Booking, FlightBooking, HotelBooking


class FlightBookingInline(admin.StackedInline):
    model = FlightBooking
    can_delete = False
    readonly_fields = ("flight_number", "origin", "destination", "seat_class")


class HotelBookingInline(admin.StackedInline):
    model = HotelBooking
    can_delete = False
    readonly_fields = ("hotel_name", "room_type", "nights")


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "customer",
        "type",
        "status",
        "booking_date",
        "total_price",
        "created_at",
    )
    list_filter = ("status", "type", "booking_date")
    search_fields = ("customer__name", "customer__email", "flight__flight_number", "hotel__hotel_name")
    readonly_fields = ("customer", "booking_date", "total_price", "status", "type", "created_at")
    inlines = [FlightBookingInline, HotelBookingInline]

    def has_add_permission(self, request):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

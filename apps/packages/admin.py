"""Admin registration for travel packages."""

from __future__ import annotations

from django.contrib import admin

from .models import PackageBooking, TravelPackage


class PackageBookingInline(admin.TabularInline):
    model = PackageBooking
    extra = 0
    readonly_fields = ("booking", "added_at")
    can_delete = False

    def has_add_permission(self, request, obj=None):  # type: ignore
        return False


@admin.register(TravelPackage)
class TravelPackageAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "customer", "discount_percentage", "created_at")
    search_fields = ("name", "customer__name", "customer__email")
    readonly_fields = ("name", "customer", "discount_percentage", "created_at")
    inlines = [PackageBookingInline]

    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False

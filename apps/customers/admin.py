"""Admin registration for customers."""

from __future__ import annotations

from django.contrib import admin

from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "phone", "passport_number", "created_at")
    search_fields = ("name", "email", "passport_number")
    readonly_fields = ("name", "email", "phone", "passport_number", "created_at")

    # Writes go through the registry commands so validation and events apply
    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False

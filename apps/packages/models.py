"""Travel package persistence models."""

from __future__ import annotations

from decimal import Decimal

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class TravelPackage(models.Model):
    """Named group of bookings sharing one discount percentage."""

    name = models.CharField(max_length=150)
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="travel_packages",
    )
    discount_percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    bookings = models.ManyToManyField(
        "bookings.Booking",
        through="PackageBooking",
        related_name="packages",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "travel_packages"
        verbose_name = _("Travel package")
        verbose_name_plural = _("Travel packages")
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=~models.Q(name=""),
                name="chk_travel_packages_name_not_empty",
            ),
            models.CheckConstraint(
                condition=models.Q(discount_percentage__gte=Decimal("0"))
                & models.Q(discount_percentage__lte=Decimal("100")),
                name="chk_travel_packages_discount_range",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} (-{self.discount_percentage}%)"


class PackageBooking(models.Model):
    """Membership of a booking in a package."""

    package = models.ForeignKey(
        TravelPackage,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    booking = models.ForeignKey(
        "bookings.Booking",
        on_delete=models.CASCADE,
        related_name="package_memberships",
    )
    added_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "package_bookings"
        verbose_name = _("Package booking")
        verbose_name_plural = _("Package bookings")
        ordering = ["added_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["package", "booking"],
                name="uq_package_bookings_package_booking",
            ),
        ]

    def __str__(self) -> str:
        return f"Package #{self.package_id} ← Booking #{self.booking_id}"

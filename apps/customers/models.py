"""Customer persistence models."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

EMAIL_REGEX = r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"


class Customer(models.Model):
    """Traveller who owns bookings and travel packages."""

    name = models.CharField(max_length=120)
    email = models.CharField(max_length=180, unique=True)
    phone = models.CharField(max_length=20)
    passport_number = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "customers"
        verbose_name = _("Customer")
        verbose_name_plural = _("Customers")
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=~models.Q(name=""),
                name="chk_customers_name_not_empty",
            ),
            models.CheckConstraint(
                condition=models.Q(email__regex=EMAIL_REGEX),
                name="chk_customers_email_valid",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"

"""Travel package repository backed by the Django ORM.

Membership rows live in ``package_bookings``; the repository owns them
and computes discount summaries straight from the database so they always
reflect current membership and current booking prices.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import Count, DecimalField, Sum, Value  # type: ignore
from django.db.models.functions import Coalesce  # type: ignore

from shared.domain.exceptions import ConflictError
from shared.domain.value_objects import Percentage
from shared.infrastructure.locking import lock_queryset_if_possible

from .domain.entities import PackageMembership, PackageSummary, TravelPackage
from .models import PackageBooking
from .models import TravelPackage as TravelPackageModel

logger = logging.getLogger(__name__)

ZERO = Value(Decimal("0.00"), output_field=DecimalField(max_digits=14, decimal_places=2))


class DjangoPackageRepository:
    """Maps travel_packages rows to TravelPackage aggregates and manages membership."""

    def get_by_id(self, package_id: int, lock: bool = False) -> TravelPackage | None:
        queryset = TravelPackageModel.objects.filter(pk=package_id)
        if lock:
            queryset = lock_queryset_if_possible(queryset)
        model = queryset.first()
        return self._to_domain(model) if model else None

    def exists(self, package_id: int, lock: bool = False) -> bool:
        queryset = TravelPackageModel.objects.filter(pk=package_id)
        if lock:
            queryset = lock_queryset_if_possible(queryset)
            return bool(list(queryset.values_list("pk", flat=True)))
        return queryset.exists()

    def list_all(self) -> list[TravelPackage]:
        return [self._to_domain(model) for model in TravelPackageModel.objects.order_by("id")]

    def add(self, package: TravelPackage) -> TravelPackage:
        with transaction.atomic():
            model = TravelPackageModel.objects.create(
                name=package.name,
                customer_id=package.customer_id,
                discount_percentage=package.discount_percentage,
            )
        package.id = model.pk
        package.created_at = model.created_at
        return package

    def save(self, package: TravelPackage) -> None:
        TravelPackageModel.objects.filter(pk=package.id).update(
            name=package.name,
            discount_percentage=package.discount_percentage,
        )

    def delete(self, package_id: int) -> int:
        """
        Delete a package with its membership rows

        Member bookings are not touched. Returns the number of membership
        rows removed.
        """
        with transaction.atomic():
            _, per_model = TravelPackageModel.objects.filter(pk=package_id).delete()
        return per_model.get("packages.PackageBooking", 0)

    # ===== Membership =====

    def add_membership(self, package_id: int, booking_id: int) -> PackageMembership:
        """Insert a (package, booking) pair; a duplicate pair is a ConflictError"""
        try:
            with transaction.atomic():
                model = PackageBooking.objects.create(package_id=package_id, booking_id=booking_id)
        except IntegrityError as e:
            logger.info(f"Membership insert rejected by database: {e}")
            raise ConflictError(
                f"Booking {booking_id} is already in package {package_id}",
                entity="PackageBooking",
                entity_id=package_id,
                field="booking_id",
            ) from e
        return PackageMembership(package_id=package_id, booking_id=booking_id, added_at=model.added_at)

    def remove_membership(self, package_id: int, booking_id: int) -> bool:
        deleted, _ = PackageBooking.objects.filter(package_id=package_id, booking_id=booking_id).delete()
        return deleted > 0

    def member_booking_ids(self, package_id: int) -> list[int]:
        return list(
            PackageBooking.objects.filter(package_id=package_id)
            .order_by("added_at", "id")
            .values_list("booking_id", flat=True)
        )

    # ===== Summaries =====

    def _summary_queryset(self):
        return TravelPackageModel.objects.select_related("customer").annotate(
            booking_count=Count("memberships"),
            total_before_discount=Coalesce(Sum("memberships__booking__total_price"), ZERO),
        )

    def summary(self, package_id: int) -> PackageSummary | None:
        """
        Discount summary of one package

        Count and sum come from one aggregate query, so the membership set
        is read as a single snapshot.
        """
        model = self._summary_queryset().filter(pk=package_id).first()
        return self._to_summary(model) if model else None

    def summaries(self) -> list[PackageSummary]:
        return [self._to_summary(model) for model in self._summary_queryset().order_by("id")]

    def _to_summary(self, model: TravelPackageModel) -> PackageSummary:
        return PackageSummary.compute(
            self._to_domain(model),
            booking_count=model.booking_count,
            total_before_discount=model.total_before_discount,
            customer_name=model.customer.name,
            customer_email=model.customer.email,
        )

    @staticmethod
    def _to_domain(model: TravelPackageModel) -> TravelPackage:
        return TravelPackage(
            id=model.pk,
            created_at=model.created_at,
            name=model.name,
            customer_id=model.customer_id,
            discount=Percentage(model.discount_percentage),
        )

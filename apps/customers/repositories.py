"""Customer repository backed by the Django ORM."""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import ProtectedError  # type: ignore

from shared.domain.exceptions import ConflictError
from shared.infrastructure.locking import lock_queryset_if_possible

from .domain.entities import Customer
from .models import Customer as CustomerModel

logger = logging.getLogger(__name__)


class DjangoCustomerRepository:
    """Maps Customer rows to Customer aggregates and back."""

    def get_by_id(self, customer_id: int, lock: bool = False) -> Customer | None:
        queryset = CustomerModel.objects.filter(pk=customer_id)
        if lock:
            queryset = lock_queryset_if_possible(queryset)
        model = queryset.first()
        return self._to_domain(model) if model else None

    def exists(self, customer_id: int, lock: bool = False) -> bool:
        """Whether the customer exists; with ``lock`` the row stays locked until commit"""
        queryset = CustomerModel.objects.filter(pk=customer_id)
        if lock:
            queryset = lock_queryset_if_possible(queryset)
            return bool(list(queryset.values_list("pk", flat=True)))
        return queryset.exists()

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        queryset = CustomerModel.objects.filter(email=email)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.exists()

    def list_all(self) -> list[Customer]:
        return [self._to_domain(model) for model in CustomerModel.objects.order_by("id")]

    def add(self, customer: Customer) -> Customer:
        """Insert a new customer and assign its id and creation time"""
        try:
            with transaction.atomic():
                model = CustomerModel.objects.create(
                    name=customer.name,
                    email=customer.email,
                    phone=customer.phone,
                    passport_number=customer.passport_number,
                )
        except IntegrityError as e:
            logger.info(f"Customer insert rejected by database: {e}")
            raise ConflictError(
                f"Email {customer.email} is already registered",
                entity="Customer",
                field="email",
            ) from e
        customer.id = model.pk
        customer.created_at = model.created_at
        return customer

    def save(self, customer: Customer) -> None:
        try:
            with transaction.atomic():
                CustomerModel.objects.filter(pk=customer.id).update(
                    name=customer.name,
                    email=customer.email,
                    phone=customer.phone,
                    passport_number=customer.passport_number,
                )
        except IntegrityError as e:
            raise ConflictError(
                f"Email {customer.email} is already registered",
                entity="Customer",
                entity_id=customer.id,
                field="email",
            ) from e

    def reference_counts(self, customer_id: int) -> tuple[int, int]:
        """Number of bookings and travel packages owned by the customer"""
        model = CustomerModel.objects.get(pk=customer_id)
        return model.bookings.count(), model.travel_packages.count()

    def delete(self, customer_id: int) -> None:
        try:
            with transaction.atomic():
                CustomerModel.objects.filter(pk=customer_id).delete()
        except (ProtectedError, IntegrityError) as e:
            raise ConflictError(
                f"Customer {customer_id} is still referenced by bookings or packages",
                entity="Customer",
                entity_id=customer_id,
            ) from e

    @staticmethod
    def _to_domain(model: CustomerModel) -> Customer:
        return Customer(
            id=model.pk,
            created_at=model.created_at,
            name=model.name,
            email=model.email,
            phone=model.phone,
            passport_number=model.passport_number,
        )

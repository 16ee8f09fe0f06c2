"""The admin shows customers, bookings and packages but never writes them."""

from decimal import Decimal

import pytest
from django.contrib import admin
from django.urls import reverse

from apps.bookings.models import Booking
from apps.customers.models import Customer
from apps.packages.application.command_handlers import CreatePackageCommand
from apps.packages.models import TravelPackage

pytestmark = pytest.mark.django_db


@pytest.mark.parametrize("model", [Customer, Booking, TravelPackage])
def test_admin_refuses_writes(rf, admin_user, model):
    request = rf.get("/admin/")
    request.user = admin_user
    model_admin = admin.site._registry[model]

    assert model_admin.has_view_permission(request)
    assert not model_admin.has_add_permission(request)
    assert not model_admin.has_change_permission(request)
    assert not model_admin.has_delete_permission(request)


def test_customer_change_form_post_is_forbidden(admin_client, customer):
    url = reverse("admin:customers_customer_change", args=[customer.id])
    assert admin_client.get(url).status_code == 200

    response = admin_client.post(url, {
        "name": "Renamed",
        "email": "renamed@example.com",
        "phone": "1",
        "passport_number": "P",
    })
    assert response.status_code == 403
    assert Customer.objects.get(pk=customer.id).name == "Aigerim Sadykova"


def test_package_delete_is_forbidden(admin_client, core, customer):
    package = core.handle(CreatePackageCommand(
        customer_id=customer.id, name="Silk Road", discount_percentage=Decimal("5"),
    ))
    response = admin_client.post(
        reverse("admin:packages_travelpackage_delete", args=[package.id]), {"post": "yes"},
    )
    assert response.status_code == 403
    assert TravelPackage.objects.filter(pk=package.id).exists()

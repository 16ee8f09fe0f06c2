"""Customer registration, contact updates and restricted deletion."""

from decimal import Decimal

import pytest

from apps.customers.application.command_handlers import (
    DeleteCustomerCommand,
    RegisterCustomerCommand,
    UpdateCustomerContactCommand,
)
from apps.customers.domain.entities import Customer
from apps.customers.domain.events import CustomerContactUpdated, CustomerRegistered
from apps.customers.models import Customer as CustomerModel
from apps.packages.application.command_handlers import CreatePackageCommand
from shared.domain.exceptions import ConflictError, InvalidInput, NotFound


def register(core, email="daniyar@example.com", name="Daniyar"):
    return core.handle(RegisterCustomerCommand(
        name=name, email=email, phone="+77010000002", passport_number="N7654321",
    ))


# ===== Domain =====

@pytest.mark.parametrize("email", ["plain", "a@b", "a b@example.com", "@example.com"])
def test_malformed_email_rejected(email):
    with pytest.raises(InvalidInput) as exc:
        Customer(name="X", email=email, phone="1", passport_number="P")
    assert exc.value.field == "email"


def test_blank_name_rejected():
    with pytest.raises(InvalidInput) as exc:
        Customer(name="  ", email="x@example.com", phone="1", passport_number="P")
    assert exc.value.field == "name"


def test_update_contact_is_all_or_nothing():
    customer = Customer(id=1, name="X", email="x@example.com", phone="1", passport_number="P")
    with pytest.raises(InvalidInput):
        customer.update_contact(name="Y", email="broken")
    assert customer.name == "X"
    assert customer.events == []


def test_update_contact_reports_changed_fields():
    customer = Customer(id=1, name="X", email="x@example.com", phone="1", passport_number="P")
    assert customer.update_contact(name="X", phone="2") == ["phone"]
    [event] = customer.events
    assert isinstance(event, CustomerContactUpdated)
    assert event.changed_fields == ("phone",)


# ===== Handlers =====

@pytest.mark.django_db
def test_register_assigns_identity(core):
    customer = register(core)
    assert customer.id is not None
    assert customer.created_at is not None
    assert core.customers.get_customer(customer.id).email == "daniyar@example.com"


@pytest.mark.django_db
def test_duplicate_email_is_conflict(core):
    register(core)
    with pytest.raises(ConflictError) as exc:
        register(core, name="Someone else")
    assert exc.value.field == "email"
    assert CustomerModel.objects.count() == 1


@pytest.mark.django_db
def test_update_contact_persists(core, customer):
    core.handle(UpdateCustomerContactCommand(customer_id=customer.id, phone="+77019999999"))
    assert core.customers.get_customer(customer.id).phone == "+77019999999"


@pytest.mark.django_db
def test_update_to_taken_email_is_conflict(core, customer):
    other = register(core)
    with pytest.raises(ConflictError):
        core.handle(UpdateCustomerContactCommand(customer_id=other.id, email=customer.email))
    assert core.customers.get_customer(other.id).email == "daniyar@example.com"


@pytest.mark.django_db
def test_update_missing_customer(core):
    with pytest.raises(NotFound):
        core.handle(UpdateCustomerContactCommand(customer_id=999, name="Ghost"))


@pytest.mark.django_db
def test_delete_customer_without_references(core):
    customer = register(core)
    core.handle(DeleteCustomerCommand(customer_id=customer.id))
    assert not CustomerModel.objects.filter(pk=customer.id).exists()
    with pytest.raises(NotFound):
        core.customers.get_customer(customer.id)


@pytest.mark.django_db
def test_delete_customer_with_booking_is_conflict(core, customer, make_flight):
    make_flight()
    with pytest.raises(ConflictError):
        core.handle(DeleteCustomerCommand(customer_id=customer.id))
    assert CustomerModel.objects.filter(pk=customer.id).exists()


@pytest.mark.django_db
def test_delete_customer_with_package_is_conflict(core, customer):
    core.handle(CreatePackageCommand(customer_id=customer.id, name="Summer", discount_percentage=Decimal("5")))
    with pytest.raises(ConflictError):
        core.handle(DeleteCustomerCommand(customer_id=customer.id))


@pytest.mark.django_db
def test_delete_missing_customer(core):
    with pytest.raises(NotFound):
        core.handle(DeleteCustomerCommand(customer_id=12345))


@pytest.mark.django_db
def test_events_published_after_commit(core, django_capture_on_commit_callbacks):
    published = []
    core.bus.register_event_handler(CustomerRegistered, published.append)
    with django_capture_on_commit_callbacks(execute=True):
        customer = register(core)
    assert [event.customer_id for event in published] == [customer.id]

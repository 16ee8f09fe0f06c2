"""Package creation, membership rules and package deletion."""

import pytest

from apps.bookings.models import Booking as BookingModel
from apps.packages.application.command_handlers import (
    AddBookingToPackageCommand,
    CreatePackageCommand,
    DeletePackageCommand,
    RemoveBookingFromPackageCommand,
    UpdatePackageCommand,
)
from apps.packages.models import PackageBooking, TravelPackage
from shared.domain.exceptions import ConflictError, InvalidInput, NotFound

pytestmark = pytest.mark.django_db


@pytest.fixture
def travel(core, customer):
    return core.handle(CreatePackageCommand(customer_id=customer.id, name="Silk Road", discount_percentage="7.5"))


def test_create_package(core, travel):
    loaded = core.packages.get_package(travel.id)
    assert loaded.name == "Silk Road"
    assert str(loaded.discount_percentage) == "7.50"


def test_create_package_for_missing_customer(core):
    with pytest.raises(NotFound):
        core.handle(CreatePackageCommand(customer_id=404, name="Ghost"))
    assert TravelPackage.objects.count() == 0


def test_create_package_with_blank_name(core, customer):
    with pytest.raises(InvalidInput) as exc:
        core.handle(CreatePackageCommand(customer_id=customer.id, name=" "))
    assert exc.value.field == "name"


def test_duplicate_membership_is_conflict(core, travel, make_flight):
    flight = make_flight()
    core.handle(AddBookingToPackageCommand(package_id=travel.id, booking_id=flight.id))
    with pytest.raises(ConflictError):
        core.handle(AddBookingToPackageCommand(package_id=travel.id, booking_id=flight.id))
    assert core.packages.package_summary(travel.id).booking_count == 1
    assert PackageBooking.objects.count() == 1


def test_add_missing_booking(core, travel):
    with pytest.raises(NotFound) as exc:
        core.handle(AddBookingToPackageCommand(package_id=travel.id, booking_id=999))
    assert exc.value.entity == "Booking"


def test_add_to_missing_package(core, make_flight):
    flight = make_flight()
    with pytest.raises(NotFound) as exc:
        core.handle(AddBookingToPackageCommand(package_id=999, booking_id=flight.id))
    assert exc.value.entity == "TravelPackage"


def test_booking_may_belong_to_many_packages(core, customer, travel, make_flight):
    other = core.handle(CreatePackageCommand(customer_id=customer.id, name="Other"))
    flight = make_flight()
    core.handle(AddBookingToPackageCommand(package_id=travel.id, booking_id=flight.id))
    core.handle(AddBookingToPackageCommand(package_id=other.id, booking_id=flight.id))
    assert PackageBooking.objects.filter(booking_id=flight.id).count() == 2


def test_remove_absent_membership(core, travel, make_flight):
    flight = make_flight()
    with pytest.raises(NotFound):
        core.handle(RemoveBookingFromPackageCommand(package_id=travel.id, booking_id=flight.id))


def test_package_bookings_in_added_order(core, travel, make_flight, make_hotel):
    hotel = make_hotel()
    flight = make_flight()
    core.handle(AddBookingToPackageCommand(package_id=travel.id, booking_id=hotel.id))
    core.handle(AddBookingToPackageCommand(package_id=travel.id, booking_id=flight.id))
    assert [b.id for b in core.packages.list_package_bookings(travel.id)] == [hotel.id, flight.id]


def test_delete_package_keeps_bookings(core, travel, make_flight):
    flight = make_flight()
    core.handle(AddBookingToPackageCommand(package_id=travel.id, booking_id=flight.id))

    core.handle(DeletePackageCommand(package_id=travel.id))

    assert not TravelPackage.objects.filter(pk=travel.id).exists()
    assert PackageBooking.objects.count() == 0
    assert BookingModel.objects.filter(pk=flight.id).exists()


def test_delete_missing_package(core):
    with pytest.raises(NotFound):
        core.handle(DeletePackageCommand(package_id=404))


def test_update_package(core, travel):
    updated = core.handle(UpdatePackageCommand(package_id=travel.id, name="Silk Road II", discount_percentage=0))
    assert updated.name == "Silk Road II"
    row = TravelPackage.objects.get(pk=travel.id)
    assert (row.name, str(row.discount_percentage)) == ("Silk Road II", "0.00")

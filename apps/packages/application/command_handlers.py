"""
Travel Package Command Handlers

Commands:
- CreatePackageCommand: Create a package for an existing customer
- UpdatePackageCommand: Rename a package or change its discount
- AddBookingToPackageCommand: Add a booking to a package
- RemoveBookingFromPackageCommand: Remove a booking from a package
- DeletePackageCommand: Delete a package; its bookings stay
"""

from dataclasses import dataclass
from decimal import Decimal
import logging

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import NotFound
from apps.packages.domain.entities import PackageMembership, TravelPackage
from apps.packages.domain.events import (
    BookingAddedToPackage,
    BookingRemovedFromPackage,
    PackageCreated,
    PackageDeleted,
)

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class CreatePackageCommand:
    """Command to create a travel package"""
    customer_id: int
    name: str
    discount_percentage: Decimal | int | str = Decimal('0')


@dataclass
class UpdatePackageCommand:
    """Command to rename a package and/or change its discount"""
    package_id: int
    name: str | None = None
    discount_percentage: Decimal | int | str | None = None


@dataclass
class AddBookingToPackageCommand:
    package_id: int
    booking_id: int


@dataclass
class RemoveBookingFromPackageCommand:
    package_id: int
    booking_id: int


@dataclass
class DeletePackageCommand:
    package_id: int


# ===== Command Handlers =====

class CreatePackageHandler:
    """
    Handler for CreatePackage command

    The customer row is locked while the package is inserted so that a
    concurrent customer deletion cannot slip in between.
    """

    def __init__(self, package_repo, customer_repo, message_bus=None):
        self.package_repo = package_repo
        self.customer_repo = customer_repo
        self.message_bus = message_bus

    def handle(self, command: CreatePackageCommand) -> TravelPackage:
        package = TravelPackage(
            name=command.name,
            customer_id=command.customer_id,
            discount=command.discount_percentage,
        )
        logger.info(f"Creating package '{package.name}' for customer {package.customer_id}")

        with DjangoUnitOfWork(self.message_bus) as uow:
            if not self.customer_repo.exists(package.customer_id, lock=True):
                raise NotFound("Customer", package.customer_id)

            self.package_repo.add(package)

            package.add_event(PackageCreated(
                aggregate_id=package.id,
                package_id=package.id,
                customer_id=package.customer_id,
                discount_percentage=str(package.discount_percentage),
            ))
            uow.collect_events(package)

        logger.info(f"Package created successfully: {package.id}")
        return package


class UpdatePackageHandler:
    """Handler for UpdatePackage command"""

    def __init__(self, package_repo, message_bus=None):
        self.package_repo = package_repo
        self.message_bus = message_bus

    def handle(self, command: UpdatePackageCommand) -> TravelPackage:
        with DjangoUnitOfWork(self.message_bus) as uow:
            package = self.package_repo.get_by_id(command.package_id, lock=True)
            if not package:
                raise NotFound("TravelPackage", command.package_id)

            changed = package.update(name=command.name, discount_percentage=command.discount_percentage)
            if changed:
                self.package_repo.save(package)
            uow.collect_events(package)

        logger.info(f"Package {package.id} updated: {', '.join(changed) or 'no changes'}")
        return package


class AddBookingToPackageHandler:
    """
    Handler for AddBookingToPackage command

    Both rows are locked so neither side can be deleted before the
    membership row is written. A duplicate pair is refused by the
    unique constraint and leaves the membership set as it was.
    """

    def __init__(self, package_repo, booking_repo, message_bus=None):
        self.package_repo = package_repo
        self.booking_repo = booking_repo
        self.message_bus = message_bus

    def handle(self, command: AddBookingToPackageCommand) -> PackageMembership:
        with DjangoUnitOfWork(self.message_bus) as uow:
            package = self.package_repo.get_by_id(command.package_id, lock=True)
            if not package:
                raise NotFound("TravelPackage", command.package_id)
            if not self.booking_repo.lock(command.booking_id):
                raise NotFound("Booking", command.booking_id)

            membership = self.package_repo.add_membership(package.id, command.booking_id)

            package.add_event(BookingAddedToPackage(
                aggregate_id=package.id,
                package_id=package.id,
                booking_id=command.booking_id,
            ))
            uow.collect_events(package)

        logger.info(f"Booking {command.booking_id} added to package {command.package_id}")
        return membership


class RemoveBookingFromPackageHandler:
    """Handler for RemoveBookingFromPackage command; the booking itself is kept"""

    def __init__(self, package_repo, message_bus=None):
        self.package_repo = package_repo
        self.message_bus = message_bus

    def handle(self, command: RemoveBookingFromPackageCommand) -> None:
        with DjangoUnitOfWork(self.message_bus) as uow:
            package = self.package_repo.get_by_id(command.package_id, lock=True)
            if not package:
                raise NotFound("TravelPackage", command.package_id)
            if not self.package_repo.remove_membership(package.id, command.booking_id):
                raise NotFound("PackageBooking", f"{command.package_id}/{command.booking_id}")

            package.add_event(BookingRemovedFromPackage(
                aggregate_id=package.id,
                package_id=package.id,
                booking_id=command.booking_id,
            ))
            uow.collect_events(package)

        logger.info(f"Booking {command.booking_id} removed from package {command.package_id}")


class DeletePackageHandler:
    """Handler for DeletePackage command"""

    def __init__(self, package_repo, message_bus=None):
        self.package_repo = package_repo
        self.message_bus = message_bus

    def handle(self, command: DeletePackageCommand) -> None:
        with DjangoUnitOfWork(self.message_bus) as uow:
            package = self.package_repo.get_by_id(command.package_id, lock=True)
            if not package:
                raise NotFound("TravelPackage", command.package_id)

            removed = self.package_repo.delete(package.id)

            package.add_event(PackageDeleted(
                aggregate_id=package.id,
                package_id=package.id,
                removed_memberships=removed,
            ))
            uow.collect_events(package)

        logger.info(f"Package {command.package_id} deleted with {removed} membership(s)")

"""
Composition root

``bootstrap()`` is the single place where repositories, handlers, queries
and the message bus are built and wired together. Django calls it once
from ``SharedConfig.ready()``; tests may call it again to get an
isolated instance.
"""

from dataclasses import dataclass
import logging

import structlog

from shared.application.message_bus import MessageBus
from shared.domain.base import DomainEvent

from apps.bookings.application import command_handlers as booking_commands
from apps.bookings.application.queries import BookingQueries
from apps.bookings.domain import events as booking_events
from apps.bookings.repositories import DjangoBookingRepository
from apps.customers.application import command_handlers as customer_commands
from apps.customers.application.queries import CustomerQueries
from apps.customers.domain import events as customer_events
from apps.customers.repositories import DjangoCustomerRepository
from apps.packages.application import command_handlers as package_commands
from apps.packages.application.queries import PackageQueries
from apps.packages.domain import events as package_events
from apps.packages.repositories import DjangoPackageRepository

logger = logging.getLogger(__name__)
audit_logger = structlog.get_logger("travelcore.audit")

AUDITED_EVENTS = (
    customer_events.CustomerRegistered,
    customer_events.CustomerContactUpdated,
    customer_events.CustomerDeleted,
    booking_events.BookingCreated,
    booking_events.BookingStatusChanged,
    booking_events.BookingDeleted,
    package_events.PackageCreated,
    package_events.PackageUpdated,
    package_events.PackageDeleted,
    package_events.BookingAddedToPackage,
    package_events.BookingRemovedFromPackage,
)


def audit_event(event: DomainEvent) -> None:
    """Write a committed domain event to the audit log"""
    audit_logger.info("domain_event", **event.to_dict())


@dataclass
class TravelCore:
    """Everything the transport layer needs: the bus for writes, queries for reads"""

    bus: MessageBus
    customers: CustomerQueries
    bookings: BookingQueries
    packages: PackageQueries

    def handle(self, command):
        return self.bus.handle_command(command)


def bootstrap(
    customer_repo=None,
    booking_repo=None,
    package_repo=None,
    message_bus: MessageBus | None = None,
) -> TravelCore:
    """
    Build a fully wired core

    Repositories default to the Django ORM implementations; any of them can
    be replaced, which is how tests inject fakes.
    """
    customer_repo = customer_repo or DjangoCustomerRepository()
    booking_repo = booking_repo or DjangoBookingRepository()
    package_repo = package_repo or DjangoPackageRepository()
    bus = message_bus or MessageBus()

    create_booking = booking_commands.CreateBookingHandler(booking_repo, customer_repo, bus)
    transition_booking = booking_commands.TransitionBookingHandler(booking_repo, bus)

    handlers = {
        customer_commands.RegisterCustomerCommand:
            customer_commands.RegisterCustomerHandler(customer_repo, bus),
        customer_commands.UpdateCustomerContactCommand:
            customer_commands.UpdateCustomerContactHandler(customer_repo, bus),
        customer_commands.DeleteCustomerCommand:
            customer_commands.DeleteCustomerHandler(customer_repo, bus),
        booking_commands.CreateFlightBookingCommand: create_booking,
        booking_commands.CreateHotelBookingCommand: create_booking,
        booking_commands.ConfirmBookingCommand: transition_booking,
        booking_commands.CancelBookingCommand: transition_booking,
        booking_commands.CompleteBookingCommand: transition_booking,
        booking_commands.DeleteBookingCommand:
            booking_commands.DeleteBookingHandler(booking_repo, bus),
        package_commands.CreatePackageCommand:
            package_commands.CreatePackageHandler(package_repo, customer_repo, bus),
        package_commands.UpdatePackageCommand:
            package_commands.UpdatePackageHandler(package_repo, bus),
        package_commands.AddBookingToPackageCommand:
            package_commands.AddBookingToPackageHandler(package_repo, booking_repo, bus),
        package_commands.RemoveBookingFromPackageCommand:
            package_commands.RemoveBookingFromPackageHandler(package_repo, bus),
        package_commands.DeletePackageCommand:
            package_commands.DeletePackageHandler(package_repo, bus),
    }
    for command_type, handler in handlers.items():
        bus.register_command_handler(command_type, handler.handle)

    for event_type in AUDITED_EVENTS:
        bus.register_event_handler(event_type, audit_event)

    logger.debug(f"Core bootstrapped with {len(handlers)} command handlers")
    return TravelCore(
        bus=bus,
        customers=CustomerQueries(customer_repo),
        bookings=BookingQueries(booking_repo, customer_repo),
        packages=PackageQueries(package_repo, booking_repo),
    )


def get_core() -> TravelCore:
    """The instance built when Django started"""
    from django.apps import apps

    return apps.get_app_config("shared").core

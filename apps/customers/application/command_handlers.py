"""
Customer Command Handlers

Use cases of the customer registry. Each runs in one transaction.

Commands:
- RegisterCustomerCommand: Register a new customer
- UpdateCustomerContactCommand: Change contact details
- DeleteCustomerCommand: Delete a customer with no bookings or packages
"""

from dataclasses import dataclass
import logging

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import ConflictError, NotFound
from apps.customers.domain.entities import Customer
from apps.customers.domain.events import CustomerDeleted, CustomerRegistered

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class RegisterCustomerCommand:
    """Command to register a new customer"""
    name: str
    email: str
    phone: str
    passport_number: str


@dataclass
class UpdateCustomerContactCommand:
    """Command to change contact fields; ``None`` leaves a field as it is"""
    customer_id: int
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    passport_number: str | None = None


@dataclass
class DeleteCustomerCommand:
    """Command to delete a customer"""
    customer_id: int


# ===== Command Handlers =====

class RegisterCustomerHandler:
    """Handler for RegisterCustomer command"""

    def __init__(self, customer_repo, message_bus=None):
        self.customer_repo = customer_repo
        self.message_bus = message_bus

    def handle(self, command: RegisterCustomerCommand) -> Customer:
        customer = Customer(
            name=command.name,
            email=command.email,
            phone=command.phone,
            passport_number=command.passport_number,
        )

        with DjangoUnitOfWork(self.message_bus) as uow:
            if self.customer_repo.email_taken(customer.email):
                raise ConflictError(
                    f"Email {customer.email} is already registered",
                    entity="Customer",
                    field="email",
                )

            self.customer_repo.add(customer)
            customer.add_event(CustomerRegistered(
                aggregate_id=customer.id,
                customer_id=customer.id,
                email=customer.email,
            ))
            uow.collect_events(customer)

        logger.info(f"Customer registered: {customer.id}")
        return customer


class UpdateCustomerContactHandler:
    """Handler for UpdateCustomerContact command"""

    def __init__(self, customer_repo, message_bus=None):
        self.customer_repo = customer_repo
        self.message_bus = message_bus

    def handle(self, command: UpdateCustomerContactCommand) -> Customer:
        with DjangoUnitOfWork(self.message_bus) as uow:
            customer = self.customer_repo.get_by_id(command.customer_id, lock=True)
            if not customer:
                raise NotFound("Customer", command.customer_id)

            changed = customer.update_contact(
                name=command.name,
                email=command.email,
                phone=command.phone,
                passport_number=command.passport_number,
            )

            if 'email' in changed and self.customer_repo.email_taken(customer.email, exclude_id=customer.id):
                raise ConflictError(
                    f"Email {customer.email} is already registered",
                    entity="Customer",
                    entity_id=customer.id,
                    field="email",
                )

            if changed:
                self.customer_repo.save(customer)
                uow.collect_events(customer)

        logger.info(f"Customer {customer.id} updated: {', '.join(changed) or 'no changes'}")
        return customer


class DeleteCustomerHandler:
    """
    Handler for DeleteCustomer command

    Deletion is restricted: a customer that still owns a booking or a
    travel package cannot be deleted. The customer row is locked first so
    a booking cannot be created for it between the check and the delete.
    """

    def __init__(self, customer_repo, message_bus=None):
        self.customer_repo = customer_repo
        self.message_bus = message_bus

    def handle(self, command: DeleteCustomerCommand) -> None:
        logger.info(f"Deleting customer {command.customer_id}")

        with DjangoUnitOfWork(self.message_bus) as uow:
            customer = self.customer_repo.get_by_id(command.customer_id, lock=True)
            if not customer:
                raise NotFound("Customer", command.customer_id)

            bookings, packages = self.customer_repo.reference_counts(customer.id)
            if bookings or packages:
                raise ConflictError(
                    f"Customer {customer.id} still owns {bookings} booking(s) "
                    f"and {packages} package(s)",
                    entity="Customer",
                    entity_id=customer.id,
                )

            self.customer_repo.delete(customer.id)
            customer.add_event(CustomerDeleted(
                aggregate_id=customer.id,
                customer_id=customer.id,
            ))
            uow.collect_events(customer)

        logger.info(f"Customer {command.customer_id} deleted")

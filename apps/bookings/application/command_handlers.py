"""
Booking Command Handlers

These are the use cases for the booking domain.
They orchestrate domain operations within transactions.

Commands:
- CreateFlightBookingCommand: Create a PENDING flight booking
- CreateHotelBookingCommand: Create a PENDING hotel booking
- ConfirmBookingCommand: PENDING -> CONFIRMED
- CancelBookingCommand: PENDING/CONFIRMED -> CANCELLED
- CompleteBookingCommand: CONFIRMED -> COMPLETED
- DeleteBookingCommand: Delete a booking with its extension and memberships
"""

from dataclasses import dataclass
import logging

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import InvalidStateTransition, NotFound
from apps.bookings.domain.entities import (
    Booking,
    FlightBookingParams,
    HotelBookingParams,
    create_flight_booking,
    create_hotel_booking,
)
from apps.bookings.domain.events import BookingCreated, BookingDeleted
from apps.bookings.domain.lifecycle import BookingAction, BookingStatus

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class CreateFlightBookingCommand(FlightBookingParams):
    """Command to create a flight booking"""


@dataclass
class CreateHotelBookingCommand(HotelBookingParams):
    """Command to create a hotel booking"""


@dataclass
class TransitionBookingCommand:
    """
    Base of the lifecycle commands

    ``expected_status`` is the status the caller last saw. When given, the
    transition is refused unless the booking is still in that status, so a
    confirm and a cancel both issued against a PENDING booking cannot both
    succeed.
    """
    booking_id: int
    expected_status: BookingStatus | None = None


@dataclass
class ConfirmBookingCommand(TransitionBookingCommand):
    """Command to confirm a pending booking"""


@dataclass
class CancelBookingCommand(TransitionBookingCommand):
    """Command to cancel a pending or confirmed booking"""


@dataclass
class CompleteBookingCommand(TransitionBookingCommand):
    """Command to complete a confirmed booking"""


@dataclass
class DeleteBookingCommand:
    """Command to delete a booking"""
    booking_id: int


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateFlightBooking and CreateHotelBooking commands

    Strategy:
    1. Build the Booking aggregate (all field validation, nothing written yet)
    2. Start database transaction (atomic)
    3. Lock the owning customer row so it cannot be deleted concurrently
    4. Insert booking and extension rows
    5. Commit, then publish BookingCreated
    """

    def __init__(self, booking_repo, customer_repo, message_bus=None):
        self.booking_repo = booking_repo
        self.customer_repo = customer_repo
        self.message_bus = message_bus

    def handle(self, command: CreateFlightBookingCommand | CreateHotelBookingCommand) -> Booking:
        match command:
            case CreateFlightBookingCommand():
                booking = create_flight_booking(command)
            case CreateHotelBookingCommand():
                booking = create_hotel_booking(command)
            case _:
                raise TypeError(f"Unsupported command {type(command).__name__}")

        logger.info(
            f"Creating {booking.booking_type.value} booking for customer {booking.customer_id}, "
            f"date {booking.booking_date}, price {booking.total_price}"
        )

        with DjangoUnitOfWork(self.message_bus) as uow:
            if not self.customer_repo.exists(booking.customer_id, lock=True):
                raise NotFound("Customer", booking.customer_id)

            self.booking_repo.add(booking)

            booking.add_event(BookingCreated(
                aggregate_id=booking.id,
                booking_id=booking.id,
                customer_id=booking.customer_id,
                booking_type=booking.booking_type.value,
                total_price=str(booking.total_price.amount),
            ))
            uow.collect_events(booking)

        logger.info(f"Booking created successfully: {booking.id}")
        return booking


class TransitionBookingHandler:
    """
    Handler for ConfirmBooking, CancelBooking and CompleteBooking commands

    The booking row is locked for the duration of the transaction and the
    new status is written with a compare-and-set on the status read, so
    of two concurrent transitions on the same booking exactly one wins and
    the other fails with InvalidStateTransition.
    """

    ACTIONS = {
        ConfirmBookingCommand: BookingAction.CONFIRM,
        CancelBookingCommand: BookingAction.CANCEL,
        CompleteBookingCommand: BookingAction.COMPLETE,
    }

    def __init__(self, booking_repo, message_bus=None):
        self.booking_repo = booking_repo
        self.message_bus = message_bus

    def handle(self, command: TransitionBookingCommand) -> Booking:
        action = self.ACTIONS[type(command)]
        logger.info(f"Applying {action.value} to booking {command.booking_id}")

        with DjangoUnitOfWork(self.message_bus) as uow:
            booking = self.booking_repo.get_by_id(command.booking_id, lock=True)
            if not booking:
                raise NotFound("Booking", command.booking_id)

            if command.expected_status is not None and booking.status is not command.expected_status:
                logger.info(
                    f"Booking {booking.id} is {booking.status.value}, "
                    f"caller expected {command.expected_status.value}"
                )
                raise InvalidStateTransition(booking.status, action, entity_id=booking.id)

            previous = booking.apply(action)
            self.booking_repo.save_status(booking, expected=previous, action=action)
            uow.collect_events(booking)

        logger.info(f"Booking {booking.id} moved from {previous.value} to {booking.status.value}")
        return booking


class DeleteBookingHandler:
    """
    Handler for DeleteBooking command

    The booking, its extension row and all of its package memberships are
    removed in one transaction; the packages themselves stay.
    """

    def __init__(self, booking_repo, message_bus=None):
        self.booking_repo = booking_repo
        self.message_bus = message_bus

    def handle(self, command: DeleteBookingCommand) -> None:
        logger.info(f"Deleting booking {command.booking_id}")

        with DjangoUnitOfWork(self.message_bus) as uow:
            booking = self.booking_repo.get_by_id(command.booking_id, lock=True)
            if not booking:
                raise NotFound("Booking", command.booking_id)

            removed = self.booking_repo.delete(booking.id)

            booking.add_event(BookingDeleted(
                aggregate_id=booking.id,
                booking_id=booking.id,
                customer_id=booking.customer_id,
                removed_memberships=removed,
            ))
            uow.collect_events(booking)

        logger.info(f"Booking {command.booking_id} deleted with {removed} package membership(s)")

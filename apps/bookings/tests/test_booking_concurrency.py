"""Transitions racing on real threads, each with its own database connection."""

import threading
from datetime import date
from decimal import Decimal

import pytest
from django.db import connection

from apps.bookings.application.command_handlers import (
    CancelBookingCommand,
    CompleteBookingCommand,
    ConfirmBookingCommand,
    CreateFlightBookingCommand,
)
from apps.bookings.domain.lifecycle import BookingStatus
from apps.bookings.models import Booking as BookingModel
from apps.customers.application.command_handlers import RegisterCustomerCommand
from shared.domain.exceptions import InvalidStateTransition

pytestmark = pytest.mark.django_db(transaction=True)

TRIALS = 5


def pending_booking(core, suffix):
    customer = core.handle(RegisterCustomerCommand(
        name="Timur Bekov",
        email=f"timur{suffix}@example.com",
        phone="+77010000003",
        passport_number="N1112223",
    ))
    return core.handle(CreateFlightBookingCommand(
        customer_id=customer.id,
        booking_date=date(2026, 6, 1),
        total_price=Decimal("420.00"),
        flight_number="KC117",
        origin="NQZ",
        destination="ALA",
    ))


def race(core, *commands):
    """Run ``commands`` at once, one thread each; returns outcome per command class"""
    barrier = threading.Barrier(len(commands))
    outcomes = {}

    def run(command):
        try:
            barrier.wait()
            core.handle(command)
            outcomes[type(command)] = "ok"
        except InvalidStateTransition:
            outcomes[type(command)] = "refused"
        finally:
            connection.close()

    threads = [threading.Thread(target=run, args=(command,)) for command in commands]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)
    return outcomes


@pytest.mark.parametrize("trial", range(TRIALS))
def test_confirm_and_cancel_on_pending_one_wins(core, trial):
    booking = pending_booking(core, trial)

    outcomes = race(
        core,
        ConfirmBookingCommand(booking_id=booking.id, expected_status=BookingStatus.PENDING),
        CancelBookingCommand(booking_id=booking.id, expected_status=BookingStatus.PENDING),
    )

    assert sorted(outcomes.values()) == ["ok", "refused"]
    winner = next(command for command, outcome in outcomes.items() if outcome == "ok")
    stored = BookingModel.objects.get(pk=booking.id).status
    assert stored == ("CONFIRMED" if winner is ConfirmBookingCommand else "CANCELLED")


@pytest.mark.parametrize("trial", range(TRIALS))
def test_cancel_and_complete_on_confirmed_one_wins(core, trial):
    booking = pending_booking(core, trial)
    core.handle(ConfirmBookingCommand(booking_id=booking.id))

    outcomes = race(
        core,
        CancelBookingCommand(booking_id=booking.id),
        CompleteBookingCommand(booking_id=booking.id),
    )

    assert sorted(outcomes.values()) == ["ok", "refused"]
    winner = next(command for command, outcome in outcomes.items() if outcome == "ok")
    stored = BookingModel.objects.get(pk=booking.id).status
    assert stored == ("CANCELLED" if winner is CancelBookingCommand else "COMPLETED")


def test_expected_status_mismatch_is_refused(core):
    booking = pending_booking(core, "x")
    core.handle(ConfirmBookingCommand(booking_id=booking.id))

    with pytest.raises(InvalidStateTransition) as exc:
        core.handle(CancelBookingCommand(booking_id=booking.id, expected_status=BookingStatus.PENDING))
    assert exc.value.current is BookingStatus.CONFIRMED
    assert BookingModel.objects.get(pk=booking.id).status == "CONFIRMED"

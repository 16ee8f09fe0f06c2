"""
Booking Lifecycle

Finite state machine for booking status.

State transitions:
- PENDING -> CONFIRMED (confirm)
- PENDING -> CANCELLED (cancel)
- CONFIRMED -> CANCELLED (cancel)
- CONFIRMED -> COMPLETED (complete)

CANCELLED and COMPLETED are terminal. Every other (status, action) pair
is refused with InvalidStateTransition, including repeating an action
that has already been applied.
"""

from enum import Enum

from shared.domain.exceptions import InvalidStateTransition


class BookingStatus(Enum):
    """Booking status"""
    PENDING = 'PENDING'        # Initial status
    CONFIRMED = 'CONFIRMED'
    CANCELLED = 'CANCELLED'    # Terminal
    COMPLETED = 'COMPLETED'    # Terminal


class BookingAction(Enum):
    """Actions a caller can request on a booking"""
    CONFIRM = 'confirm'
    CANCEL = 'cancel'
    COMPLETE = 'complete'


TRANSITIONS: dict[tuple[BookingStatus, BookingAction], BookingStatus] = {
    (BookingStatus.PENDING, BookingAction.CONFIRM): BookingStatus.CONFIRMED,
    (BookingStatus.PENDING, BookingAction.CANCEL): BookingStatus.CANCELLED,
    (BookingStatus.CONFIRMED, BookingAction.CANCEL): BookingStatus.CANCELLED,
    (BookingStatus.CONFIRMED, BookingAction.COMPLETE): BookingStatus.COMPLETED,
}

TERMINAL_STATUSES = frozenset({BookingStatus.CANCELLED, BookingStatus.COMPLETED})


def next_status(current: BookingStatus, action: BookingAction, booking_id: int | None = None) -> BookingStatus:
    """
    Target status of ``action`` applied in ``current``

    Raises:
        InvalidStateTransition: If the pair is not in the transition table
    """
    try:
        return TRANSITIONS[(current, action)]
    except KeyError:
        raise InvalidStateTransition(current, action, entity_id=booking_id) from None


def allowed_actions(current: BookingStatus) -> list[BookingAction]:
    """Actions accepted in ``current``, in declaration order"""
    return [action for action in BookingAction if (current, action) in TRANSITIONS]


def is_terminal(status: BookingStatus) -> bool:
    return status in TERMINAL_STATUSES

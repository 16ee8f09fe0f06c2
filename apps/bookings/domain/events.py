"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class BookingCreated(DomainEvent):
    """
    Event: A new booking was created in PENDING status
    """
    booking_id: int
    customer_id: int
    booking_type: str
    total_price: str

    def payload(self) -> dict:
        return {
            'booking_id': self.booking_id,
            'customer_id': self.customer_id,
            'booking_type': self.booking_type,
            'total_price': self.total_price,
        }


@dataclass(kw_only=True)
class BookingStatusChanged(DomainEvent):
    """
    Event: A lifecycle action moved the booking to a new status

    Raised by confirm (PENDING -> CONFIRMED), cancel (PENDING/CONFIRMED ->
    CANCELLED) and complete (CONFIRMED -> COMPLETED).
    """
    booking_id: int
    action: str
    old_status: str
    new_status: str

    def payload(self) -> dict:
        return {
            'booking_id': self.booking_id,
            'action': self.action,
            'old_status': self.old_status,
            'new_status': self.new_status,
        }


@dataclass(kw_only=True)
class BookingDeleted(DomainEvent):
    """
    Event: A booking, its extension and its package memberships were deleted
    """
    booking_id: int
    customer_id: int
    removed_memberships: int = 0

    def payload(self) -> dict:
        return {
            'booking_id': self.booking_id,
            'customer_id': self.customer_id,
            'removed_memberships': self.removed_memberships,
        }

"""
Travel Package Domain Events

Events that represent things that have happened to packages and their
membership. These are published after successful transaction commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class PackageCreated(DomainEvent):
    """Event: A travel package was created for a customer"""
    package_id: int
    customer_id: int
    discount_percentage: str

    def payload(self) -> dict:
        return {
            'package_id': self.package_id,
            'customer_id': self.customer_id,
            'discount_percentage': self.discount_percentage,
        }


@dataclass(kw_only=True)
class PackageUpdated(DomainEvent):
    """Event: A package was renamed or its discount changed"""
    package_id: int
    changed_fields: tuple[str, ...]
    discount_percentage: str

    def payload(self) -> dict:
        return {
            'package_id': self.package_id,
            'changed_fields': list(self.changed_fields),
            'discount_percentage': self.discount_percentage,
        }


@dataclass(kw_only=True)
class PackageDeleted(DomainEvent):
    """Event: A package and its membership rows were deleted; bookings stay"""
    package_id: int
    removed_memberships: int = 0

    def payload(self) -> dict:
        return {'package_id': self.package_id, 'removed_memberships': self.removed_memberships}


@dataclass(kw_only=True)
class BookingAddedToPackage(DomainEvent):
    """Event: A booking joined a package"""
    package_id: int
    booking_id: int

    def payload(self) -> dict:
        return {'package_id': self.package_id, 'booking_id': self.booking_id}


@dataclass(kw_only=True)
class BookingRemovedFromPackage(DomainEvent):
    """Event: A booking left a package"""
    package_id: int
    booking_id: int

    def payload(self) -> dict:
        return {'package_id': self.package_id, 'booking_id': self.booking_id}

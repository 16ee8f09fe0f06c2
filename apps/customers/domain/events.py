"""
Customer Domain Events

Events that represent things that have happened to customers.
These are published after successful transaction commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class CustomerRegistered(DomainEvent):
    """Event: A new customer was registered"""
    customer_id: int
    email: str

    def payload(self) -> dict:
        return {'customer_id': self.customer_id, 'email': self.email}


@dataclass(kw_only=True)
class CustomerContactUpdated(DomainEvent):
    """Event: One or more contact fields of a customer changed"""
    customer_id: int
    changed_fields: tuple[str, ...]

    def payload(self) -> dict:
        return {'customer_id': self.customer_id, 'changed_fields': list(self.changed_fields)}


@dataclass(kw_only=True)
class CustomerDeleted(DomainEvent):
    """Event: A customer without bookings or packages was deleted"""
    customer_id: int

    def payload(self) -> dict:
        return {'customer_id': self.customer_id}

"""
Customer Domain Entities

- Customer: aggregate root owning identity and contact details
"""

import re
from dataclasses import dataclass

from shared.domain.base import Aggregate
from shared.domain.exceptions import InvalidInput
from shared.domain.validation import require_text

EMAIL_PATTERN = re.compile(r'^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$')

NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 180
PHONE_MAX_LENGTH = 20
PASSPORT_MAX_LENGTH = 20


def validate_email(value) -> str:
    email = require_text(value, 'email', EMAIL_MAX_LENGTH)
    if not EMAIL_PATTERN.match(email):
        raise InvalidInput('email', "is not a valid email address")
    return email


@dataclass(kw_only=True, eq=False)
class Customer(Aggregate):
    """
    Customer Aggregate Root

    Identity is assigned on registration and never changes.
    Contact fields (name, email, phone, passport number) may be updated.

    Key invariants:
    - name is not blank
    - email matches a basic address shape (uniqueness is checked by the repository)
    """

    name: str
    email: str
    phone: str
    passport_number: str

    def __post_init__(self):
        self.name = require_text(self.name, 'name', NAME_MAX_LENGTH)
        self.email = validate_email(self.email)
        self.phone = require_text(self.phone, 'phone', PHONE_MAX_LENGTH)
        self.passport_number = require_text(self.passport_number, 'passport_number', PASSPORT_MAX_LENGTH)

    def update_contact(
        self,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        passport_number: str | None = None,
    ) -> list[str]:
        """
        Replace the given contact fields

        All values are validated before any is applied, so a failure leaves
        the customer untouched. Returns the names of the fields that changed.
        """
        candidates = {
            'name': require_text(name, 'name', NAME_MAX_LENGTH) if name is not None else None,
            'email': validate_email(email) if email is not None else None,
            'phone': require_text(phone, 'phone', PHONE_MAX_LENGTH) if phone is not None else None,
            'passport_number': (
                require_text(passport_number, 'passport_number', PASSPORT_MAX_LENGTH)
                if passport_number is not None else None
            ),
        }

        changed = []
        for field_name, value in candidates.items():
            if value is not None and getattr(self, field_name) != value:
                setattr(self, field_name, value)
                changed.append(field_name)

        if changed:
            from apps.customers.domain.events import CustomerContactUpdated

            self.add_event(CustomerContactUpdated(
                aggregate_id=self.id,
                customer_id=self.id,
                changed_fields=tuple(changed),
            ))
        return changed

    def __str__(self):
        return f"{self.name} <{self.email}>"

"""
Travel Package Domain Entities

- TravelPackage: Aggregate root, a named group of bookings with a discount
- PackageMembership: One (package, booking) pair
- PackageSummary: Discount totals computed over a package's bookings
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable

from shared.domain.base import Aggregate, ValueObject
from shared.domain.validation import require_id, require_percentage, require_text
from shared.domain.value_objects import Percentage, round_half_up

NAME_MAX_LENGTH = 150


@dataclass(kw_only=True, eq=False)
class TravelPackage(Aggregate):
    """
    Travel Package Aggregate Root

    Key invariants:
    - name is not blank
    - discount is a percentage in [0, 100]

    Member bookings are not held on the aggregate; membership rows are
    managed through the repository so that deleting a package never
    touches the bookings themselves.
    """

    name: str
    customer_id: int
    discount: Percentage = Percentage(Decimal('0'))

    def __post_init__(self):
        self.name = require_text(self.name, 'name', NAME_MAX_LENGTH)
        self.customer_id = require_id(self.customer_id, 'customer_id')
        self.discount = require_percentage(self.discount, 'discount_percentage')

    @property
    def discount_percentage(self) -> Decimal:
        return self.discount.value

    def update(self, name: str | None = None, discount_percentage=None) -> list[str]:
        """
        Rename the package and/or change its discount

        Both values are validated before either is applied.
        Returns the names of the fields that changed.
        Events: PackageUpdated
        """
        new_name = require_text(name, 'name', NAME_MAX_LENGTH) if name is not None else None
        new_discount = (
            require_percentage(discount_percentage, 'discount_percentage')
            if discount_percentage is not None else None
        )

        changed = []
        if new_name is not None and new_name != self.name:
            self.name = new_name
            changed.append('name')
        if new_discount is not None and new_discount != self.discount:
            self.discount = new_discount
            changed.append('discount_percentage')

        if changed:
            from apps.packages.domain.events import PackageUpdated

            self.add_event(PackageUpdated(
                aggregate_id=self.id,
                package_id=self.id,
                changed_fields=tuple(changed),
                discount_percentage=str(self.discount.value),
            ))
        return changed

    def __str__(self):
        return f"{self.name} (-{self.discount})"


@dataclass(frozen=True)
class PackageMembership(ValueObject):
    """A booking's membership in a package"""
    package_id: int
    booking_id: int
    added_at: datetime | None = None


@dataclass(frozen=True)
class PackageSummary(ValueObject):
    """
    Discount totals of a package

    total_before_discount is the sum of member booking prices, whatever
    their status. discount_amount and total_after_discount are each
    rounded half-up to cents from the unrounded products, so they can
    differ from total_before_discount by one cent in sum.
    """
    package_id: int
    name: str
    customer_id: int
    discount_percentage: Decimal
    booking_count: int
    total_before_discount: Decimal
    discount_amount: Decimal
    total_after_discount: Decimal
    customer_name: str = ''
    customer_email: str = ''
    created_at: datetime | None = None

    @classmethod
    def compute(
        cls,
        package: TravelPackage,
        booking_count: int,
        total_before_discount: Decimal | None,
        customer_name: str = '',
        customer_email: str = '',
    ) -> 'PackageSummary':
        """
        Pure projection from a package and its aggregated member prices

        Examples:
            - 10% over 750.00 + 800.00 -> before 1550.00, discount 155.00, after 1395.00
            - no members -> 0 / 0 / 0
        """
        total = round_half_up(total_before_discount or Decimal('0'))
        return cls(
            package_id=package.id,
            name=package.name,
            customer_id=package.customer_id,
            discount_percentage=package.discount.value,
            booking_count=booking_count,
            total_before_discount=total,
            discount_amount=package.discount.portion_of(total),
            total_after_discount=package.discount.remainder_of(total),
            customer_name=customer_name,
            customer_email=customer_email,
            created_at=package.created_at,
        )

    @classmethod
    def from_prices(cls, package: TravelPackage, prices: Iterable[Decimal], **customer) -> 'PackageSummary':
        """Summary over an explicit list of member prices"""
        prices = list(prices)
        return cls.compute(package, len(prices), sum(prices, Decimal('0')), **customer)

"""
Common Value Objects

Value objects used across multiple domains:
- Money: Non-negative monetary amount with two decimal places
- Percentage: A share between 0 and 100, used for package discounts
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from shared.domain.base import ValueObject

CENT = Decimal('0.01')


def to_decimal(value) -> Decimal:
    """
    Convert int, str, float or Decimal to Decimal

    Floats go through ``str`` so 0.1 becomes Decimal('0.1') rather than
    its binary expansion. Booleans are rejected.
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not a number")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation:
            raise ValueError(f"Not a number: {value!r}") from None
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        raise ValueError(f"Not a number: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def round_half_up(value: Decimal) -> Decimal:
    """Round to cents, halves away from zero"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _check_scale(value: Decimal, max_integer_digits: int):
    if abs(value) >= Decimal(10) ** max_integer_digits:
        raise ValueError(f"At most {max_integer_digits} integer digits are allowed")
    if value.as_tuple().exponent < -2 and value != round_half_up(value):
        raise ValueError("At most two decimal places are allowed")


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Represents a non-negative amount stored as NUMERIC(12,2).
    Immutable and supports addition.
    """
    amount: Decimal

    MAX_INTEGER_DIGITS = 10

    def __post_init__(self):
        amount = to_decimal(self.amount)
        if amount < 0:
            raise ValueError("Amount cannot be negative")
        _check_scale(amount, self.MAX_INTEGER_DIGITS)
        object.__setattr__(self, 'amount', round_half_up(amount))

    def __add__(self, other: 'Money') -> 'Money':
        """Add two money objects"""
        if not isinstance(other, Money):
            raise TypeError("Can only add Money to Money")
        return Money(self.amount + other.amount)

    def __str__(self):
        return f"{self.amount:,.2f}"

    def __repr__(self):
        return f"Money({self.amount})"


@dataclass(frozen=True)
class Percentage(ValueObject):
    """
    Percentage value object

    A share in [0, 100] with at most two decimal places (NUMERIC(5,2)).
    """
    value: Decimal

    def __post_init__(self):
        value = to_decimal(self.value)
        if value < 0 or value > 100:
            raise ValueError("Percentage must be between 0 and 100")
        _check_scale(value, 3)
        object.__setattr__(self, 'value', round_half_up(value))

    def portion_of(self, amount: Decimal) -> Decimal:
        """
        This percentage of ``amount``, rounded half-up to cents

        Examples:
            - Percentage(10).portion_of(Decimal('1550.00')) -> Decimal('155.00')
        """
        return round_half_up(amount * self.value / Decimal(100))

    def remainder_of(self, amount: Decimal) -> Decimal:
        """What is left of ``amount`` after taking this percentage, rounded half-up"""
        return round_half_up(amount * (Decimal(1) - self.value / Decimal(100)))

    def __str__(self):
        return f"{self.value}%"

"""
Field validation helpers

Turn raw parameters into validated domain values, raising InvalidInput
that names the offending field. Values are never clamped or coerced
into range.
"""

from datetime import date, datetime
from enum import Enum
from typing import Type, TypeVar

from shared.domain.exceptions import InvalidInput
from shared.domain.value_objects import Money, Percentage

E = TypeVar('E', bound=Enum)


def require_text(value, field: str, max_length: int) -> str:
    """Non-empty string after trimming, at most ``max_length`` characters"""
    if value is None:
        raise InvalidInput(field, "is required")
    if not isinstance(value, str):
        raise InvalidInput(field, "must be a string")
    text = value.strip()
    if not text:
        raise InvalidInput(field, "must not be empty")
    if len(text) > max_length:
        raise InvalidInput(field, f"must be at most {max_length} characters")
    return text


def require_choice(value, enum_type: Type[E], field: str, default: E | None = None) -> E:
    """
    Member of ``enum_type``, given either as the member or its value

    ``None`` falls back to ``default`` when one is provided.
    """
    if value is None:
        if default is None:
            raise InvalidInput(field, "is required")
        return default
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        allowed = ', '.join(member.value for member in enum_type)
        raise InvalidInput(field, f"must be one of {allowed}") from None


def require_int(value, field: str, minimum: int | None = None, maximum: int | None = None) -> int:
    """Integer within the inclusive bounds"""
    if value is None:
        raise InvalidInput(field, "is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(field, "must be an integer")
    if minimum is not None and value < minimum:
        raise InvalidInput(field, f"must be at least {minimum}")
    if maximum is not None and value > maximum:
        raise InvalidInput(field, f"must be at most {maximum}")
    return value


def require_id(value, field: str) -> int:
    """Positive integer identity"""
    return require_int(value, field, minimum=1)


def require_date(value, field: str) -> date:
    """Calendar date; a datetime is reduced to its date"""
    if value is None:
        raise InvalidInput(field, "is required")
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidInput(field, "must be a date")
    return value


def require_money(value, field: str) -> Money:
    if value is None:
        raise InvalidInput(field, "is required")
    if isinstance(value, Money):
        return value
    try:
        return Money(value)
    except ValueError as e:
        raise InvalidInput(field, str(e)) from None


def require_percentage(value, field: str) -> Percentage:
    if value is None:
        raise InvalidInput(field, "is required")
    if isinstance(value, Percentage):
        return value
    try:
        return Percentage(value)
    except ValueError as e:
        raise InvalidInput(field, str(e)) from None

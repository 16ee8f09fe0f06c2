from decimal import Decimal

import pytest

from shared.domain.exceptions import InvalidInput
from shared.domain.validation import require_choice, require_int, require_money, require_text
from shared.domain.value_objects import Money, Percentage, round_half_up
from apps.bookings.domain.entities import SeatClass


def test_money_is_quantized_to_cents():
    assert Money("750").amount == Decimal("750.00")
    assert Money(0.1).amount == Decimal("0.10")


def test_money_rejects_negative_and_extra_decimals():
    with pytest.raises(ValueError):
        Money(Decimal("-0.01"))
    with pytest.raises(ValueError):
        Money(Decimal("10.005"))


def test_money_accepts_trailing_zero_scale():
    assert Money(Decimal("10.500")).amount == Decimal("10.50")


def test_money_addition():
    assert (Money("1.10") + Money("2.20")).amount == Decimal("3.30")


def test_round_half_up():
    assert round_half_up(Decimal("0.005")) == Decimal("0.01")
    assert round_half_up(Decimal("2.675")) == Decimal("2.68")
    assert round_half_up(Decimal("2.674")) == Decimal("2.67")


@pytest.mark.parametrize("value", ["0", "100", "12.5", "99.99"])
def test_percentage_bounds_inclusive(value):
    assert Percentage(value).value == round_half_up(Decimal(value))


@pytest.mark.parametrize("value", ["-0.01", "100.01", "nan", "inf"])
def test_percentage_out_of_range(value):
    with pytest.raises(ValueError):
        Percentage(value)


def test_percentage_portion_and_remainder():
    ten = Percentage("10")
    assert ten.portion_of(Decimal("1550.00")) == Decimal("155.00")
    assert ten.remainder_of(Decimal("1550.00")) == Decimal("1395.00")


def test_percentage_rounds_half_up():
    # 12.5% of 0.20 is 0.025
    assert Percentage("12.5").portion_of(Decimal("0.20")) == Decimal("0.03")
    assert Percentage("12.5").remainder_of(Decimal("0.20")) == Decimal("0.18")


def test_require_text_trims_and_rejects_blank():
    assert require_text("  Almaty ", "origin", 10) == "Almaty"
    with pytest.raises(InvalidInput) as exc:
        require_text("   ", "origin", 10)
    assert exc.value.field == "origin"


def test_require_int_rejects_bool_and_range():
    with pytest.raises(InvalidInput):
        require_int(True, "nights", 1, 365)
    with pytest.raises(InvalidInput):
        require_int(366, "nights", 1, 365)
    assert require_int(365, "nights", 1, 365) == 365


def test_require_choice_accepts_value_and_member():
    assert require_choice("BUSINESS", SeatClass, "seat_class") is SeatClass.BUSINESS
    assert require_choice(SeatClass.FIRST_CLASS, SeatClass, "seat_class") is SeatClass.FIRST_CLASS
    assert require_choice(None, SeatClass, "seat_class", default=SeatClass.ECONOMY) is SeatClass.ECONOMY
    with pytest.raises(InvalidInput):
        require_choice("PREMIUM", SeatClass, "seat_class")


def test_require_money_names_field():
    with pytest.raises(InvalidInput) as exc:
        require_money("-5", "total_price")
    assert exc.value.to_dict()["field"] == "total_price"
    assert exc.value.kind == "invalid_input"

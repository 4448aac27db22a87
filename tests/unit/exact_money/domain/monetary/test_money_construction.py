from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.currency_registry import EUR, USD
from exact_money.domain.monetary.money import Money
from exact_money.errors import InvalidAmount, InvalidCurrency


def test_takes_amount_and_currency():
    price = Money(5.50, EUR)
    assert price.currency.code == "EUR"
    assert price.amount == Decimal("5.5")


def test_default_currency_is_euro():
    assert Money(5).currency == EUR
    assert Money(5).currency == Money.DEFAULT_CURRENCY
    assert Money(5, None).currency == EUR
    assert Money(5, "").currency == EUR


def test_requires_amount():
    with pytest.raises(InvalidAmount):
        Money()
    with pytest.raises(InvalidAmount):
        Money(EUR)


@pytest.mark.parametrize("amount", ["20", True, None, float("nan"), float("inf"), Decimal("NaN")])
def test_amount_must_be_finite_number(amount):
    with pytest.raises(InvalidAmount):
        Money(amount)


def test_amount_can_be_positive_negative_or_zero():
    assert Money(999).amount == Decimal(999)
    assert Money(-1213.40).amount == Decimal("-1213.4")
    assert Money(0).amount == Decimal(0)
    assert Money(-0.0).base == 0


def test_currency_as_string():
    assert Money(5, "usd").currency == USD
    assert Money(5, "PLN").currency == Currency("PLN")
    with pytest.raises(InvalidCurrency):
        Money(5, "dollars")


def test_keeps_floating_point_precision():
    money = Money(1.15555555)
    assert money.amount == Decimal("1.15555555")
    assert money.decimals == 8
    assert money.base == 115555555


@pytest.mark.parametrize(
    "amount, decimals, base",
    [
        (9.999, 3, 9999),
        (Decimal("5.00"), 0, 5),
        (-0.25, 2, -25),
        (100, 0, 100),
        (1e-7, 7, 1),
    ],
)
def test_derives_decimals_and_base(amount, decimals, base):
    money = Money(amount)
    assert money.decimals == decimals
    assert money.base == base
    assert money.amount == Decimal(base).scaleb(-decimals)


def test_decimals_are_capped_and_extra_digits_floored():
    money = Money(Decimal("0.1234567890123456789098765"))
    assert money.decimals == 20
    assert money.base == 12345678901234567890
    assert money.amount == Decimal("0.12345678901234567890")


def test_from_base_uses_given_base_and_decimals():
    first = Money(9.999)
    second = Money.from_base(9999, 3)
    assert first.amount == second.amount
    assert second.currency == EUR
    assert Money.from_base("-12345678901234567890123", 20, "USD").amount == Decimal("-123.45678901234567890123")


def test_from_base_trusts_decimals():
    money = Money.from_base(500, 2)
    assert money.amount == Decimal(5)
    assert money.decimals == 2
    assert money.base == 500


@pytest.mark.parametrize("base, decimals", [("12.5", 1), (1.5, 1), (True, 0), (10, -1), (10, 21), (10, 1.0)])
def test_from_base_rejects_invalid_input(base, decimals):
    with pytest.raises(InvalidAmount):
        Money.from_base(base, decimals)


def test_from_str():
    money = Money.from_str("1000.50 USD")
    assert money.amount == Decimal("1000.5")
    assert money.currency == USD
    assert Money.from_str(str(Money(-0.0000001, "EUR"))) == Money(-0.0000001, "EUR")


@pytest.mark.parametrize("value_str", ["", "  ", "1000.50", "1000.50 USD EUR", "abc USD"])
def test_from_str_rejects_invalid_format(value_str):
    with pytest.raises(InvalidAmount):
        Money.from_str(value_str)


def test_string_representations():
    money = Money(1000.5, USD)
    assert str(money) == "1000.5 USD"
    assert repr(money) == "Money(1000.5, USD)"
    assert str(Money(0.0000001, USD)) == "0.0000001 USD"
    assert float(Money(5)) + 5 == 10


def test_is_immutable():
    money = Money(5)
    with pytest.raises(FrozenInstanceError):
        money.amount = Decimal(6)
    with pytest.raises(FrozenInstanceError):
        money.base = 6
    with pytest.raises(FrozenInstanceError):
        del money.currency
    with pytest.raises((FrozenInstanceError, AttributeError, TypeError)):
        money.extra = 1
    assert money.amount == Decimal(5)


def test_amount_magnitude_is_limited():
    assert Money(Decimal("9E+999")).base == 9 * 10**999
    with pytest.raises(InvalidAmount, match="at most 1000 integer digits"):
        Money(Decimal("1E+1000"))
    with pytest.raises(InvalidAmount):
        Money(Decimal("1E+600000"))
    with pytest.raises(InvalidAmount):
        Money(10**5000)
    with pytest.raises(InvalidAmount):
        Money.from_base(10**1021, 20)


def test_largest_amount_round_trips_through_record():
    original = Money(Decimal("9" * 1000 + ".99999999999999999999"))
    assert original.decimals == 20
    assert Money.from_record(original.to_record()) == original


@pytest.mark.parametrize("base", ["1_000", " 12 ", "+", "12a", "１２"])
def test_from_base_requires_strict_integer_string(base):
    with pytest.raises(InvalidAmount):
        Money.from_base(base, 0)


def test_from_base_accepts_signed_integer_string():
    assert Money.from_base("-25", 2).amount == Decimal("-0.25")
    assert Money.from_base("+25", 1).amount == Decimal("2.5")

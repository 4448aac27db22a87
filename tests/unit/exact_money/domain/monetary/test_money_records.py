from decimal import Decimal

import pytest

from exact_money.domain.monetary.currency_registry import EUR, USD
from exact_money.domain.monetary.money import Money
from exact_money.errors import InvalidAmount, InvalidCurrency


def _assert_identical(copy: Money, original: Money) -> None:
    assert copy.base == original.base
    assert copy.decimals == original.decimals
    assert copy.amount == original.amount
    assert copy.currency.code == original.currency.code


def test_to_record():
    assert Money(9.9999, "EUR").to_record() == {"amount": "9.9999", "base": "99999", "decimals": 4, "currency": "EUR"}


@pytest.mark.parametrize("amount", [9.9999, 0, -1213.4, 1.15555555, Decimal("123456789012345678.12345678901234567890")])
def test_round_trip_through_record(amount):
    original = Money(amount, "EUR")
    copy = Money.from_record(original.to_record())
    _assert_identical(copy, original)
    assert copy == original


def test_round_trip_handles_zero():
    original = Money(0, "EUR")
    record = original.to_record()
    assert record["base"] == "0"
    assert record["decimals"] == 0
    _assert_identical(Money.from_record(record), original)


def test_from_record_with_amount():
    money = Money.from_record({"amount": 5, "currency": USD})
    assert money.amount == Decimal(5)
    assert money.currency == USD
    assert Money.from_record({"amount": 2.5}).currency == EUR


def test_from_record_prefers_base_and_decimals():
    money = Money.from_record({"amount": 1, "base": 9999, "decimals": 3})
    assert money.amount == Decimal("9.999")


def test_from_record_rejects_invalid_records():
    with pytest.raises(InvalidAmount):
        Money.from_record({"currency": "EUR"})
    with pytest.raises(InvalidAmount):
        Money.from_record({"base": 10})
    with pytest.raises(InvalidAmount):
        Money.from_record({"amount": "20"})
    with pytest.raises(InvalidAmount):
        Money.from_record([("amount", 1)])
    with pytest.raises(InvalidCurrency):
        Money.from_record({"amount": 1, "currency": "dollars"})

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from exact_money.config import MAX_DECIMALS, MAX_INTEGER_DIGITS
from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.currency_registry import default_currency, resolve_currency
from exact_money.errors import CurrencyMismatch, InvalidAmount, InvalidCurrency, InvalidOperand, InvalidRate, SameCurrencyConversion
from exact_money.utils import decimal_tools
from exact_money.utils.decimal_tools import AmountLike, as_decimal

_INTEGER_STRING = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True, init=False, eq=False, repr=False)
class Money:
    """Immutable monetary amount in a single currency.

    The amount is backed by an exact integer representation: `amount == base / 10 ** decimals`.
    All arithmetic runs on `Decimal` values, so results carry no binary floating-point noise
    (`Money(0.1) + Money(0.2)` is exactly `Money(0.3)`).

    Binary operations only accept another `Money` in the same currency.

    Attributes:
        amount (Decimal): Canonical value of the money.
        currency (Currency): Currency of the money.
        decimals (int): Number of fractional digits of $amount (0-20).
        base (int): $amount scaled by `10 ** decimals`.
    """

    amount: Decimal
    currency: Currency
    decimals: int
    base: int

    DEFAULT_CURRENCY = default_currency()

    # region Init

    def __init__(self, amount: AmountLike | None = None, currency: Currency | str | None = None):
        """Initialize Money from an $amount and an optional $currency.

        Args:
            amount: Finite real number (Decimal, int or float). Strings are not accepted.
            currency: Currency instance or code like "EUR". Falls back to `DEFAULT_CURRENCY` when empty.

        Raises:
            InvalidAmount: If $amount is missing, non-numeric or non-finite.
            InvalidCurrency: If $currency cannot be resolved.
        """
        # Raise: $amount must be a finite real number
        try:
            decimal_amount = as_decimal(amount)
        except (TypeError, ValueError) as e:
            raise InvalidAmount(f"Cannot init `Money` because $amount ({amount!r}) is not a finite number") from e
        self._check_magnitude(decimal_amount)

        decimals = decimal_tools.count_decimal_places(decimal_amount)
        base = decimal_tools.to_base_units(decimal_amount, decimals)
        self._set_fields(base, decimals, resolve_currency(currency))

    @classmethod
    def from_base(cls, base: int | str, decimals: int, currency: Currency | str | None = None) -> Money:
        """Create Money from its exact integer representation.

        The amount is computed as `base / 10 ** decimals` without any rounding. The given
        $decimals is trusted and kept as-is (no derivation from the amount happens), so values
        produced by `to_record` are reconstructed exactly.

        Args:
            base: Integer, or its base-10 string form.
            decimals: Number of fractional digits (0-20).
            currency: Currency instance or code. Falls back to `DEFAULT_CURRENCY` when empty.

        Raises:
            InvalidAmount: If $base or $decimals is invalid.
            InvalidCurrency: If $currency cannot be resolved.
        """
        # Raise: $decimals must be an integer in allowed range
        if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= MAX_DECIMALS:
            raise InvalidAmount(f"$decimals must be an integer between 0 and {MAX_DECIMALS}, but provided value is: {decimals!r}")

        # Raise: $base must be an integer (or its string form)
        if isinstance(base, bool) or not isinstance(base, (int, str)):
            raise InvalidAmount(f"$base must be an int or an integer string, but provided value is: {base!r}")
        if isinstance(base, str) and not _INTEGER_STRING.fullmatch(base):
            raise InvalidAmount(f"Cannot create `Money` because $base ('{base}') is not an integer string")
        try:
            base_units = int(base, 10) if isinstance(base, str) else base
        except ValueError as e:
            raise InvalidAmount(f"Cannot create `Money` because $base ('{base[:20]}...') has too many digits") from e
        cls._check_magnitude(decimal_tools.from_base_units(base_units, decimals))

        result = cls.__new__(cls)
        result._set_fields(base_units, decimals, resolve_currency(currency))
        return result

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Money:
        """Create Money from a record like `{"amount": 1.5, "currency": "USD"}`.

        The record holds either $amount, or both $base and $decimals (as produced by `to_record`).
        When both shapes are present, $base and $decimals win. $currency is optional.

        Raises:
            InvalidAmount: If $record is not a mapping or holds neither shape.
            InvalidCurrency: If the currency cannot be resolved.
        """
        if not isinstance(record, Mapping):
            raise InvalidAmount(f"Cannot call `from_record` because $record ({record!r}) is not a mapping")

        currency = record.get("currency")
        if record.get("base") is not None and record.get("decimals") is not None:
            return cls.from_base(record["base"], record["decimals"], currency)

        if "amount" not in record:
            raise InvalidAmount(f"Cannot call `from_record` because $record ({dict(record)}) has neither $amount nor $base with $decimals")

        return cls(record["amount"], currency)

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '1000.50 USD'.

        Raises:
            InvalidAmount: If the string or its value part is invalid.
            InvalidCurrency: If the currency part cannot be resolved.
        """
        if not isinstance(value_str, str) or not value_str.strip():
            raise InvalidAmount(f"Value string with $value_str = '{value_str}' cannot be empty")

        parts = value_str.split()
        if len(parts) != 2:
            raise InvalidAmount(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        value_part, currency_part = parts
        try:
            value = Decimal(value_part)
        except InvalidOperation as e:
            raise InvalidAmount(f"Invalid value part '{value_part}' in string '{value_str}'") from e

        return cls(value, currency_part)

    @staticmethod
    def _check_magnitude(amount: Decimal) -> None:
        # Raise: amount must stay below 10 ** MAX_INTEGER_DIGITS
        if decimal_tools.integer_digits(amount) > MAX_INTEGER_DIGITS:
            raise InvalidAmount(f"$amount must have at most {MAX_INTEGER_DIGITS} integer digits, but provided value has {decimal_tools.integer_digits(amount)}")

    def _set_fields(self, base: int, decimals: int, currency: Currency) -> None:
        # Bypass mechanism of frozen dataclass, that does not allow setting new value
        object.__setattr__(self, "amount", decimal_tools.from_base_units(base, decimals))
        object.__setattr__(self, "currency", currency)
        object.__setattr__(self, "decimals", decimals)
        object.__setattr__(self, "base", base)

    def to_record(self) -> dict[str, Any]:
        """Return the plain fields of this Money; `from_record` restores an equal instance.

        $base is a string so it survives formats without big integers.
        """
        return {
            "amount": f"{self.amount:f}",
            "base": str(self.base),
            "decimals": self.decimals,
            "currency": self.currency.code,
        }

    # endregion

    # region Compatibility

    def validate_compatible(self, other: Any, operation: str = "validate_compatible") -> None:
        """Ensure $other is a Money in the same currency as this Money.

        Args:
            other: Operand of a binary operation.
            operation: Name of the calling operation, used in the error message.

        Raises:
            InvalidOperand: If $other is not a Money.
            CurrencyMismatch: If currencies differ.
        """
        if not isinstance(other, Money):
            raise InvalidOperand(operation, other)
        if self.currency != other.currency:
            raise CurrencyMismatch(self.currency, other.currency)

    def is_in(self, currency: Currency) -> bool:
        """Check whether this Money is in $currency.

        Raises:
            InvalidCurrency: If $currency is not a Currency instance.
        """
        if not isinstance(currency, Currency):
            raise InvalidCurrency(f"Cannot call `is_in` because $currency ({currency!r}) is not a Currency instance")
        return self.currency == currency

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Return a new Money with the sum of both amounts."""
        self.validate_compatible(other, "add")
        return Money(decimal_tools.add(self.amount, other.amount), self.currency)

    def subtract(self, other: Money) -> Money:
        """Return a new Money with $other's amount subtracted from this amount."""
        self.validate_compatible(other, "subtract")
        return Money(decimal_tools.subtract(self.amount, other.amount), self.currency)

    def multiply(self, other: Money) -> Money:
        """Return a new Money with this amount multiplied by $other's amount."""
        self.validate_compatible(other, "multiply")
        return Money(decimal_tools.multiply(self.amount, other.amount), self.currency)

    def divide(self, other: Money) -> Money:
        """Return a new Money with this amount divided by $other's amount.

        Non-terminating quotients are rounded half-up at engine precision and then
        floored to `MAX_DECIMALS` fractional digits.

        Raises:
            ZeroDivisionError: If $other's amount is zero.
        """
        self.validate_compatible(other, "divide")
        if other.amount.is_zero():
            raise ZeroDivisionError(f"Cannot call `divide` because $other ({other}) is zero")
        return Money(decimal_tools.divide(self.amount, other.amount), self.currency)

    def percentage(self, percentage: AmountLike) -> Money:
        """Return $percentage percent of this Money, e.g. `Money(100).percentage(20) == Money(20)`.

        Raises:
            InvalidAmount: If $percentage is not a finite number.
        """
        try:
            decimal_percentage = as_decimal(percentage)
        except (TypeError, ValueError) as e:
            raise InvalidAmount(f"Cannot call `percentage` because $percentage ({percentage!r}) is not a finite number") from e

        return Money(decimal_tools.percentage_of(self.amount, decimal_percentage), self.currency)

    def delta(self, other: Money) -> Decimal:
        """Return the signed difference `self.amount - other.amount` as a plain Decimal."""
        self.validate_compatible(other, "delta")
        return decimal_tools.subtract(self.amount, other.amount)

    def convert(self, rate: AmountLike, currency: Currency) -> Money:
        """Convert this Money into $currency using the exchange $rate.

        Args:
            rate: Units of $currency per one unit of this currency.
            currency: Target currency; must differ from this currency.

        Returns:
            Money: `amount * rate` in $currency.

        Raises:
            InvalidRate: If $rate is not a finite number.
            InvalidCurrency: If $currency is not a Currency instance.
            SameCurrencyConversion: If $currency equals this currency.
        """
        try:
            decimal_rate = as_decimal(rate)
        except (TypeError, ValueError) as e:
            raise InvalidRate(f"Cannot call `convert` because $rate ({rate!r}) is not a finite number") from e

        if self.is_in(currency):
            raise SameCurrencyConversion(self.currency)

        return Money(decimal_tools.multiply(self.amount, decimal_rate), currency)

    # endregion

    # region Comparison

    def is_equal(self, other: Money) -> bool:
        """Check if amounts are equal. Unlike `==`, raises for non-Money or a different currency."""
        self.validate_compatible(other, "is_equal")
        return decimal_tools.compare(self.amount, other.amount) == 0

    def is_greater_than(self, other: Money) -> bool:
        self.validate_compatible(other, "is_greater_than")
        return decimal_tools.compare(self.amount, other.amount) > 0

    def is_greater_than_or_equal_to(self, other: Money) -> bool:
        self.validate_compatible(other, "is_greater_than_or_equal_to")
        return decimal_tools.compare(self.amount, other.amount) >= 0

    def is_less_than(self, other: Money) -> bool:
        self.validate_compatible(other, "is_less_than")
        return decimal_tools.compare(self.amount, other.amount) < 0

    def is_less_than_or_equal_to(self, other: Money) -> bool:
        self.validate_compatible(other, "is_less_than_or_equal_to")
        return decimal_tools.compare(self.amount, other.amount) <= 0

    # endregion

    # region Aliases

    plus = __add__ = add
    minus = sub = __sub__ = subtract
    mul = times = __mul__ = multiply
    div = divided_by = __truediv__ = divide
    percent = percent_of = percentage
    eq = is_equal
    gt = greater_than = __gt__ = is_greater_than
    gte = greater_than_or_equal_to = __ge__ = is_greater_than_or_equal_to
    lt = less_than = __lt__ = is_less_than
    lte = less_than_or_equal_to = __le__ = is_less_than_or_equal_to

    # endregion

    # region Python protocol

    def __eq__(self, other: object) -> bool:
        """Check equality with another Money object (same currency and numerically equal amount)."""
        if not isinstance(other, Money):
            return False
        return self.currency == other.currency and self.amount == other.amount

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self.amount, self.currency.code))

    def __neg__(self) -> Money:
        return Money(self.amount.copy_negate(), self.currency)

    def __abs__(self) -> Money:
        return Money(self.amount.copy_abs(), self.currency)

    def __float__(self) -> float:
        return float(self.amount)

    def __str__(self) -> str:
        """Return string like '1000.5 USD'."""
        return f"{self.amount:f} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.5, USD)'."""
        return f"{self.__class__.__name__}({self.amount:f}, {self.currency.code})"

    # endregion

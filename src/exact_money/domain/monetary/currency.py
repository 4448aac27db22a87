from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from exact_money.errors import InvalidCurrency


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


@dataclass(frozen=True, slots=True)
class Currency:
    """Currency identity with descriptive metadata.

    Two currencies are equal when their codes are equal; $precision, $name and
    $currency_type are metadata and take no part in equality or hashing.

    Attributes:
        code (str): Three or four letter currency code (e.g., "USD", "USDT"), always upper-case.
        precision (int): Number of minor-unit digits (0-18).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, COMMODITY).
    """

    code: str
    precision: int = field(default=2, compare=False)
    name: str = field(default="", compare=False)
    currency_type: CurrencyType = field(default=CurrencyType.FIAT, compare=False)

    def __post_init__(self) -> None:
        # Raise: $code must be 3-4 ASCII letters
        if not isinstance(self.code, str):
            raise InvalidCurrency(f"$code must be a string, but provided value is: {self.code!r}")
        code = self.code.strip().upper()
        if not (3 <= len(code) <= 4 and code.isascii() and code.isalpha()):
            raise InvalidCurrency(f"$code must be a 3 or 4 letter code, but provided value is: '{self.code}'")

        # Raise: $precision must be a small non-negative integer
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or not 0 <= self.precision <= 18:
            raise InvalidCurrency(f"$precision must be an integer between 0 and 18, but provided value is: {self.precision!r}")

        if not isinstance(self.currency_type, CurrencyType):
            raise InvalidCurrency(f"$currency_type must be a CurrencyType instance, but provided value is: {self.currency_type!r}")

        # Normalize (bypass mechanism of frozen dataclass, that does not allow setting new value)
        object.__setattr__(self, "code", code)
        object.__setattr__(self, "name", (self.name or "").strip())

    @property
    def is_fiat(self) -> bool:
        return self.currency_type == CurrencyType.FIAT

    @property
    def is_crypto(self) -> bool:
        return self.currency_type == CurrencyType.CRYPTO

    @property
    def is_commodity(self) -> bool:
        return self.currency_type == CurrencyType.COMMODITY

    def __str__(self) -> str:
        """Return the currency code."""
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.name}', {self.currency_type})"

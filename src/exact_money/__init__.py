__version__ = "0.1.0"

from exact_money.domain.monetary.currency import Currency, CurrencyType
from exact_money.domain.monetary.currency_registry import get_currency, register_currency, resolve_currency
from exact_money.domain.monetary.money import Money
from exact_money.errors import (
    CurrencyMismatch,
    InvalidAmount,
    InvalidCurrency,
    InvalidOperand,
    InvalidRate,
    MoneyError,
    SameCurrencyConversion,
)

__all__ = [
    "Currency",
    "CurrencyType",
    "Money",
    "get_currency",
    "register_currency",
    "resolve_currency",
    "MoneyError",
    "InvalidAmount",
    "InvalidCurrency",
    "InvalidOperand",
    "InvalidRate",
    "CurrencyMismatch",
    "SameCurrencyConversion",
]

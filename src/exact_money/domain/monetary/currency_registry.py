"""Predefined currencies and resolution of currency codes.

Every predefined currency is registered at import time, so `get_currency("USD")`
returns the same `USD` instance that is exported from this module.
"""
from __future__ import annotations

import logging
from typing import Dict

from exact_money.config import DEFAULT_CURRENCY_CODE
from exact_money.domain.monetary.currency import Currency, CurrencyType
from exact_money.errors import InvalidCurrency

logger = logging.getLogger(__name__)

_registry: Dict[str, Currency] = {}


def register_currency(currency: Currency, overwrite: bool = False) -> None:
    """Register $currency in the process-wide registry.

    Args:
        currency (Currency): The currency to register.
        overwrite (bool): Whether to replace an already registered currency with the same code.

    Raises:
        InvalidCurrency: If $currency is not a Currency, or its code is taken and $overwrite is False.
    """
    # Raise: only Currency instances can be registered
    if not isinstance(currency, Currency):
        raise InvalidCurrency(f"$currency must be a Currency instance, but provided value is: {currency!r}")

    # Raise: codes are unique unless overwriting is requested
    if currency.code in _registry and not overwrite:
        raise InvalidCurrency(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

    if currency.code in _registry:
        logger.debug(f"Replacing registered currency '{currency.code}' with {currency!r}")
    _registry[currency.code] = currency
    logger.debug(f"Registered currency {currency!r}")


def get_currency(code: str) -> Currency:
    """Get a registered currency by $code (case-insensitive).

    Raises:
        InvalidCurrency: If $code is not a string or is not registered.
    """
    if not isinstance(code, str):
        raise InvalidCurrency(f"$code must be a string, but provided value is: {code!r}")

    normalized = code.upper().strip()
    if normalized not in _registry:
        raise InvalidCurrency(f"Currency with code '{normalized}' not found in registry. Available currencies: {sorted(_registry)}")

    return _registry[normalized]


def is_registered(code: str) -> bool:
    return isinstance(code, str) and code.upper().strip() in _registry


def resolve_currency(value: Currency | str | None) -> Currency:
    """Resolve $value into a `Currency`.

    Resolution order:
    - `Currency` instance is returned as-is
    - empty value (None, "") resolves to the default currency
    - registered code resolves to the registered instance
    - any other well-formed 3-4 letter code creates an ad-hoc `Currency` with default metadata

    Raises:
        InvalidCurrency: If $value cannot be resolved.
    """
    if isinstance(value, Currency):
        return value

    if not value:
        return default_currency()

    # Raise: only codes (strings) can be resolved
    if not isinstance(value, str):
        raise InvalidCurrency(f"Cannot resolve currency because $value ({value!r}) is neither a Currency nor a code string")

    if is_registered(value):
        return get_currency(value)

    currency = Currency(value)
    logger.debug(f"Created unregistered currency {currency!r} for code '{value}'")
    return currency


def default_currency() -> Currency:
    """Return the process-wide default currency (see `DEFAULT_CURRENCY_CODE`)."""
    if is_registered(DEFAULT_CURRENCY_CODE):
        return get_currency(DEFAULT_CURRENCY_CODE)
    return Currency(DEFAULT_CURRENCY_CODE)


# Fiat currencies
USD = Currency("USD", 2, "US Dollar", CurrencyType.FIAT)
EUR = Currency("EUR", 2, "Euro", CurrencyType.FIAT)
GBP = Currency("GBP", 2, "British Pound", CurrencyType.FIAT)
JPY = Currency("JPY", 0, "Japanese Yen", CurrencyType.FIAT)
CHF = Currency("CHF", 2, "Swiss Franc", CurrencyType.FIAT)
CAD = Currency("CAD", 2, "Canadian Dollar", CurrencyType.FIAT)
AUD = Currency("AUD", 2, "Australian Dollar", CurrencyType.FIAT)

# Crypto currencies
BTC = Currency("BTC", 8, "Bitcoin", CurrencyType.CRYPTO)
ETH = Currency("ETH", 18, "Ethereum", CurrencyType.CRYPTO)
USDT = Currency("USDT", 6, "Tether", CurrencyType.CRYPTO)

# Commodities
XAU = Currency("XAU", 4, "Gold", CurrencyType.COMMODITY)
XAG = Currency("XAG", 4, "Silver", CurrencyType.COMMODITY)

# Register all predefined currencies
for _currency in (USD, EUR, GBP, JPY, CHF, CAD, AUD, BTC, ETH, USDT, XAU, XAG):
    register_currency(_currency, overwrite=True)

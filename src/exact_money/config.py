from __future__ import annotations

import os

# Currency used when `Money` is created without one
DEFAULT_CURRENCY_CODE: str = os.environ.get("EXACT_MONEY_DEFAULT_CURRENCY", "EUR").upper().strip()

# Upper bound for $decimals of `Money` (and for iterations when deriving it)
MAX_DECIMALS: int = 20

# Upper bound for digits left of the decimal point of `Money.amount`; amounts stay below 10 ** MAX_INTEGER_DIGITS
MAX_INTEGER_DIGITS: int = 1000

# Minimum significant digits of a quotient before rounding (half-up); other operations are exact
DECIMAL_PRECISION: int = 50

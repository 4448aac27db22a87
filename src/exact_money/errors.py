"""Errors raised by monetary value types.

All errors derive from `MoneyError`, so callers can catch the whole family at once,
and also from the matching builtin (`ValueError` / `TypeError`), so generic handlers keep working.
"""
from __future__ import annotations

from typing import Any


class MoneyError(Exception):
    """Base class for all monetary errors."""


class InvalidAmount(MoneyError, ValueError):
    """Amount (or percentage) is missing, non-numeric or non-finite."""


class InvalidCurrency(MoneyError, ValueError):
    """Value cannot be resolved to a valid `Currency`."""


class InvalidRate(MoneyError, ValueError):
    """Conversion rate is missing, non-numeric or non-finite."""


class InvalidOperand(MoneyError, TypeError):
    """Operand of a binary operation is not a `Money`."""

    def __init__(self, operation: str, operand: Any):
        self.operation = operation
        self.operand = operand
        super().__init__(f"Cannot call `{operation}` because $other ({operand!r}) is not a Money instance")


class CurrencyMismatch(MoneyError, ValueError):
    """Two Money operands are in different currencies.

    Attributes:
        required: Currency of the receiver.
        passed: Currency of the operand.
    """

    def __init__(self, required: Any, passed: Any):
        self.required = required
        self.passed = passed
        super().__init__(f"Currency passed '{passed}' does not match required '{required}'")


class SameCurrencyConversion(MoneyError, ValueError):
    """Conversion target currency equals the source currency."""

    def __init__(self, currency: Any):
        self.currency = currency
        super().__init__(f"Converting to same currency '{currency}' is not allowed")

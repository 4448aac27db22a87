"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions and Money calculations with exact decimal arithmetic.
"""
from exact_money.domain.monetary.currency import Currency, CurrencyType
from exact_money.domain.monetary.money import Money

__all__ = ["Currency", "CurrencyType", "Money"]

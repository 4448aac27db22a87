from __future__ import annotations

from decimal import Context, Decimal, DivisionByZero, Inexact, InvalidOperation, Overflow, ROUND_FLOOR, ROUND_HALF_UP
from typing import TypeAlias

from exact_money.config import DECIMAL_PRECISION, MAX_DECIMALS

# Use where optimal type is `Decimal`, but native numbers are also acceptable (and will be converted to `Decimal`)
# Strings are deliberately not part of this alias: amounts must be real numbers
AmountLike: TypeAlias = Decimal | int | float

# Private context for all arithmetic, so the thread-global decimal context is never modified
_CONTEXT = Context(
    prec=DECIMAL_PRECISION,
    rounding=ROUND_HALF_UP,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


def is_number(value: object) -> bool:
    """Check whether $value is a real number accepted by `as_decimal` (bool excluded)."""
    return isinstance(value, (Decimal, int, float)) and not isinstance(value, bool)


def as_decimal(value: AmountLike) -> Decimal:
    """Converts a finite real number to `Decimal`.

    Floats are converted via their shortest string representation to avoid binary noise,
    so `as_decimal(0.1)` is exactly `Decimal("0.1")`.

    Args:
        value: Input value as `AmountLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is not a Decimal, int or float (bool and str included).
        ValueError: If $value is NaN or infinite.
    """
    # Raise: only real numbers are accepted
    if not is_number(value):
        raise TypeError(f"$value must be a Decimal, int or float, but provided value is: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        result = Decimal(str(value))

    # Raise: NaN and infinities have no decimal representation
    if not result.is_finite():
        raise ValueError(f"$value must be finite, but provided value is: {value!r}")

    return result


def shift(value: Decimal, places: int) -> Decimal:
    """Multiply finite $value by `10 ** places` exactly (no rounding, any number of digits)."""
    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + places))


def is_integral(value: Decimal) -> bool:
    return value.is_finite() and value == value.to_integral_value()


def count_decimal_places(value: Decimal) -> int:
    """Count fractional digits needed to represent $value exactly.

    Scales the absolute value by ten until it becomes an integer. The number of iterations
    is capped at `MAX_DECIMALS`, so the result is in range 0..MAX_DECIMALS.

    Examples:
        >>> count_decimal_places(Decimal("9.999"))
        3
        >>> count_decimal_places(Decimal("5.00"))
        0
    """
    absolute = abs(value)
    scaled = absolute
    count = 1
    while not is_integral(scaled) and scaled.is_finite() and count - 1 < MAX_DECIMALS:
        scaled = shift(absolute, count)
        count += 1

    return min(count - 1, MAX_DECIMALS)


def to_base_units(value: Decimal, decimals: int) -> int:
    """Return `floor(value * 10 ** decimals)` as an exact integer."""
    return int(shift(value, decimals).to_integral_value(rounding=ROUND_FLOOR))


def from_base_units(base: int, decimals: int) -> Decimal:
    """Return `base / 10 ** decimals` as an exact `Decimal`."""
    return shift(Decimal(base), -decimals)


# region Arithmetic


def _context_with_precision(prec: int, exact: bool) -> Context:
    """Copy of the private context with at least $prec digits; with $exact, any rounding raises `Inexact`."""
    context = _CONTEXT.copy()
    context.prec = max(prec, DECIMAL_PRECISION)
    context.traps[Inexact] = exact
    return context


def _exponent(value: Decimal) -> int:
    return value.as_tuple().exponent


def add(a: Decimal, b: Decimal) -> Decimal:
    # Digits from the highest leading digit (plus carry) down to the lowest exponent
    prec = max(a.adjusted(), b.adjusted()) - min(_exponent(a), _exponent(b)) + 2
    return _context_with_precision(prec, exact=True).add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    prec = max(a.adjusted(), b.adjusted()) - min(_exponent(a), _exponent(b)) + 2
    return _context_with_precision(prec, exact=True).subtract(a, b)


def multiply(a: Decimal, b: Decimal) -> Decimal:
    prec = len(a.as_tuple().digits) + len(b.as_tuple().digits)
    return _context_with_precision(prec, exact=True).multiply(a, b)


def divide(a: Decimal, b: Decimal) -> Decimal:
    """Divide $a by $b, rounding half-up.

    Precision covers the whole integer part of the quotient plus `MAX_DECIMALS` fractional
    digits, and never drops below `DECIMAL_PRECISION` significant digits.

    Raises:
        ZeroDivisionError: If $b is zero.
    """
    # Raise: division by zero is undefined (0 / 0 included)
    if b.is_zero():
        raise ZeroDivisionError(f"Cannot divide $a ({a}) by zero")
    prec = a.adjusted() - b.adjusted() + MAX_DECIMALS + 3
    return _context_with_precision(prec, exact=False).divide(a, b)


def percentage_of(value: Decimal, percentage: Decimal) -> Decimal:
    """Return $percentage percent of $value, i.e. `value * percentage / 100`, exactly."""
    return shift(multiply(value, percentage), -2)


def compare(a: Decimal, b: Decimal) -> int:
    """Return -1, 0 or 1 when $a is less than, equal to or greater than $b."""
    return int(_CONTEXT.compare(a, b))


def integer_digits(value: Decimal) -> int:
    """Number of digits left of the decimal point (0 for zero and for |value| < 1)."""
    if value.is_zero():
        return 0
    return max(value.adjusted() + 1, 0)


# endregion

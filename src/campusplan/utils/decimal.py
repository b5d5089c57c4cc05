"""
Decimal arithmetic helpers for financial calculations.

All money math in campusplan runs on :class:`decimal.Decimal` with 20
significant digits and half-up rounding. The context is applied with
``decimal.localcontext`` around each calculation, so nothing here touches the
interpreter-wide default context and concurrent solves on different threads do
not interfere with each other.
"""

import decimal
import numbers
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator, Optional, Union

DecimalLike = Union[Decimal, int, float, str]

FINANCIAL_PRECISION = 20
FINANCIAL_ROUNDING = decimal.ROUND_HALF_UP

ZERO = Decimal(0)
ONE = Decimal(1)
DAYS_PER_YEAR = Decimal(365)


def financial_context() -> decimal.Context:
    """Build a fresh context with the financial precision and rounding.

    Returns:
        decimal.Context: 20 significant digits, ROUND_HALF_UP.
    """
    return decimal.Context(prec=FINANCIAL_PRECISION, rounding=FINANCIAL_ROUNDING)


@contextmanager
def financial_precision() -> Iterator[decimal.Context]:
    """Run the enclosed block under the financial decimal context.

    Example:
        >>> with financial_precision():
        ...     Decimal(1) / Decimal(3)
        Decimal('0.33333333333333333333')
    """
    with decimal.localcontext(financial_context()) as ctx:
        yield ctx


def to_decimal(value: DecimalLike) -> Decimal:
    """Convert a number or numeric string to Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal('0.1')``
    rather than its binary expansion.

    Args:
        value: Decimal, int, float or numeric string.

    Returns:
        Decimal: The converted value.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, numbers.Integral):
        result = Decimal(int(value))
    else:
        try:
            result = Decimal(value)
        except (decimal.InvalidOperation, TypeError) as e:
            raise ValueError(f"Cannot convert {value!r} to Decimal") from e
    if not result.is_finite():
        raise ValueError(f"Expected a finite number, got {value!r}")
    return result


def round_money(value: DecimalLike, places: int = 2) -> Decimal:
    """Round to a fixed number of decimal places using half-up rounding."""
    quantum = Decimal(1).scaleb(-places)
    return to_decimal(value).quantize(quantum, rounding=FINANCIAL_ROUNDING)


def format_money(
    value: DecimalLike, currency: str = "SAR", millions: bool = False
) -> str:
    """Format a monetary value for logs and tables.

    Args:
        value: Amount to format.
        currency: Currency code appended to the number.
        millions: If True, render as e.g. ``1.50M SAR``.
    """
    amount = to_decimal(value)
    if millions:
        return f"{amount / Decimal(1_000_000):,.2f}M {currency}"
    return f"{round_money(amount):,} {currency}"


def sum_decimals(values, start: Optional[Decimal] = None) -> Decimal:
    """Sum an iterable of Decimals, starting from ``Decimal(0)``."""
    total = ZERO if start is None else start
    for v in values:
        total += v
    return total

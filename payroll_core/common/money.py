"""Decimal helpers for monetary arithmetic.

Every leaf amount is rounded exactly once with :func:`round2`; aggregates are
sums of already-rounded leaves and are never re-rounded from raw inputs.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Union

Number = Union[Decimal, int, float, str]

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value: Number) -> Decimal:
    """Convert *value* to ``Decimal`` going through ``str`` for floats."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a monetary value")
    return Decimal(str(value))


def round2(value: Number) -> Decimal:
    """Round half-up to 2 decimal places."""
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def money_sum(values: Iterable[Decimal]) -> Decimal:
    """Sum already-rounded amounts, keeping a 2-place exponent."""
    return sum(values, ZERO)

"""
Decimal Utilities
perf_tracker/scoring/utils.py

Provides precision-safe decimal math for scoring calculations.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal through its shortest str() form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def round_half_up(value: Decimal, places: int = 1) -> Decimal:
    """
    Round to `places` decimals, halves away from zero.

    ROUND_HALF_UP in the decimal module rounds 0.05 to 0.1 and -0.05 to -0.1.
    """
    return value.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)

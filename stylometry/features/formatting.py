"""Fixed-precision formatting for report values."""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from ..errors import UNDEFINED


def format_fixed(value: Union[int, float], digits: int) -> str:
    """Format a number with a fixed count of decimals.

    Halves round away from zero on the exact binary value, so 2.5 gives "3"
    and 1.005 (stored as 1.00499...) gives "1.00". Non-finite values map to
    the undefined sentinel. A negative value that rounds to zero keeps its
    sign ("-0.00"), while negative zero itself prints as "0.00".

    Args:
        value: Number to format.
        digits: Decimal places.

    Returns:
        Formatted decimal string, or UNDEFINED.
    """
    value = float(value)
    if not math.isfinite(value):
        return UNDEFINED
    if value == 0:
        value = 0.0  # negative zero prints unsigned
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def safe_ratio(numerator: float, denominator: float, digits: int) -> str:
    """Format numerator / denominator, or UNDEFINED when the denominator is 0."""
    if denominator == 0:
        return UNDEFINED
    return format_fixed(numerator / denominator, digits)

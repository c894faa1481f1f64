"""Lexical diversity: type-token ratio and its moving average (MATTR).

MATTR slides a fixed-width window over the token sequence and averages the
type-token ratio of every window. It is far less sensitive to text length
than a single whole-text ratio, but still somewhat sensitive to it.

Rough reference ranges (window 250):
  Children's books: 0.2 - 0.4
  General fiction and non-fiction: 0.4 - 0.6
  Academic and technical writing: 0.6 - 0.8
"""

from collections import Counter
from typing import Sequence

from ..errors import DegenerateInputError
from .formatting import format_fixed


def type_token_ratio(tokens: Sequence[str]) -> float:
    """Unique tokens divided by total tokens.

    Raises:
        DegenerateInputError: If tokens is empty.
    """
    if not tokens:
        raise DegenerateInputError("Type-token ratio of an empty token sequence")
    return len(set(tokens)) / len(tokens)


def moving_average_ttr_value(tokens: Sequence[str], window_size: int = 250) -> float:
    """Unrounded MATTR.

    Falls back to the whole-sequence type-token ratio when the sequence is
    shorter than one window.

    Args:
        tokens: Word tokens in reading order.
        window_size: Window width in tokens.

    Returns:
        Mean type-token ratio over all windows at stride 1.

    Raises:
        ValueError: If window_size < 1.
        DegenerateInputError: If tokens is empty.
    """
    if window_size < 1:
        raise ValueError(f"window_size must be >= 1, got {window_size}")
    if not tokens:
        raise DegenerateInputError("MATTR of an empty token sequence")

    if len(tokens) < window_size:
        return type_token_ratio(tokens)

    window = Counter(tokens[:window_size])
    unique_total = len(window)
    window_count = 1

    for i in range(1, len(tokens) - window_size + 1):
        leaving = tokens[i - 1]
        window[leaving] -= 1
        if window[leaving] == 0:
            del window[leaving]
        window[tokens[i + window_size - 1]] += 1
        unique_total += len(window)
        window_count += 1

    return unique_total / (window_count * window_size)


def moving_average_ttr(tokens: Sequence[str], window_size: int = 250) -> str:
    """MATTR rounded to 2 decimals, as reported."""
    return format_fixed(moving_average_ttr_value(tokens, window_size), 2)

"""Frequent n-gram mining over the token sequence."""

from typing import Dict, List, Sequence

from ..utils.logging import get_logger

logger = get_logger(__name__)


def ngram_label(n: int) -> str:
    """Output key for an n-gram size, e.g. "3gram"."""
    return f"{n}gram"


def count_ngrams(tokens: Sequence[str], n: int) -> Dict[str, int]:
    """Count contiguous n-token sequences joined by single spaces.

    Keys appear in order of first occurrence.
    """
    counts: Dict[str, int] = {}
    for i in range(len(tokens) - n + 1):
        key = " ".join(tokens[i:i + n])
        counts[key] = counts.get(key, 0) + 1
    return counts


def top_ngrams(counts: Dict[str, int], qualifier: int, cap: int) -> List[str]:
    """N-grams seen more than ``qualifier`` times, most frequent first.

    Sorting is stable, so equal counts keep first-occurrence order.
    """
    survivors = [(key, count) for key, count in counts.items() if count > qualifier]
    survivors.sort(key=lambda item: item[1], reverse=True)
    return [key for key, _ in survivors[:cap]]


def mine_ngrams(
    tokens: Sequence[str],
    min_size: int = 2,
    max_size: int = 5,
    qualifier: int = 3,
    cap: int = 10
) -> Dict[str, List[str]]:
    """Most frequent n-grams for every size in [min_size, max_size].

    Candidates for every size are ranked first; sizes with no surviving
    n-gram are then left out of a freshly built result mapping.

    Args:
        tokens: Word tokens in reading order.
        min_size: Smallest n-gram size.
        max_size: Largest n-gram size.
        qualifier: Minimum count, exclusive.
        cap: Maximum n-grams returned per size.

    Returns:
        Mapping of size label to ranked n-grams.

    Raises:
        ValueError: On an invalid size range, qualifier or cap.
    """
    if min_size < 1 or max_size < min_size:
        raise ValueError(f"Invalid n-gram size range [{min_size}, {max_size}]")
    if qualifier < 0:
        raise ValueError(f"qualifier must be >= 0, got {qualifier}")
    if cap < 1:
        raise ValueError(f"cap must be >= 1, got {cap}")

    candidates = {}
    for n in range(min_size, max_size + 1):
        logger.debug(f"Generating {ngram_label(n)}")
        candidates[ngram_label(n)] = top_ngrams(count_ngrams(tokens, n), qualifier, cap)

    return {label: ranked for label, ranked in candidates.items() if ranked}

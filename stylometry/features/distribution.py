"""Sentence length distribution statistics.

Captures the pace and cadence of a text through the shape of its sentence
length distribution: central tendency, spread, asymmetry, tail weight and
how evenly lengths are spread across distinct values.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..errors import DegenerateInputError, UNDEFINED
from ..utils.nlp import count_words, split_variability_sentences
from .formatting import format_fixed


@dataclass(frozen=True)
class SentenceLengthStats:
    """Raw distribution statistics of a length sample.

    Skewness and kurtosis are None when the sample has zero variance.
    """
    mean: float
    standard_deviation: float
    range: int
    median: float
    iqr: int
    skewness: Optional[float]
    kurtosis: Optional[float]
    entropy: float

    def to_dict(self) -> Dict[str, str]:
        """Fixed-precision wire form."""
        return {
            "mean": format_fixed(self.mean, 0),
            "standardDeviation": format_fixed(self.standard_deviation, 2),
            "range": format_fixed(self.range, 0),
            "median": format_fixed(self.median, 0),
            "IQR": format_fixed(self.iqr, 0),
            "skewness": UNDEFINED if self.skewness is None else format_fixed(self.skewness, 2),
            "kurtosis": UNDEFINED if self.kurtosis is None else format_fixed(self.kurtosis, 2),
            "entropy": format_fixed(self.entropy, 2),
        }


def median_of_sorted(values: Sequence[int]) -> float:
    """Median of an ascending sequence."""
    n = len(values)
    middle = n // 2
    if n % 2 == 0:
        return (values[middle - 1] + values[middle]) / 2
    return float(values[middle])


def truncated_iqr(values: Sequence[int]) -> int:
    """Interquartile range using index-truncation quartiles.

    Q1 = values[n // 4] and Q3 = values[3n // 4] on the ascending sample,
    with no interpolation.
    """
    n = len(values)
    return int(values[(3 * n) // 4] - values[n // 4])


def length_entropy(lengths: Sequence[int]) -> float:
    """Base-2 Shannon entropy of the length frequency distribution."""
    counts = np.array(list(Counter(lengths).values()), dtype=float)
    probabilities = counts / len(lengths)
    return float(-np.sum(probabilities * np.log2(probabilities)))


def describe_lengths(lengths: Sequence[int]) -> SentenceLengthStats:
    """Compute distribution statistics over a sample of sentence lengths.

    Standard deviation, skewness and kurtosis use population moments
    (divisor n). Kurtosis is excess kurtosis (fourth moment minus 3).

    Args:
        lengths: One word count per sentence.

    Returns:
        SentenceLengthStats for the sample.

    Raises:
        DegenerateInputError: If the sample is empty.
    """
    if len(lengths) == 0:
        raise DegenerateInputError("Sentence length statistics need at least one sentence")

    sample = np.asarray(lengths, dtype=float)
    mean = float(sample.mean())
    std = float(sample.std())

    ordered = sorted(int(length) for length in lengths)

    if std == 0:
        skewness = None
        kurtosis = None
    else:
        z = (sample - mean) / std
        skewness = float(np.mean(z ** 3))
        kurtosis = float(np.mean(z ** 4)) - 3

    return SentenceLengthStats(
        mean=mean,
        standard_deviation=std,
        range=ordered[-1] - ordered[0],
        median=median_of_sorted(ordered),
        iqr=truncated_iqr(ordered),
        skewness=skewness,
        kurtosis=kurtosis,
        entropy=length_entropy(ordered),
    )


def sentence_lengths(text: str) -> List[int]:
    """Whitespace word counts of the sentences found by the variability splitter."""
    return [count_words(sentence) for sentence in split_variability_sentences(text)]


def sentence_variability(text: str) -> Dict[str, str]:
    """Sentence length statistics of a text, in wire form.

    Raises:
        DegenerateInputError: If no sentence is found.
    """
    return describe_lengths(sentence_lengths(text)).to_dict()

"""Sentence-level sentiment distribution.

Sentences are found with the punctuation splitter, not the linguistic
segmenter used for readability and voice. The two can disagree on
boundaries (abbreviations, ellipses, quoted speech); the difference is kept
so historical distributions stay comparable.
"""

from typing import Callable, Dict, Sequence

from ..errors import UNDEFINED
from ..utils.nlp import split_punctuated_sentences
from .formatting import format_fixed

PolarityScorer = Callable[[str], float]

POSITIVE_THRESHOLD = 0.05
NEGATIVE_THRESHOLD = -0.05


def classify_compound(score: float) -> str:
    """Bucket a compound polarity score: positive, negative or neutral."""
    if score >= POSITIVE_THRESHOLD:
        return "positive"
    if score <= NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def sentiment_distribution(
    sentences: Sequence[str],
    scorer: PolarityScorer
) -> Dict[str, str]:
    """Share of positive, negative and neutral sentences (2 decimals).

    Args:
        sentences: Sentences to score independently.
        scorer: Returns a compound polarity in [-1, 1] for one sentence.

    Returns:
        Mapping with keys positive, negative, neutral; UNDEFINED values when
        there are no sentences.
    """
    counts = {"positive": 0, "negative": 0, "neutral": 0}
    for sentence in sentences:
        counts[classify_compound(scorer(sentence))] += 1

    total = len(sentences)
    if total == 0:
        return {bucket: UNDEFINED for bucket in counts}
    return {bucket: format_fixed(count / total, 2) for bucket, count in counts.items()}


def analyze_sentiment(text: str, scorer: PolarityScorer) -> Dict[str, str]:
    """Sentiment distribution of a text split on terminal punctuation."""
    return sentiment_distribution(split_punctuated_sentences(text), scorer)

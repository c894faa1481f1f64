"""Statistical feature modules."""

from .diversity import moving_average_ttr, moving_average_ttr_value, type_token_ratio
from .distribution import SentenceLengthStats, describe_lengths, sentence_variability
from .readability import (
    ReadabilityScore,
    ChunkExtremes,
    count_syllables,
    get_syllable_counter,
    score_readability,
    score_chunks,
    readability_scores,
)
from .ngrams import count_ngrams, mine_ngrams
from .sentiment import classify_compound, sentiment_distribution, analyze_sentiment
from .lexical import lexical_features, pos_ratios

__all__ = [
    "moving_average_ttr",
    "moving_average_ttr_value",
    "type_token_ratio",
    "SentenceLengthStats",
    "describe_lengths",
    "sentence_variability",
    "ReadabilityScore",
    "ChunkExtremes",
    "count_syllables",
    "get_syllable_counter",
    "score_readability",
    "score_chunks",
    "readability_scores",
    "count_ngrams",
    "mine_ngrams",
    "classify_compound",
    "sentiment_distribution",
    "analyze_sentiment",
    "lexical_features",
    "pos_ratios",
]

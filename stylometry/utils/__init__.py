"""Shared utilities: logging and text segmentation."""

from .logging import get_logger, setup_logging, set_run_id, get_run_id
from .nlp import (
    get_nlp,
    setup_nltk,
    split_punctuated_sentences,
    split_variability_sentences,
    count_words,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "set_run_id",
    "get_run_id",
    "get_nlp",
    "setup_nltk",
    "split_punctuated_sentences",
    "split_variability_sentences",
    "count_words",
]

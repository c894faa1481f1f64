"""External annotators: linguistic analysis and sentiment polarity."""

from .base import Annotator, CorpusView, SentenceView, TagLabel
from .spacy_annotator import SpacyAnnotator, SpacyCorpusView
from .sentiment_scorer import VaderSentimentScorer

__all__ = [
    "Annotator",
    "CorpusView",
    "SentenceView",
    "TagLabel",
    "SpacyAnnotator",
    "SpacyCorpusView",
    "VaderSentimentScorer",
]

"""Annotator contract: the tokenized, tagged view of a corpus."""

from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class TagLabel(Enum):
    """Closed part-of-speech label set consumed by the feature modules."""
    NOUN = "Noun"
    VERB = "Verb"
    ADJECTIVE = "Adjective"
    ADVERB = "Adverb"
    PRONOUN = "Pronoun"
    OTHER = "Other"


@dataclass(frozen=True)
class SentenceView:
    """A segmented sentence with its word tokens and voice."""
    text: str
    words: Tuple[str, ...] = ()
    is_passive: bool = False

    @property
    def word_count(self) -> int:
        return len(self.words)


class CorpusView(ABC):
    """Immutable annotated view of one corpus.

    Token positions index both ``tokens()`` and ``pos_tag()``. Tokenization
    must be deterministic for a fixed input.
    """

    @abstractmethod
    def tokens(self) -> List[str]:
        """Word tokens in reading order."""
        pass

    @abstractmethod
    def sentences(self) -> List[SentenceView]:
        """Sentences in reading order."""
        pass

    @abstractmethod
    def pos_tag(self, index: int) -> TagLabel:
        """Tag of the token at ``index``."""
        pass

    def tag_counts(self) -> Counter:
        """Count of each TagLabel over all tokens."""
        return Counter(self.pos_tag(i) for i in range(len(self.tokens())))

    def passive_count(self) -> int:
        """Number of sentences classified as passive."""
        return sum(1 for sentence in self.sentences() if sentence.is_passive)


class Annotator(ABC):
    """Turns raw text into a CorpusView."""

    @abstractmethod
    def annotate(self, text: str) -> CorpusView:
        """Annotate text.

        Raises:
            AnnotationError: If the annotator fails on the input.
        """
        pass

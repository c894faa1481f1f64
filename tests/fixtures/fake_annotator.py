"""In-memory annotator and scorer fakes for testing."""

import re
from typing import Dict, List, Optional

from stylometry.annotation.base import Annotator, CorpusView, SentenceView, TagLabel
from stylometry.errors import AnnotationError


class FakeCorpusView(CorpusView):
    """CorpusView over explicit sentences and a tag lexicon.

    Words missing from the lexicon are tagged OTHER.
    """

    def __init__(
        self,
        sentences: List[SentenceView],
        lexicon: Optional[Dict[str, TagLabel]] = None
    ):
        self._sentences = list(sentences)
        self._tokens = [word for sentence in self._sentences for word in sentence.words]
        self._lexicon = lexicon or {}

    def tokens(self) -> List[str]:
        return list(self._tokens)

    def sentences(self) -> List[SentenceView]:
        return list(self._sentences)

    def pos_tag(self, index: int) -> TagLabel:
        return self._lexicon.get(self._tokens[index], TagLabel.OTHER)


def make_sentence(text: str, passive: bool = False) -> SentenceView:
    """SentenceView with words taken as the alphabetic runs of text."""
    return SentenceView(text=text, words=tuple(re.findall(r"[a-z']+", text.lower())), is_passive=passive)


class FakeAnnotator(Annotator):
    """Splits on terminal punctuation; marks sentences containing ' was ' ... ' by ' passive.

    Can be configured to fail, to exercise error propagation.
    """

    def __init__(self, lexicon: Optional[Dict[str, TagLabel]] = None, fail: bool = False):
        self.lexicon = lexicon or {}
        self.fail = fail
        self.call_count = 0

    def annotate(self, text: str) -> FakeCorpusView:
        self.call_count += 1
        if self.fail:
            raise AnnotationError("Simulated annotator failure")

        sentences = []
        for raw in re.findall(r"[^.!?]+[.!?]*", text):
            raw = raw.strip()
            if not raw:
                continue
            passive = " was " in f" {raw} " and " by " in f" {raw} "
            sentences.append(make_sentence(raw, passive=passive))
        return FakeCorpusView(sentences, self.lexicon)


class FakeScorer:
    """Polarity scorer driven by keywords: 'good' positive, 'bad' negative."""

    def __init__(self, scores: Optional[Dict[str, float]] = None):
        self.scores = scores or {"good": 0.6, "bad": -0.6}
        self.calls: List[str] = []

    def __call__(self, sentence: str) -> float:
        self.calls.append(sentence)
        for keyword, score in self.scores.items():
            if keyword in sentence:
                return score
        return 0.0

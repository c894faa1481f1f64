"""spaCy-backed annotator: tokens, sentences, POS tags and passive voice."""

from typing import Dict, List, Optional, Sequence

from ..errors import AnnotationError
from ..utils.logging import get_logger
from ..utils.nlp import get_nlp
from .base import Annotator, CorpusView, SentenceView, TagLabel

logger = get_logger(__name__)

# Universal POS tags mapped onto the closed label set
UPOS_TO_TAG: Dict[str, TagLabel] = {
    "NOUN": TagLabel.NOUN,
    "PROPN": TagLabel.NOUN,
    "VERB": TagLabel.VERB,
    "AUX": TagLabel.VERB,
    "ADJ": TagLabel.ADJECTIVE,
    "ADV": TagLabel.ADVERB,
    "PRON": TagLabel.PRONOUN,
}

PASSIVE_DEPS = {"nsubjpass", "csubjpass", "auxpass"}


def is_word(token) -> bool:
    """Whether a spaCy token counts as a word (not punctuation or space)."""
    return not (token.is_punct or token.is_space)


class SpacyCorpusView(CorpusView):
    """CorpusView materialized from a spaCy Doc."""

    def __init__(self, tokens: List[str], tags: List[TagLabel], sentences: List[SentenceView]):
        if len(tokens) != len(tags):
            raise AnnotationError(
                f"Token/tag length mismatch: {len(tokens)} tokens, {len(tags)} tags"
            )
        self._tokens = tokens
        self._tags = tags
        self._sentences = sentences

    @classmethod
    def from_doc(cls, doc) -> "SpacyCorpusView":
        """Build a view from a processed spaCy Doc."""
        tokens = []
        tags = []
        sentences = []
        for sent in doc.sents:
            words = []
            passive = False
            for token in sent:
                if token.dep_ in PASSIVE_DEPS:
                    passive = True
                if not is_word(token):
                    continue
                words.append(token.text)
                tokens.append(token.text)
                tags.append(UPOS_TO_TAG.get(token.pos_, TagLabel.OTHER))

            text = sent.text.strip()
            if text:
                sentences.append(SentenceView(text=text, words=tuple(words), is_passive=passive))

        return cls(tokens, tags, sentences)

    def tokens(self) -> List[str]:
        return list(self._tokens)

    def sentences(self) -> List[SentenceView]:
        return list(self._sentences)

    def pos_tag(self, index: int) -> TagLabel:
        return self._tags[index]


class SpacyAnnotator(Annotator):
    """Annotates text with a spaCy English pipeline.

    The pipeline is loaded lazily on first use so constructing an annotator
    is cheap.
    """

    def __init__(self, models: Optional[Sequence[str]] = None, download_missing: bool = True):
        """Initialize annotator.

        Args:
            models: spaCy model names in order of preference.
            download_missing: Download the preferred model if none is installed.
        """
        self.models = list(models) if models else None
        self.download_missing = download_missing
        self._nlp = None

    @property
    def nlp(self):
        """Lazy load spaCy model."""
        if self._nlp is None:
            self._nlp = get_nlp(self.models, download=self.download_missing)
        return self._nlp

    def annotate(self, text: str) -> SpacyCorpusView:
        nlp = self.nlp
        if len(text) > nlp.max_length:
            # Whole-corpus analysis needs the full document in one Doc
            logger.info(f"Raising spaCy max_length to {len(text)} characters")
            nlp.max_length = len(text) + 1

        try:
            doc = nlp(text)
        except (ValueError, RuntimeError) as e:
            raise AnnotationError(f"spaCy failed to annotate corpus: {e}") from e

        view = SpacyCorpusView.from_doc(doc)
        logger.debug(
            "Annotated corpus",
            extra_data={
                "tokens": len(view.tokens()),
                "sentences": len(view.sentences()),
            }
        )
        return view

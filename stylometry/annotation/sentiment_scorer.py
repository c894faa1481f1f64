"""VADER compound polarity scorer backed by NLTK."""

from ..errors import AnnotationError
from ..utils.logging import get_logger
from ..utils.nlp import setup_nltk

logger = get_logger(__name__)


class VaderSentimentScorer:
    """Callable returning VADER's compound score in [-1, 1] for a sentence."""

    def __init__(self, download_missing: bool = True):
        self.download_missing = download_missing
        self._analyzer = None

    @property
    def analyzer(self):
        """Lazy load the VADER analyzer, fetching the lexicon if needed."""
        if self._analyzer is None:
            from nltk.sentiment.vader import SentimentIntensityAnalyzer

            if self.download_missing:
                setup_nltk(("vader_lexicon",))
            try:
                self._analyzer = SentimentIntensityAnalyzer()
            except LookupError as e:
                raise AnnotationError(f"VADER lexicon is not installed: {e}") from e
            logger.debug("Loaded VADER sentiment analyzer")
        return self._analyzer

    def __call__(self, sentence: str) -> float:
        return self.analyzer.polarity_scores(sentence)["compound"]

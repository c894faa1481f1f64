"""Feature engine: runs every feature module over one corpus snapshot."""

import time
from typing import Callable, Optional, TypeVar

from .annotation.base import Annotator, CorpusView
from .annotation.sentiment_scorer import VaderSentimentScorer
from .annotation.spacy_annotator import SpacyAnnotator
from .config import Config, EngineConfig
from .corpus import CorpusSnapshot
from .errors import DegenerateInputError
from .features.distribution import sentence_variability
from .features.diversity import moving_average_ttr
from .features.lexical import lexical_features
from .features.ngrams import mine_ngrams
from .features.readability import SyllableCounter, count_syllables, get_syllable_counter, readability_scores
from .features.sentiment import PolarityScorer, analyze_sentiment
from .report.assembler import FeatureReport, assemble_report
from .utils.logging import get_logger, log_feature_timing

logger = get_logger(__name__)

T = TypeVar("T")


class StylometryEngine:
    """Computes a FeatureReport from raw corpus text.

    The annotator and sentiment scorer are injected so the statistical
    modules can run against any CorpusView.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        annotator: Optional[Annotator] = None,
        sentiment_scorer: Optional[PolarityScorer] = None,
        syllable_counter: SyllableCounter = count_syllables,
    ):
        """Initialize engine.

        Args:
            config: Feature parameters. Uses defaults if not provided.
            annotator: Linguistic annotator. Defaults to spaCy.
            sentiment_scorer: Compound polarity scorer. Defaults to VADER.
            syllable_counter: Syllable estimator for readability.
        """
        self.config = config or EngineConfig()
        self.config.validate()
        self.annotator = annotator or SpacyAnnotator()
        self.sentiment_scorer = sentiment_scorer or VaderSentimentScorer()
        self.syllable_counter = syllable_counter

    @classmethod
    def from_config(cls, config: Config) -> "StylometryEngine":
        """Build an engine with production adapters from a full Config."""
        return cls(
            config=config.engine,
            annotator=SpacyAnnotator(
                models=config.nlp.models,
                download_missing=config.nlp.download_missing,
            ),
            sentiment_scorer=VaderSentimentScorer(download_missing=config.nlp.download_missing),
            syllable_counter=get_syllable_counter(config.readability.syllable_counter),
        )

    def _timed(self, snapshot: CorpusSnapshot, feature: str, compute: Callable[[], T]) -> T:
        feature_logger = logger.with_context(source=snapshot.source)
        start = time.perf_counter()
        try:
            result = compute()
        except Exception as e:
            duration_ms = int((time.perf_counter() - start) * 1000)
            log_feature_timing(feature_logger, feature, duration_ms, success=False, error=str(e))
            raise
        duration_ms = int((time.perf_counter() - start) * 1000)
        log_feature_timing(feature_logger, feature, duration_ms)
        return result

    def annotate(self, snapshot: CorpusSnapshot) -> CorpusView:
        """Annotate a snapshot, rejecting corpora with no words.

        Raises:
            DegenerateInputError: If the annotator finds no tokens.
            AnnotationError: If the annotator fails.
        """
        view = self._timed(snapshot, "annotation", lambda: self.annotator.annotate(snapshot.text))
        if not view.tokens():
            raise DegenerateInputError(f"Corpus {snapshot.source} contains no words")
        return view

    def analyze(self, snapshot: CorpusSnapshot) -> FeatureReport:
        """Compute every feature for a corpus snapshot.

        Args:
            snapshot: Lower-cased corpus.

        Returns:
            Assembled FeatureReport.

        Raises:
            DegenerateInputError: If the corpus has no words or no sentences
                for the length statistics.
            AnnotationError: If the annotator fails.
        """
        cfg = self.config
        view = self.annotate(snapshot)
        tokens = view.tokens()
        sentences = view.sentences()

        logger.info(
            f"Analyzing {snapshot.source}",
            extra_data={"tokens": len(tokens), "sentences": len(sentences)}
        )

        lexical = self._timed(snapshot, "lexical", lambda: lexical_features(view))
        mattr = self._timed(snapshot, "mattr", lambda: moving_average_ttr(tokens, cfg.window_size))
        readability = self._timed(
            snapshot,
            "readability",
            lambda: readability_scores(sentences, cfg.chunk_size, self.syllable_counter)
        )
        sentiment = self._timed(
            snapshot,
            "sentiment",
            lambda: analyze_sentiment(snapshot.text, self.sentiment_scorer)
        )
        variability = self._timed(
            snapshot,
            "sentence_variability",
            lambda: sentence_variability(snapshot.text)
        )
        ngrams = self._timed(
            snapshot,
            "ngrams",
            lambda: mine_ngrams(
                tokens,
                min_size=cfg.ngram_min,
                max_size=cfg.ngram_max,
                qualifier=cfg.ngram_qualifier,
                cap=cfg.ngram_cap,
            )
        )

        return assemble_report(
            lexical_density=lexical["lexical_density"],
            adjective_adverb_density=lexical["adjective_adverb_density"],
            lexical_diversity_as_MATTR=mattr,
            active_voice_ratio=lexical["active_voice_ratio"],
            readability_scores=readability,
            sentiment_distribution=sentiment,
            sentence_variability_distribution=variability,
            POS_tags_data=lexical["POS_tags_data"],
            commonly_used_ngrams=ngrams,
        )

    def analyze_text(self, text: str, source: str = "<direct_input>") -> FeatureReport:
        """Snapshot raw text and analyze it."""
        return self.analyze(CorpusSnapshot.from_text(text, source=source))

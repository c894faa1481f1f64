"""NLP utilities: spaCy/NLTK loading and the regex sentence segmenters."""

import re
from typing import Dict, List, Optional, Sequence

from ..errors import AnnotationError
from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_MODELS = ("en_core_web_sm", "en_core_web_md", "en_core_web_lg")

# Loaded spaCy pipelines, keyed by model name
_pipelines: Dict[str, object] = {}

# Terminal punctuation followed by whitespace, a quote or end of text
_VARIABILITY_SENTENCE = re.compile(r"([^.!?]+[.!?]+(?=(\s|$|[\"”'‘’“])))")
_PUNCTUATED_SENTENCE = re.compile(r"[^.!?]*[.!?]")


def get_nlp(models: Optional[Sequence[str]] = None, download: bool = True):
    """Get a spaCy pipeline, loading it if necessary.

    Tries each model name in order and returns the first that loads. When
    none is installed and ``download`` is set, the first model is downloaded.

    Args:
        models: Model names in order of preference.
        download: Whether to download the preferred model if none is found.

    Returns:
        spaCy Language pipeline.

    Raises:
        AnnotationError: If spaCy or a usable model is unavailable.
    """
    models = tuple(models or DEFAULT_MODELS)
    for model_name in models:
        if model_name in _pipelines:
            return _pipelines[model_name]

    try:
        import spacy
    except ImportError as e:
        raise AnnotationError("spaCy is required. Install with: pip install spacy") from e

    for model_name in models:
        try:
            nlp = spacy.load(model_name)
        except OSError:
            continue
        _pipelines[model_name] = nlp
        logger.info(f"Loaded spaCy model: {model_name}")
        return nlp

    if not download:
        raise AnnotationError(f"No spaCy model available (tried: {', '.join(models)})")

    model_name = models[0]
    logger.info(f"Downloading spaCy model {model_name}...")
    try:
        from spacy.cli import download as spacy_download
        spacy_download(model_name)
        nlp = spacy.load(model_name)
    except (OSError, SystemExit) as e:
        raise AnnotationError(f"Could not download spaCy model {model_name}: {e}") from e

    _pipelines[model_name] = nlp
    logger.info(f"Downloaded and loaded spaCy model: {model_name}")
    return nlp


def setup_nltk(packages: Sequence[str] = ("vader_lexicon",)) -> None:
    """Download NLTK sentiment data if not present."""
    import nltk

    for package in packages:
        try:
            nltk.data.find(f"sentiment/{package}.zip")
        except LookupError:
            logger.info(f"Downloading NLTK package: {package}")
            nltk.download(package, quiet=True)


def split_punctuated_sentences(text: str) -> List[str]:
    """Split text on '.', '!' and '?' without linguistic analysis.

    Each sentence keeps its terminal mark. Trailing text with no terminal
    punctuation is not a sentence. Used by the sentiment aggregator, whose
    boundaries are allowed to differ from the spaCy segmenter.

    Args:
        text: Input text.

    Returns:
        List of sentence strings (not stripped).
    """
    if not text:
        return []
    return _PUNCTUATED_SENTENCE.findall(text)


def split_variability_sentences(text: str) -> List[str]:
    """Split text into sentences for sentence-length statistics.

    A sentence is a run of non-terminal characters followed by one or more
    terminal marks that are themselves followed by whitespace, a quote, or
    the end of the text. A mark directly followed by another character
    (e.g. "3.5", "e.g") is not a boundary, and the text before it is
    dropped rather than merged into the next sentence.

    Args:
        text: Input text.

    Returns:
        List of sentence strings.
    """
    if not text:
        return []
    return [match.group(1) for match in _VARIABILITY_SENTENCE.finditer(text)]


def count_words(text: str) -> int:
    """Count whitespace-separated words in text.

    Args:
        text: Input text.

    Returns:
        Word count.
    """
    if not text:
        return 0
    return len(text.split())

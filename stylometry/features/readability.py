"""Flesch readability scores for the whole corpus and per sentence chunk."""

import re
from dataclasses import dataclass
from typing import Callable, Dict, Sequence

from ..annotation.base import SentenceView
from ..errors import UNDEFINED
from .formatting import format_fixed

SyllableCounter = Callable[[str], int]

_SILENT_SUFFIX = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y = re.compile(r"^y")
_VOWEL_GROUP = re.compile(r"[aeiouy]{1,2}")


def count_syllables(word: str) -> int:
    """Estimate syllables with a vowel-group heuristic.

    Words of three letters or fewer count as one syllable. Otherwise a
    trailing silent "e"/"es"/"ed" and a leading "y" are removed and vowel
    groups of one or two letters are counted. The result may be 0.
    """
    word = word.lower()
    if len(word) <= 3:
        return 1
    word = _SILENT_SUFFIX.sub("", word, count=1)
    word = _LEADING_Y.sub("", word, count=1)
    return len(_VOWEL_GROUP.findall(word))


def get_syllable_counter(name: str = "heuristic") -> SyllableCounter:
    """Resolve a syllable counter by name ("heuristic" or "textstat")."""
    if name == "heuristic":
        return count_syllables
    if name == "textstat":
        import textstat
        return textstat.syllable_count
    raise ValueError(f"Unknown syllable counter: {name}")


@dataclass(frozen=True)
class ReadabilityScore:
    """Formatted Flesch scores; both UNDEFINED for empty input."""
    reading_ease: str
    grade_level: str

    @property
    def is_defined(self) -> bool:
        return self.reading_ease != UNDEFINED and self.grade_level != UNDEFINED


@dataclass(frozen=True)
class ChunkExtremes:
    """Highest grade level and highest reading ease over all chunks."""
    highest_grade_level: str
    highest_readability: str


def score_readability(
    words: Sequence[str],
    sentence_count: int,
    syllable_counter: SyllableCounter = count_syllables
) -> ReadabilityScore:
    """Flesch Reading Ease (2 decimals) and Flesch-Kincaid Grade (0 decimals).

    Args:
        words: Word tokens of the text.
        sentence_count: Number of sentences in the text.
        syllable_counter: Function estimating syllables per word.

    Returns:
        ReadabilityScore, UNDEFINED when there are no sentences or no words.
    """
    total_words = len(words)
    if sentence_count == 0 or total_words == 0:
        return ReadabilityScore(reading_ease=UNDEFINED, grade_level=UNDEFINED)

    total_syllables = sum(syllable_counter(word) for word in words)
    words_per_sentence = total_words / sentence_count
    syllables_per_word = total_syllables / total_words

    reading_ease = 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
    grade_level = 0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59

    return ReadabilityScore(
        reading_ease=format_fixed(reading_ease, 2),
        grade_level=format_fixed(grade_level, 0),
    )


def score_sentences(
    sentences: Sequence[SentenceView],
    syllable_counter: SyllableCounter = count_syllables
) -> ReadabilityScore:
    """Score a run of sentences as one text."""
    words = [word for sentence in sentences for word in sentence.words]
    return score_readability(words, len(sentences), syllable_counter)


def score_chunks(
    sentences: Sequence[SentenceView],
    chunk_size: int = 10,
    syllable_counter: SyllableCounter = count_syllables
) -> ChunkExtremes:
    """Score consecutive chunks of sentences and keep the extremes.

    The chunk with the highest grade level and the chunk with the highest
    reading ease are tracked independently. Extremes are compared on the
    formatted values; the earliest chunk wins a tie. Undefined chunks are
    skipped.

    Raises:
        ValueError: If chunk_size < 1.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    highest_grade = UNDEFINED
    highest_ease = UNDEFINED
    for start in range(0, len(sentences), chunk_size):
        score = score_sentences(sentences[start:start + chunk_size], syllable_counter)
        if not score.is_defined:
            continue
        if highest_grade == UNDEFINED or float(score.grade_level) > float(highest_grade):
            highest_grade = score.grade_level
        if highest_ease == UNDEFINED or float(score.reading_ease) > float(highest_ease):
            highest_ease = score.reading_ease

    return ChunkExtremes(highest_grade_level=highest_grade, highest_readability=highest_ease)


def readability_scores(
    sentences: Sequence[SentenceView],
    chunk_size: int = 10,
    syllable_counter: SyllableCounter = count_syllables
) -> Dict[str, str]:
    """Whole-corpus and chunk-extreme readability, in wire form."""
    overall = score_sentences(sentences, syllable_counter)
    extremes = score_chunks(sentences, chunk_size, syllable_counter)
    return {
        "avgReadabilityScore": overall.reading_ease,
        "avgGradeLevel": overall.grade_level,
        "highestGradeLevel": extremes.highest_grade_level,
        "highestReadability": extremes.highest_readability,
    }

"""Lexical density, part-of-speech ratios and active voice share.

Lexical density is the share of content words (nouns, verbs, adjectives
and adverbs). Typical values:
  Children's books: around 0.40 - 0.50
  General fiction: around 0.50 - 0.60
  Academic writing: around 0.60 - 0.70

Adjective/adverb density is a rough gauge of verbosity and purple prose.
"""

from collections import Counter
from typing import Dict

from ..annotation.base import CorpusView, TagLabel
from .formatting import safe_ratio

CONTENT_TAGS = (TagLabel.NOUN, TagLabel.VERB, TagLabel.ADJECTIVE, TagLabel.ADVERB)


def lexical_density(tag_counts: Counter, total_words: int) -> str:
    """Content words over all words, 2 decimals."""
    content = sum(tag_counts[tag] for tag in CONTENT_TAGS)
    return safe_ratio(content, total_words, 2)


def adjective_adverb_density(tag_counts: Counter, total_words: int) -> str:
    """Adjectives and adverbs over all words, 4 decimals."""
    modifiers = tag_counts[TagLabel.ADJECTIVE] + tag_counts[TagLabel.ADVERB]
    return safe_ratio(modifiers, total_words, 4)


def active_voice_ratio(total_sentences: int, passive_sentences: int) -> str:
    """Share of sentences not classified as passive, 2 decimals."""
    return safe_ratio(total_sentences - passive_sentences, total_sentences, 2)


def pos_ratios(tag_counts: Counter, total_words: int) -> Dict[str, str]:
    """Part-of-speech balance ratios.

    Noun/verb, adjective/noun and adverb/verb ratios treat a zero
    denominator as 1. Pronoun usage is relative to all words.
    """
    nouns = tag_counts[TagLabel.NOUN]
    verbs = tag_counts[TagLabel.VERB]
    return {
        "nounVerbRatio": safe_ratio(nouns, verbs or 1, 2),
        "adjectiveNounRatio": safe_ratio(tag_counts[TagLabel.ADJECTIVE], nouns or 1, 2),
        "adverbVerbRatio": safe_ratio(tag_counts[TagLabel.ADVERB], verbs or 1, 2),
        "pronounUsage": safe_ratio(tag_counts[TagLabel.PRONOUN], total_words, 2),
    }


def lexical_features(view: CorpusView) -> Dict[str, object]:
    """All tag- and voice-based metrics of an annotated corpus."""
    tag_counts = view.tag_counts()
    total_words = len(view.tokens())
    return {
        "lexical_density": lexical_density(tag_counts, total_words),
        "adjective_adverb_density": adjective_adverb_density(tag_counts, total_words),
        "active_voice_ratio": active_voice_ratio(len(view.sentences()), view.passive_count()),
        "POS_tags_data": pos_ratios(tag_counts, total_words),
    }

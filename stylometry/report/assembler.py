"""Assembly of feature outputs into one report and its text summary."""

import copy
from dataclasses import dataclass, fields
from typing import Any, Dict, List


@dataclass(frozen=True)
class FeatureReport:
    """Stylometric fingerprint of one corpus.

    Values are fixed-precision decimal strings, the UNDEFINED sentinel, or
    nested mappings/lists of those.
    """
    lexical_density: str
    adjective_adverb_density: str
    lexical_diversity_as_MATTR: str
    active_voice_ratio: str
    readability_scores: Dict[str, str]
    sentiment_distribution: Dict[str, str]
    sentence_variability_distribution: Dict[str, str]
    POS_tags_data: Dict[str, str]
    commonly_used_ngrams: Dict[str, List[str]]

    def to_dict(self) -> Dict[str, Any]:
        """Nested wire form, in field order. Safe to mutate."""
        return {f.name: copy.deepcopy(getattr(self, f.name)) for f in fields(self)}


def assemble_report(
    lexical_density: str,
    adjective_adverb_density: str,
    lexical_diversity_as_MATTR: str,
    active_voice_ratio: str,
    readability_scores: Dict[str, str],
    sentiment_distribution: Dict[str, str],
    sentence_variability_distribution: Dict[str, str],
    POS_tags_data: Dict[str, str],
    commonly_used_ngrams: Dict[str, List[str]],
) -> FeatureReport:
    """Collect module outputs into a FeatureReport, copying nested values."""
    return FeatureReport(
        lexical_density=lexical_density,
        adjective_adverb_density=adjective_adverb_density,
        lexical_diversity_as_MATTR=lexical_diversity_as_MATTR,
        active_voice_ratio=active_voice_ratio,
        readability_scores=dict(readability_scores),
        sentiment_distribution=dict(sentiment_distribution),
        sentence_variability_distribution=dict(sentence_variability_distribution),
        POS_tags_data=dict(POS_tags_data),
        commonly_used_ngrams={label: list(ngrams) for label, ngrams in commonly_used_ngrams.items()},
    )


def _flatten(prefix: str, value: Any, lines: List[str]) -> None:
    if isinstance(value, dict):
        for key, child in value.items():
            _flatten(f"{prefix}.{key}" if prefix else key, child, lines)
    elif isinstance(value, (list, tuple)):
        lines.append(f"- {prefix}: {', '.join(str(item) for item in value)}")
    else:
        lines.append(f"- {prefix}: {value}")


def render_summary(report: FeatureReport) -> str:
    """Plain-text summary, one bulleted line per metric.

    Nested metrics are flattened as ``parent.child`` and n-gram lists are
    joined with ", ".

    Example:
        - lexical_density: 0.52
        - readability_scores.avgGradeLevel: 8
        - commonly_used_ngrams.3gram: one of the, at the end
    """
    lines: List[str] = []
    _flatten("", report.to_dict(), lines)
    return "\n".join(lines) + "\n"

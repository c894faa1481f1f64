"""Stylometric fingerprinting of a text corpus."""

from .errors import (
    UNDEFINED,
    StylometryError,
    DegenerateInputError,
    AnnotationError,
    ConfigError,
)
from .config import Config, EngineConfig, load_config
from .corpus import CorpusSnapshot, load_corpus
from .engine import StylometryEngine
from .report import FeatureReport, render_summary, write_report
from .pipeline import run_analysis

__all__ = [
    "UNDEFINED",
    "StylometryError",
    "DegenerateInputError",
    "AnnotationError",
    "ConfigError",
    "Config",
    "EngineConfig",
    "load_config",
    "CorpusSnapshot",
    "load_corpus",
    "StylometryEngine",
    "FeatureReport",
    "render_summary",
    "write_report",
    "run_analysis",
]

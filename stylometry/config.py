"""Configuration management for the feature engine."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .errors import ConfigError
from .utils.logging import get_logger

logger = get_logger(__name__)

SYLLABLE_COUNTERS = ("heuristic", "textstat")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EngineConfig:
    """Tunable parameters of the statistical feature modules."""
    window_size: int = 250  # MATTR window width
    ngram_min: int = 3
    ngram_max: int = 10
    ngram_qualifier: int = 3  # Keep n-grams seen strictly more often than this
    ngram_cap: int = 10  # Top-K per n-gram size
    chunk_size: int = 10  # Sentences per readability chunk

    def validate(self) -> None:
        """Check parameter ranges.

        Raises:
            ConfigError: If any parameter is out of range.
        """
        if self.window_size < 1:
            raise ConfigError(f"window_size must be >= 1, got {self.window_size}")
        if self.ngram_min < 1:
            raise ConfigError(f"ngram_min must be >= 1, got {self.ngram_min}")
        if self.ngram_max < self.ngram_min:
            raise ConfigError(
                f"ngram_max ({self.ngram_max}) must be >= ngram_min ({self.ngram_min})"
            )
        if self.ngram_qualifier < 0:
            raise ConfigError(f"ngram_qualifier must be >= 0, got {self.ngram_qualifier}")
        if self.ngram_cap < 1:
            raise ConfigError(f"ngram_cap must be >= 1, got {self.ngram_cap}")
        if self.chunk_size < 1:
            raise ConfigError(f"chunk_size must be >= 1, got {self.chunk_size}")


@dataclass
class NLPConfig:
    """Configuration for the spaCy annotator."""
    models: List[str] = field(
        default_factory=lambda: ["en_core_web_sm", "en_core_web_md", "en_core_web_lg"]
    )
    download_missing: bool = True


@dataclass
class ReadabilityConfig:
    """Configuration for readability scoring."""
    syllable_counter: str = "heuristic"  # heuristic, textstat


@dataclass
class OutputConfig:
    """Configuration for report output."""
    directory: str = "outputs"
    write_text: bool = False


@dataclass
class Config:
    """Main configuration container."""
    engine: EngineConfig = field(default_factory=EngineConfig)
    nlp: NLPConfig = field(default_factory=NLPConfig)
    readability: ReadabilityConfig = field(default_factory=ReadabilityConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"
    log_json: bool = False


def _parse_engine_config(data: Dict[str, Any]) -> EngineConfig:
    """Parse the engine section, accepting ``ngram_range`` as a pair."""
    defaults = EngineConfig()
    ngram_range = data.get("ngram_range", [defaults.ngram_min, defaults.ngram_max])
    if not isinstance(ngram_range, (list, tuple)) or len(ngram_range) != 2:
        raise ConfigError(f"ngram_range must be a [min, max] pair, got {ngram_range!r}")

    try:
        engine = EngineConfig(
            window_size=int(data.get("window_size", defaults.window_size)),
            ngram_min=int(ngram_range[0]),
            ngram_max=int(ngram_range[1]),
            ngram_qualifier=int(data.get("ngram_qualifier", defaults.ngram_qualifier)),
            ngram_cap=int(data.get("ngram_cap", defaults.ngram_cap)),
            chunk_size=int(data.get("chunk_size", defaults.chunk_size)),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid engine configuration: {e}") from e

    engine.validate()
    return engine


def load_config(config_path: str = "config.json") -> Config:
    """Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Parsed configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigError: If config file is invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            "Copy config.json.sample to config.json to customise the engine."
        )

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file: {e}") from e

    return config_from_dict(data, source=str(config_path))


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a config section, which must be a JSON object."""
    section = data[name]
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be an object, got {type(section).__name__}")
    return section


def _flag(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false, got {value!r}")
    return value


def config_from_dict(data: Dict[str, Any], source: str = "<dict>") -> Config:
    """Build a Config from an already-parsed mapping.

    Raises:
        ConfigError: If a section is not an object or a value is invalid.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be an object, got {type(data).__name__}")

    config = Config()

    if "engine" in data:
        config.engine = _parse_engine_config(_section(data, "engine"))

    if "nlp" in data:
        nlp = _section(data, "nlp")
        models = nlp.get("models", config.nlp.models)
        if isinstance(models, str):
            models = [models]
        if not isinstance(models, list) or not models or not all(isinstance(m, str) for m in models):
            raise ConfigError(f"'models' must be a model name or a list of them, got {models!r}")
        config.nlp = NLPConfig(
            models=list(models),
            download_missing=_flag(nlp, "download_missing", True),
        )

    if "readability" in data:
        counter = _section(data, "readability").get("syllable_counter", "heuristic")
        if counter not in SYLLABLE_COUNTERS:
            raise ConfigError(
                f"Unknown syllable_counter '{counter}', expected one of {SYLLABLE_COUNTERS}"
            )
        config.readability = ReadabilityConfig(syllable_counter=counter)

    if "output" in data:
        output = _section(data, "output")
        directory = output.get("directory", "outputs")
        if not isinstance(directory, str) or not directory:
            raise ConfigError(f"'directory' must be a non-empty path, got {directory!r}")
        config.output = OutputConfig(
            directory=directory,
            write_text=_flag(output, "write_text", False),
        )

    log_level = data.get("log_level", "INFO")
    if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
        raise ConfigError(f"Unknown log_level {log_level!r}, expected one of {LOG_LEVELS}")
    config.log_level = log_level.upper()
    config.log_json = _flag(data, "log_json", False)

    logger.info(f"Loaded configuration from {source}")
    return config


def create_default_config() -> Dict:
    """Create a default configuration dictionary."""
    return {
        "engine": {
            "window_size": 250,
            "ngram_range": [3, 10],
            "ngram_qualifier": 3,
            "ngram_cap": 10,
            "chunk_size": 10
        },
        "nlp": {
            "models": ["en_core_web_sm", "en_core_web_md", "en_core_web_lg"],
            "download_missing": True
        },
        "readability": {
            "syllable_counter": "heuristic"
        },
        "output": {
            "directory": "outputs",
            "write_text": False
        },
        "log_level": "INFO",
        "log_json": False
    }

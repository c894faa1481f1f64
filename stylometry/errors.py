"""Error types and sentinels for the stylometric feature engine."""

# Substituted for metrics that are mathematically undefined for the input
# (zero denominators, zero variance). Not an exception.
UNDEFINED = "N/A"


class StylometryError(Exception):
    """Base class for engine errors."""
    pass


class DegenerateInputError(StylometryError):
    """Raised when the corpus or a required sample is empty."""
    pass


class AnnotationError(StylometryError):
    """Raised when the linguistic annotator cannot be loaded or fails."""
    pass


class ConfigError(StylometryError, ValueError):
    """Raised when the configuration file is malformed."""
    pass

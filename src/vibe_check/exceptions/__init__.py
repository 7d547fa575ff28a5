"""Exception hierarchy for vibe-check."""

from .analysis import AnalysisError, RepositoryQueryError
from .base import VibeCheckError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "VibeCheckError",
    "AnalysisError",
    "RepositoryQueryError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]

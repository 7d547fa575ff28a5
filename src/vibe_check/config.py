"""Configuration loading and management for vibe-check.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.vibe-check.toml)
    3. Project config (./vibe-check.toml)
    4. Explicit config file
    5. Environment variables (VIBE_* prefix, plus VIBE_ROOT)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(days=30, verbose=True)
    >>> config.days
    30
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .scanning.languages import SKIP_DIRECTORIES

Verbosity = Literal["quiet", "normal", "verbose"]

# Commits are clustered when the population stdev exceeds this fraction of the mean.
CLUSTERING_STDDEV_RATIO = 0.5


@dataclass(frozen=True)
class ThresholdConfig:
    """Policy thresholds for the work-pattern classification.

    Attributes:
        clustering_stddev_ratio: Active repositories are classified
            ``clustered`` when the population standard deviation of their
            commit counts exceeds ``mean * clustering_stddev_ratio``.
    """

    clustering_stddev_ratio: float = CLUSTERING_STDDEV_RATIO

    def __post_init__(self) -> None:
        if self.clustering_stddev_ratio < 0:
            raise ValueError("clustering_stddev_ratio must be non-negative")


DEFAULT_THRESHOLDS = ThresholdConfig()


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one pipeline run.

    Attributes:
        root_path: Directory scanned for repositories (``~`` is expanded)
        days: Length of the trailing activity window
        workers: Worker threads for per-repository analysis (None = auto)
        git_timeout_seconds: Timeout for each git subprocess
        skip_dirs: Directory names never descended into
        top_languages_limit: Languages kept in the summary
        most_active_limit: Repository names kept in the summary
        verbosity: Logging verbosity level
        log_file: Optional file that receives a copy of the log
        thresholds: Classification policy thresholds
    """

    root_path: str = "~/code"
    days: int = 7
    workers: Optional[int] = None
    git_timeout_seconds: int = 30
    skip_dirs: frozenset[str] = SKIP_DIRECTORIES
    top_languages_limit: int = 5
    most_active_limit: int = 3
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.days, bool) or not isinstance(self.days, int) or self.days <= 0:
            raise InvalidConfigError("days", self.days, "must be a positive integer")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.git_timeout_seconds < 1:
            raise InvalidConfigError(
                "git_timeout_seconds", self.git_timeout_seconds, "must be at least 1"
            )
        if self.top_languages_limit < 1:
            raise InvalidConfigError(
                "top_languages_limit", self.top_languages_limit, "must be at least 1"
            )
        if self.most_active_limit < 1:
            raise InvalidConfigError(
                "most_active_limit", self.most_active_limit, "must be at least 1"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )
        # TOML and CLI hand over lists; keep the frozen type
        if not isinstance(self.skip_dirs, frozenset):
            object.__setattr__(self, "skip_dirs", frozenset(self.skip_dirs))

    @property
    def root(self) -> Path:
        """Root path with ``~`` expanded."""
        return Path(expand_tilde(self.root_path))


def expand_tilde(path: str) -> str:
    """Expand a leading ``~`` to the user's home directory."""
    if path == "~" or path.startswith("~/"):
        return str(Path.home()) + path[1:]
    return path


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset CLI options keep lower-priority values

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".vibe-check.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / "vibe-check.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    thresholds_dict = merged.pop("thresholds", None)
    if isinstance(thresholds_dict, dict):
        try:
            merged["thresholds"] = ThresholdConfig(**thresholds_dict)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid [thresholds] config: {e}")
    elif isinstance(thresholds_dict, ThresholdConfig):
        merged["thresholds"] = thresholds_dict

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from VIBE_* environment variables.

    Supported environment variables:
        VIBE_ROOT / VIBE_ROOT_PATH: str
        VIBE_DAYS: int
        VIBE_WORKERS: int
        VIBE_GIT_TIMEOUT_SECONDS: int
        VIBE_TOP_LANGUAGES_LIMIT: int
        VIBE_MOST_ACTIVE_LIMIT: int
        VIBE_VERBOSITY: quiet/normal/verbose
        VIBE_LOG_FILE: str
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    root_alias = os.environ.get("VIBE_ROOT")
    if root_alias:
        result["root_path"] = root_alias

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"VIBE_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the dataclass field type.

    Returns None for types that cannot be expressed in a single variable.
    """
    origin = getattr(type_hint, "__origin__", None)
    args = getattr(type_hint, "__args__", ())

    # Optional[X] is Union[X, None]
    if type(None) in args:
        non_none = [t for t in args if t is not type(None)]
        if non_none:
            type_hint = non_none[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _read_config_file(path: Path, label: str) -> dict:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")

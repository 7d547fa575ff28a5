"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    root: Optional[Path] = None,
    days: Optional[int] = None,
    workers: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if root is not None:
        overrides["root_path"] = str(root)
    if days is not None:
        overrides["days"] = days
    if workers is not None:
        overrides["workers"] = workers
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    if log_file is not None:
        overrides["log_file"] = str(log_file)
    return load_config(config_file=config, **overrides)

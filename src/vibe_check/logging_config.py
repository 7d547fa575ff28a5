"""
Logging configuration for vibe-check.

Warnings about unreadable directories and failed git queries are the
pipeline's diagnostic side channel. They go to stderr through a rich handler
so that stdout carries nothing but the summary.

Handlers are installed on the ``vibe_check`` logger rather than the root
logger, and calling ``setup_logging`` again replaces them.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "vibe_check"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the vibe_check logger from a verbosity setting.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings) or "verbose" (debug)
        log_file: Optional file path that receives a copy of every record

    Returns:
        Configured logger instance for vibe_check

    Raises:
        ValueError: If verbosity is not a known level
    """
    if verbosity not in LEVELS:
        raise ValueError(f"Unknown verbosity {verbosity!r}; expected one of {', '.join(LEVELS)}")
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'vibe_check.scanning.scanner')
              If None, returns the root vibe_check logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)

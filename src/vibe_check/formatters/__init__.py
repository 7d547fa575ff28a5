"""Output formatters for vibe-check."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter, summary_to_dict
from .raw_formatter import RawFormatter, summary_to_lines
from .rich_formatter import RichFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json", "raw"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
        "raw": RawFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "RawFormatter",
    "RichFormatter",
    "get_formatter",
    "summary_to_dict",
    "summary_to_lines",
]

"""Base formatter interface for vibe-check output rendering."""

from abc import ABC, abstractmethod

from ..models import WorkPatternSummary


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, summary: WorkPatternSummary) -> None:
        """Write the summary to stdout."""
        print(self.format(summary))

    @abstractmethod
    def format(self, summary: WorkPatternSummary) -> str:
        """Return formatted string representation of the summary."""

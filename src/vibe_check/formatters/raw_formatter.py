"""Raw formatter: pipe-friendly key=value lines for scripts."""

from ..models import WorkPatternSummary
from .base import BaseFormatter


def summary_to_lines(summary: WorkPatternSummary) -> list[str]:
    """One ``key=value`` line per scalar field, indexed keys for the lists.

    List indexes start at 1: ``top_language_1=TypeScript:75%``,
    ``most_active_repo_1=api``.
    """
    lines = [
        f"time_range_start={summary.time_range.start.isoformat()}",
        f"time_range_end={summary.time_range.end.isoformat()}",
        f"total_repos={summary.total_repos}",
        f"active_repos={summary.active_repos}",
        f"cold_repos={summary.cold_repos}",
        f"total_commits={summary.total_commits}",
        f"commit_distribution={summary.commit_distribution.value}",
    ]
    for index, stat in enumerate(summary.top_languages, start=1):
        lines.append(f"top_language_{index}={stat.language}:{stat.percentage}%")
    for index, name in enumerate(summary.most_active_repos, start=1):
        lines.append(f"most_active_repo_{index}={name}")
    return lines


class RawFormatter(BaseFormatter):
    """Render the summary as key=value lines."""

    def format(self, summary: WorkPatternSummary) -> str:
        return "\n".join(summary_to_lines(summary))

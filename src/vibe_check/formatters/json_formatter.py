"""JSON formatter for vibe-check."""

import json
from typing import Any

from ..models import WorkPatternSummary
from .base import BaseFormatter


def summary_to_dict(summary: WorkPatternSummary) -> dict[str, Any]:
    return {
        "time_range": {
            "start": summary.time_range.start.isoformat(),
            "end": summary.time_range.end.isoformat(),
        },
        "total_repos": summary.total_repos,
        "active_repos": summary.active_repos,
        "cold_repos": summary.cold_repos,
        "total_commits": summary.total_commits,
        "commit_distribution": summary.commit_distribution.value,
        "top_languages": [
            {"language": s.language, "percentage": s.percentage} for s in summary.top_languages
        ],
        "most_active_repos": list(summary.most_active_repos),
    }


class JsonFormatter(BaseFormatter):
    """Render the summary as JSON."""

    def format(self, summary: WorkPatternSummary) -> str:
        return json.dumps(summary_to_dict(summary), indent=2)

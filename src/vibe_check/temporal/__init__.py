"""Temporal analysis: commit activity from git history."""

from .analyzer import CommitAnalyzer, analyze_commits, validate_days, window_start
from .git_runner import GitRunner
from .models import CommitAnalysis, CommitMetrics, GitFailure, GitOutput, GitResult

__all__ = [
    "CommitAnalysis",
    "CommitAnalyzer",
    "CommitMetrics",
    "GitFailure",
    "GitOutput",
    "GitResult",
    "GitRunner",
    "analyze_commits",
    "validate_days",
    "window_start",
]

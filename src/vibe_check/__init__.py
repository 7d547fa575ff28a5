"""
vibe-check - work-pattern aggregation across local git repositories

Finds every repository under a root directory, measures recent commit
activity and language composition for each, and folds the results into a
single WorkPatternSummary for the chosen window.
"""

__version__ = "0.1.0"

from .aggregation import DataAggregator, aggregate, classify_distribution
from .models import CommitDistribution, LanguageStat, RepoReport, TimeRange, WorkPatternSummary
from .pipeline import PipelineResult, WorkPatternPipeline, analyze_work_patterns, run_pipeline
from .scanning import LanguageCensus, RepositoryScanner, census, scan_repos
from .temporal import CommitAnalyzer, CommitMetrics, analyze_commits

__all__ = [
    "analyze_work_patterns",  # Main entry point
    "run_pipeline",
    "WorkPatternPipeline",
    "PipelineResult",
    "RepositoryScanner",
    "scan_repos",
    "CommitAnalyzer",
    "analyze_commits",
    "LanguageCensus",
    "census",
    "DataAggregator",
    "aggregate",
    "classify_distribution",
    "CommitMetrics",
    "CommitDistribution",
    "LanguageStat",
    "RepoReport",
    "TimeRange",
    "WorkPatternSummary",
]

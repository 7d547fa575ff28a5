"""Pipeline orchestration: scan, measure each repository, aggregate.

Per-repository work (commit analysis and language census) is read-only and
independent, so it runs on a bounded thread pool. Results are gathered in
scan order before the single-threaded aggregation step. A failure inside
one repository degrades that repository's numbers; it never aborts the run.
"""

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from .aggregation import DataAggregator
from .config import AnalysisConfig
from .exceptions import InvalidPathError
from .logging_config import get_logger
from .models import RepoReport, WorkPatternSummary
from .scanning import EntryProvider, FilesystemProvider, LanguageCensus, RepositoryScanner
from .temporal import CommitAnalyzer, CommitMetrics, GitRunner, validate_days
from .temporal.analyzer import utc_now

logger = get_logger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Summary of a run plus the per-repository reports behind it."""

    summary: WorkPatternSummary
    reports: tuple[RepoReport, ...]

    @property
    def warnings(self) -> tuple[str, ...]:
        return tuple(w for report in self.reports for w in report.warnings)


def default_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


def validate_root(root: Path, provider: Optional[EntryProvider] = None) -> Path:
    """Reject a root that is missing or not a directory; return it resolved."""
    provider = provider or FilesystemProvider()
    root = Path(root).expanduser()
    if not provider.exists(root):
        raise InvalidPathError(root, "does not exist")
    if not provider.is_dir(root):
        raise InvalidPathError(root, "is not a directory")
    try:
        return provider.resolve(root)
    except (OSError, RuntimeError) as e:
        raise InvalidPathError(root, f"cannot be resolved: {e}")


class WorkPatternPipeline:
    """Scanner -> (commit analysis || language census) -> aggregator."""

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        provider: Optional[EntryProvider] = None,
        runner: Optional[GitRunner] = None,
    ):
        self.config = config or AnalysisConfig()
        self.provider = provider or FilesystemProvider()
        self.scanner = RepositoryScanner(provider=self.provider, skip_dirs=self.config.skip_dirs)
        self.census = LanguageCensus(provider=self.provider, skip_dirs=self.config.skip_dirs)
        self.analyzer = CommitAnalyzer(
            runner=runner or GitRunner(timeout_seconds=self.config.git_timeout_seconds)
        )
        self.aggregator = DataAggregator(
            thresholds=self.config.thresholds,
            top_languages_limit=self.config.top_languages_limit,
            most_active_limit=self.config.most_active_limit,
        )

    def run(self, root: Path, days: int, now: Optional[datetime] = None) -> PipelineResult:
        """
        Run the full pipeline.

        Args:
            root: Directory to scan for repositories
            days: Window length in days
            now: Reference instant shared by every repository in the run

        Returns:
            PipelineResult

        Raises:
            InvalidConfigError: If ``days`` is not a positive integer
            InvalidPathError: If ``root`` is missing or not a directory
        """
        validate_days(days)
        root = validate_root(root, self.provider)
        now = now or utc_now()

        repos = self.scanner.scan(root)
        logger.info(f"Found {len(repos)} repositories under {root}")

        reports = self._measure_all(repos, days, now)
        summary = self.aggregator.aggregate(
            ((report.metrics, report.languages) for report in reports), days, now=now
        )
        return PipelineResult(summary=summary, reports=reports)

    def measure(self, repo_path: Path, days: int, now: datetime) -> RepoReport:
        """Commit analysis and language census for one repository."""
        commits = self.analyzer.analyze(repo_path, days, now=now)
        languages = self.census.measure(repo_path)
        return RepoReport(
            metrics=commits.metrics,
            languages=languages.languages,
            warnings=commits.warnings + languages.warnings,
        )

    def _measure_safely(self, repo_path: Path, days: int, now: datetime) -> RepoReport:
        try:
            return self.measure(repo_path, days, now)
        except Exception as e:
            message = f"Unexpected error analyzing {repo_path}: {e}"
            logger.warning(message)
            return RepoReport(metrics=CommitMetrics.empty(repo_path), warnings=(message,))

    def _measure_all(self, repos: list[Path], days: int, now: datetime) -> tuple[RepoReport, ...]:
        if not repos:
            return ()
        workers = min(self.config.workers or default_workers(), len(repos))
        if workers == 1:
            return tuple(self._measure_safely(repo, days, now) for repo in repos)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order, i.e. scan order
            return tuple(executor.map(lambda repo: self._measure_safely(repo, days, now), repos))


def run_pipeline(
    root: Path,
    days: int,
    *,
    config: Optional[AnalysisConfig] = None,
    provider: Optional[EntryProvider] = None,
    runner: Optional[GitRunner] = None,
    now: Optional[datetime] = None,
) -> PipelineResult:
    """Run the pipeline once and return the summary with its reports."""
    pipeline = WorkPatternPipeline(config=config, provider=provider, runner=runner)
    return pipeline.run(root, days, now=now)


def analyze_work_patterns(root: Path, days: int) -> WorkPatternSummary:
    """Scan ``root`` and summarize the last ``days`` days of work."""
    return run_pipeline(root, days).summary

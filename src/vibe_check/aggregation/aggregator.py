"""Data aggregator: folds per-repository results into one summary."""

from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..math.apportion import allocate_percentages
from ..models import LanguageStat, TimeRange, WorkPatternSummary
from ..temporal.analyzer import utc_now, validate_days, window_start
from ..temporal.models import CommitMetrics
from .distribution import classify_distribution

RepoMeasurement = tuple[CommitMetrics, Sequence[LanguageStat]]


class DataAggregator:
    """Combines repository metrics into a WorkPatternSummary."""

    def __init__(
        self,
        thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
        top_languages_limit: int = 5,
        most_active_limit: int = 3,
    ):
        self.thresholds = thresholds
        self.top_languages_limit = top_languages_limit
        self.most_active_limit = most_active_limit

    def aggregate(
        self,
        measurements: Iterable[RepoMeasurement],
        days: int,
        now: Optional[datetime] = None,
    ) -> WorkPatternSummary:
        """
        Aggregate repository measurements into a work pattern summary.

        Args:
            measurements: (CommitMetrics, languages) per repository
            days: Window length used for the time range
            now: End of the time range, defaults to the current UTC time

        Returns:
            WorkPatternSummary
        """
        validate_days(days)
        measurements = list(measurements)
        metrics = [m for m, _ in measurements]

        total_repos = len(metrics)
        active_repos = sum(1 for m in metrics if m.is_active)
        total_commits = sum(m.commit_count for m in metrics)

        now = now or utc_now()

        return WorkPatternSummary(
            total_repos=total_repos,
            active_repos=active_repos,
            cold_repos=total_repos - active_repos,
            total_commits=total_commits,
            commit_distribution=classify_distribution(
                [m.commit_count for m in metrics],
                self.thresholds.clustering_stddev_ratio,
            ),
            top_languages=self._top_languages(languages for _, languages in measurements),
            most_active_repos=self._most_active(metrics),
            time_range=TimeRange(start=window_start(days, now), end=now),
        )

    def _top_languages(
        self, per_repo: Iterable[Sequence[LanguageStat]]
    ) -> tuple[LanguageStat, ...]:
        # Each repository's percentage stands in for its file count
        weights: dict[str, int] = {}
        for languages in per_repo:
            for stat in languages:
                weights[stat.language] = weights.get(stat.language, 0) + stat.percentage

        shares = allocate_percentages(weights)
        return tuple(
            LanguageStat(language=name, percentage=points)
            for name, points in shares[: self.top_languages_limit]
        )

    def _most_active(self, metrics: Sequence[CommitMetrics]) -> tuple[str, ...]:
        active = [m for m in metrics if m.is_active]
        # stable: equal counts keep scan order
        active.sort(key=lambda m: m.commit_count, reverse=True)
        return tuple(m.repo_name for m in active[: self.most_active_limit])


def aggregate(
    measurements: Iterable[RepoMeasurement],
    days: int,
    now: Optional[datetime] = None,
) -> WorkPatternSummary:
    """Convenience wrapper around ``DataAggregator().aggregate``."""
    return DataAggregator().aggregate(measurements, days, now=now)

"""Data models for vibe-check: per-repository results and the run summary."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .temporal.models import CommitMetrics


@dataclass(frozen=True)
class LanguageStat:
    """Share of recognized source files written in one language."""

    language: str
    percentage: int  # whole points in [0, 100]

    def __post_init__(self) -> None:
        if not 0 <= self.percentage <= 100:
            raise ValueError(f"percentage must be in [0, 100], got {self.percentage}")


class CommitDistribution(str, Enum):
    """How commits are spread across active repositories."""

    FOCUSED = "focused"  # exactly one active repository
    CLUSTERED = "clustered"  # concentrated in a few repositories
    SPREAD = "spread"  # roughly even across repositories
    SPARSE = "sparse"  # no activity at all


@dataclass(frozen=True)
class TimeRange:
    start: datetime
    end: datetime


@dataclass(frozen=True)
class RepoReport:
    """Everything measured for one repository.

    ``warnings`` is non-empty when part of the measurement degraded to its
    zero default (unreadable log, unreadable directories).
    """

    metrics: CommitMetrics
    languages: tuple[LanguageStat, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def degraded(self) -> bool:
        return bool(self.warnings)


@dataclass(frozen=True)
class WorkPatternSummary:
    """Cross-repository summary of one analysis window."""

    total_repos: int
    active_repos: int
    cold_repos: int
    total_commits: int
    commit_distribution: CommitDistribution
    top_languages: tuple[LanguageStat, ...]
    most_active_repos: tuple[str, ...]
    time_range: TimeRange

    def __post_init__(self) -> None:
        if self.active_repos + self.cold_repos != self.total_repos:
            raise ValueError("active_repos + cold_repos must equal total_repos")

"""Commit distribution classification across active repositories."""

from typing import Iterable

from ..config import CLUSTERING_STDDEV_RATIO
from ..math.statistics import Statistics
from ..models import CommitDistribution


def classify_distribution(
    commit_counts: Iterable[int],
    clustering_ratio: float = CLUSTERING_STDDEV_RATIO,
) -> CommitDistribution:
    """
    Label how commits are spread over repositories.

    Repositories with zero commits are dropped first. Then:
        no active repository            -> sparse
        exactly one active repository   -> focused
        population stdev > mean * ratio -> clustered
        otherwise                       -> spread

    Args:
        commit_counts: In-window commit count per repository
        clustering_ratio: Policy threshold on stdev / mean

    Returns:
        CommitDistribution label
    """
    active = [count for count in commit_counts if count > 0]

    if not active:
        return CommitDistribution.SPARSE
    if len(active) == 1:
        return CommitDistribution.FOCUSED

    mean = Statistics.mean(active)
    stdev = Statistics.population_stdev(active)

    if stdev > mean * clustering_ratio:
        return CommitDistribution.CLUSTERED
    return CommitDistribution.SPREAD

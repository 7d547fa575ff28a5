"""Cross-repository aggregation."""

from .aggregator import DataAggregator, RepoMeasurement, aggregate
from .distribution import classify_distribution

__all__ = [
    "DataAggregator",
    "RepoMeasurement",
    "aggregate",
    "classify_distribution",
]

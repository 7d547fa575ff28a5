"""Numeric helpers for the aggregation pipeline."""

from .apportion import allocate_percentages
from .statistics import Statistics

__all__ = [
    "Statistics",
    "allocate_percentages",
]

"""Descriptive statistics over commit counts."""

from typing import Sequence

import numpy as np


class Statistics:
    """Statistical analysis methods."""

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """Compute arithmetic mean."""
        if not values:
            return 0.0
        return float(np.mean(values))

    @staticmethod
    def population_stdev(values: Sequence[float]) -> float:
        """
        Compute population standard deviation: sqrt(sum((x - mu)^2) / n).

        Every value is an observation of the whole population (all active
        repositories), so the divisor is n, not n - 1.
        """
        if len(values) < 2:
            return 0.0
        return float(np.std(np.asarray(values, dtype=float), ddof=0))

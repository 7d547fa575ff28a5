"""Tests for math/apportion.py - largest-remainder percentages."""

import random

import pytest

from vibe_check.math import allocate_percentages


class TestAllocatePercentages:
    """Whole-point shares that sum to the total."""

    def test_empty(self):
        assert allocate_percentages({}) == []

    def test_all_zero(self):
        """Zero weights are omitted, leaving nothing to share."""
        assert allocate_percentages({"a": 0, "b": 0}) == []

    def test_single(self):
        assert allocate_percentages({"Go": 7}) == [("Go", 100)]

    def test_exact_split(self):
        assert allocate_percentages({"TypeScript": 3, "Python": 1}) == [
            ("TypeScript", 75),
            ("Python", 25),
        ]

    def test_thirds_first_seen_wins_tie(self):
        """Equal remainders break ties by insertion order."""
        assert allocate_percentages({"b": 1, "a": 1, "c": 1}) == [
            ("b", 34),
            ("a", 33),
            ("c", 33),
        ]

    def test_largest_remainder_gets_point(self):
        """2/3 vs 1/3 of 100: 66.67 rounds up, 33.33 stays."""
        assert allocate_percentages({"x": 1, "y": 2}) == [("y", 67), ("x", 33)]

    def test_sorted_descending(self):
        shares = allocate_percentages({"a": 1, "b": 5, "c": 3})
        points = [p for _, p in shares]
        assert points == sorted(points, reverse=True)

    def test_custom_total(self):
        assert allocate_percentages({"a": 1, "b": 1}, total=3) == [("a", 2), ("b", 1)]

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            allocate_percentages({"a": -1})

    def test_negative_total_rejected(self):
        with pytest.raises(ValueError):
            allocate_percentages({"a": 1}, total=-1)

    def test_random_inputs_sum_and_bound(self):
        """Shares sum to 100 and stay within 1 of the exact value."""
        rng = random.Random(7)
        for _ in range(200):
            counts = {f"k{i}": rng.randint(0, 50) for i in range(rng.randint(1, 12))}
            weight = sum(counts.values())
            shares = allocate_percentages(counts)
            if weight == 0:
                assert shares == []
                continue
            assert sum(p for _, p in shares) == 100
            for key, points in shares:
                assert abs(points - counts[key] * 100 / weight) < 1

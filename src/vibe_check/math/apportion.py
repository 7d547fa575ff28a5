"""Largest-remainder apportionment of whole percentage points.

Each share's exact value is ``count * total / sum``. Shares are floored, and
the points lost to flooring are handed out one at a time to the shares with
the largest fractional remainder. Ties go to the share seen first.

Guarantees for any non-empty input of positive counts:
    - the shares sum to exactly ``total`` (never more)
    - every share is within 1 of its exact value
    - the result is sorted non-increasing by share

All arithmetic is on integers, so equal remainders compare equal.
"""

from typing import Mapping


def allocate_percentages(counts: Mapping[str, int], total: int = 100) -> list[tuple[str, int]]:
    """
    Split ``total`` points across ``counts`` by the largest-remainder method.

    Args:
        counts: Key -> non-negative weight, in first-encountered order
        total: Points to distribute

    Returns:
        (key, points) pairs sorted by points descending; ties keep
        first-encountered order. Keys with zero weight are omitted.

    Raises:
        ValueError: If a weight is negative or ``total`` is negative
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    for key, count in counts.items():
        if count < 0:
            raise ValueError(f"count for {key!r} must be non-negative, got {count}")

    items = [(key, count) for key, count in counts.items() if count > 0]
    weight = sum(count for _, count in items)
    if weight == 0:
        return []

    floors = [count * total // weight for _, count in items]
    remainders = [count * total % weight for _, count in items]

    leftover = total - sum(floors)
    # sorted() is stable, so equal remainders keep insertion order
    by_remainder = sorted(range(len(items)), key=lambda i: -remainders[i])
    for i in by_remainder[:leftover]:
        floors[i] += 1

    order = sorted(range(len(items)), key=lambda i: -floors[i])
    return [(items[i][0], floors[i]) for i in order]

"""Integer sorting routines and k-th order statistic selection."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Protocol


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


def counting_sort(values: Iterable[int], key_range: int) -> list[int]:
    """Return the values sorted, each of which must lie in ``[0, key_range)``."""
    if key_range < 0:
        raise ValueError(f"key_range must be non-negative, got {key_range}")
    counts = [0] * key_range
    for value in values:
        if not 0 <= value < key_range:
            raise ValueError(f"value {value} outside range [0, {key_range})")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def radix_sort(values: Iterable[int], digits: int) -> list[int]:
    """Sort non-negative integers by their lowest ``digits`` decimal digits.

    Values with more digits than ``digits`` are only ordered by the digits
    that were examined.
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")
    items = list(values)
    negatives = [value for value in items if value < 0]
    if negatives:
        raise ValueError(f"radix sort needs non-negative values, got {negatives[0]}")
    for place in range(digits):
        divisor = 10**place
        pockets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            pockets[(value // divisor) % 10].append(value)
        items = [value for pocket in pockets for value in pocket]
    return items


def _partition_strict(items: list, low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] < pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def _partition_inclusive(items: list, low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def quick_sort(values: Iterable) -> list:
    """Return the values sorted by quicksort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition_strict(items, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return items


def kth_smallest(values: Iterable, k: int, rng: _RandRange | None = None):
    """Return the k-th smallest value (1-based) using randomised quickselect."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    rng = rng if rng is not None else random.Random()
    low, high = 0, len(items) - 1
    while True:
        pivot = low + rng.randrange(high - low + 1)
        items[pivot], items[high] = items[high], items[pivot]
        index = _partition_inclusive(items, low, high)
        rank = index - low + 1
        if rank == k:
            return items[index]
        if rank > k:
            high = index - 1
        else:
            k -= rank
            low = index + 1
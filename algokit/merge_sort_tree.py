"""Merge sort tree: counts of values above or below a bound within a range."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from heapq import merge


class MergeSortTree:
    """Segment tree whose nodes hold the sorted values of their range.

    Positions are 0-based and ranges inclusive; a range with ``left > right``
    is empty.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("merge sort tree needs at least one value")
        self._tree: list[list[int]] = [[] for _ in range(4 * len(self._values))]
        self._build(1, 0, len(self._values) - 1)

    def _build(self, node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = [self._values[start]]
            return
        mid = (start + end) // 2
        self._build(2 * node, start, mid)
        self._build(2 * node + 1, mid + 1, end)
        self._tree[node] = list(merge(self._tree[2 * node], self._tree[2 * node + 1]))

    def _count(
        self, node: int, start: int, end: int, left: int, right: int, value: int, greater: bool
    ) -> int:
        if left > end or right < start:
            return 0
        if left <= start and end <= right:
            bucket = self._tree[node]
            at = bisect_right(bucket, value)
            return len(bucket) - at if greater else at
        mid = (start + end) // 2
        return self._count(2 * node, start, mid, left, right, value, greater) + self._count(
            2 * node + 1, mid + 1, end, left, right, value, greater
        )

    def _range_count(self, left: int, right: int, value: int, greater: bool) -> int:
        if left > right:
            return 0
        if left < 0 or right >= len(self._values):
            raise IndexError(f"invalid range [{left}, {right}] for {len(self._values)} values")
        return self._count(1, 0, len(self._values) - 1, left, right, value, greater)

    def count_greater(self, left: int, right: int, value: int) -> int:
        """Return how many values in positions ``left..right`` exceed ``value``."""
        return self._range_count(left, right, value, greater=True)

    def count_not_greater(self, left: int, right: int, value: int) -> int:
        """Return how many values in positions ``left..right`` are at most ``value``."""
        return self._range_count(left, right, value, greater=False)


def weakness(values: Iterable[int]) -> int:
    """Count triples i < j < k with values[i] > values[j] and values[k] <= values[j]."""
    items = list(values)
    if len(items) < 3:
        return 0
    tree = MergeSortTree(items)
    last = len(items) - 1
    return sum(
        tree.count_greater(0, index - 1, value) * tree.count_not_greater(index + 1, last, value)
        for index, value in enumerate(items[1:-1], start=1)
    )
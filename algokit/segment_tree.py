"""Segment tree over integers answering range sums with point updates."""

from __future__ import annotations

from collections.abc import Iterable


class SegmentTree:
    """Range-sum segment tree; positions are 0-based and ranges inclusive."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("segment tree needs at least one value")
        self._tree = [0] * (4 * len(self._values))
        self._build(1, 0, len(self._values) - 1)

    def _build(self, node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = self._values[start]
            return
        mid = (start + end) // 2
        self._build(2 * node, start, mid)
        self._build(2 * node + 1, mid + 1, end)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _query(self, node: int, start: int, end: int, low: int, high: int) -> int:
        if low > end or high < start:
            return 0
        if low <= start and end <= high:
            return self._tree[node]
        mid = (start + end) // 2
        return self._query(2 * node, start, mid, low, high) + self._query(
            2 * node + 1, mid + 1, end, low, high
        )

    def _update(self, node: int, start: int, end: int, index: int, value: int) -> None:
        if start == end:
            self._values[index] = value
            self._tree[node] = value
            return
        mid = (start + end) // 2
        if index > mid:
            self._update(2 * node + 1, mid + 1, end, index, value)
        else:
            self._update(2 * node, start, mid, index, value)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def query(self, start: int, end: int) -> int:
        """Return the sum of positions ``start`` through ``end`` inclusive."""
        if not 0 <= start <= end < len(self._values):
            raise IndexError(f"invalid range [{start}, {end}] for {len(self._values)} values")
        return self._query(1, 0, len(self._values) - 1, start, end)

    def update(self, index: int, value: int) -> None:
        """Set position ``index`` to ``value``."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")
        self._update(1, 0, len(self._values) - 1, index, value)
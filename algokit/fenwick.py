"""Binary indexed (Fenwick) tree for prefix sums."""

from __future__ import annotations

from collections.abc import Iterable


class FenwickTree:
    """Prefix-sum tree over positions 1..size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.size = size
        self._tree = [0] * (size + 1)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> FenwickTree:
        """Build a tree whose position i+1 holds ``values[i]``."""
        items = list(values)
        tree = cls(len(items))
        for position, value in enumerate(items, start=1):
            tree.add(position, value)
        return tree

    def add(self, index: int, value: int) -> None:
        """Add ``value`` at 1-based position ``index``."""
        if not 1 <= index <= self.size:
            raise IndexError(f"index {index} outside 1..{self.size}")
        while index <= self.size:
            self._tree[index] += value
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions 1 through ``index``."""
        if not 0 <= index <= self.size:
            raise IndexError(f"index {index} outside 0..{self.size}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total
"""A separately chained hash map from strings to values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_MULTIPLIER = 37
_MAX_LOAD = 0.7


@dataclass
class _Entry:
    key: str
    value: Any


class HashMap:
    """Hash map with string keys that doubles its bucket count past 0.7 load."""

    def __init__(self, capacity: int = 7) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._size = 0
        self._buckets: list[list[_Entry]] = [[] for _ in range(capacity)]

    def _bucket_index(self, key: str) -> int:
        total = 0
        multiplier = 1
        for char in key:
            total = (total + ord(char) * multiplier) % self.capacity
            multiplier = (multiplier * _MULTIPLIER) % self.capacity
        return total % self.capacity

    def _find(self, key: str) -> _Entry | None:
        chain = self._buckets[self._bucket_index(key)]
        return next((entry for entry in chain if entry.key == key), None)

    def _add(self, key: str, value: Any) -> None:
        self._buckets[self._bucket_index(key)].insert(0, _Entry(key, value))
        self._size += 1
        if self._size / self.capacity > _MAX_LOAD:
            self._rehash()

    def _rehash(self) -> None:
        old_buckets = self._buckets
        self.capacity *= 2
        self._size = 0
        self._buckets = [[] for _ in range(self.capacity)]
        for chain in old_buckets:
            for entry in chain:
                self._add(entry.key, entry.value)

    def insert(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        entry = self._find(key)
        if entry is None:
            self._add(key, value)
        else:
            entry.value = value

    def search(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or None if it is absent."""
        entry = self._find(key)
        return None if entry is None else entry.value

    def __getitem__(self, key: str) -> Any:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: str, value: Any) -> None:
        self.insert(key, value)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Return one line per bucket: its index, then the keys in its chain."""
        return "".join(
            f"{index}-->" + "".join(f"{entry.key}," for entry in chain) + "\n"
            for index, chain in enumerate(self._buckets)
        )
"""Searching a sequence for a value."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(values: Sequence, target) -> int | None:
    """Return an index of ``target`` in the sorted ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if target < values[mid]:
            high = mid - 1
        elif values[mid] < target:
            low = mid + 1
        else:
            return mid
    return None


def linear_search(values: Sequence, target) -> int | None:
    """Return the first index of ``target`` in ``values``, or None."""
    return next((index for index, value in enumerate(values) if value == target), None)
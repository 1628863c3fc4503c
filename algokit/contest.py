"""Solutions to a handful of short competitive-programming problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from heapq import merge
from math import gcd

_DIGITS = frozenset("0123456789")
_SAFE_PRIME = 47
_FALLBACK_PRIME = 29


def elevator_times(
    stairs: Iterable[int], elevator: Iterable[int], overhead: int
) -> list[int]:
    """Return the least time to reach each floor from the first.

    ``stairs[i]`` and ``elevator[i]`` are the costs between floor i and i+1;
    boarding the elevator costs ``overhead`` extra.
    """
    stair_costs = list(stairs)
    lift_costs = list(elevator)
    if len(stair_costs) != len(lift_costs):
        raise ValueError("stairs and elevator must describe the same number of floors")
    on_stairs, in_lift = 0, overhead
    times = [min(on_stairs, in_lift)]
    for stair, lift in zip(stair_costs, lift_costs):
        on_stairs, in_lift = (
            min(stair, lift + overhead) + min(on_stairs, in_lift),
            min(on_stairs + lift + overhead, in_lift + lift),
        )
        times.append(min(on_stairs, in_lift))
    return times


def max_palindromes(strings: Iterable[str]) -> int:
    """Return how many binary strings can be made palindromes by swapping characters."""
    count = 0
    odd_zero_strings = 0
    has_odd_length = False
    for text in strings:
        ones = text.count("1")
        zeros = len(text) - ones
        if len(text) % 2 == 1:
            has_odd_length = True
        if zeros == 0 or ones == 0 or len(text) % 2 == 1:
            count += 1
        elif zeros % 2 == 1:
            odd_zero_strings += 1
        else:
            count += 1
    if odd_zero_strings % 2 == 1 and not has_odd_length:
        odd_zero_strings -= 1
    return count + odd_zero_strings


def min_parity_merge(digits: str) -> str:
    """Return the smallest number reachable by swapping adjacent digits of different parity."""
    if not set(digits) <= _DIGITS:
        raise ValueError(f"expected only decimal digits, got {digits!r}")
    evens = [digit for digit in digits if int(digit) % 2 == 0]
    odds = [digit for digit in digits if int(digit) % 2 == 1]
    return "".join(merge(evens, odds))


def min_reverse_cost(costs: Sequence[int], words: Sequence[str]) -> int | None:
    """Return the least cost of reversing words so they end up sorted, or None.

    Reversing ``words[i]`` costs ``costs[i]``.
    """
    if len(costs) != len(words):
        raise ValueError("costs and words must have the same length")
    if not words:
        raise ValueError("need at least one word")
    previous: list[tuple[str, int | None]] = [(words[0], 0), (words[0][::-1], costs[0])]
    for cost, word in zip(costs[1:], words[1:]):
        current: list[tuple[str, int | None]] = []
        for text, extra in ((word, 0), (word[::-1], cost)):
            options = [
                total + extra
                for earlier, total in previous
                if total is not None and text >= earlier
            ]
            current.append((text, min(options) if options else None))
        previous = current
    totals = [total for _, total in previous if total is not None]
    return min(totals) if totals else None


def groom_fortunes(n: int, a: int, b: int) -> list[int] | None:
    """Return n fortunes with exactly ``a`` "Oh!" and ``b`` "Wow!" reactions, or None.

    A fortune above the sum of all before it earns "Wow!"; one above the
    maximum so far but not the sum earns "Oh!".
    """
    if a < 0 or b < 0:
        raise ValueError("a and b must be non-negative")
    filler = n - a - b - 1
    if filler < 0:
        raise ValueError(f"n={n} is too small for a={a} and b={b}")
    fortunes = [1]
    total = 1
    largest = 1
    for _ in range(b):
        value = total + 1
        fortunes.append(value)
        total += value
        largest = value
    fortunes.extend([1] * filler)
    total += filler
    for _ in range(a):
        value = largest + 1
        if value > total:
            return None
        fortunes.append(value)
        total += value
        largest = value
    return fortunes


def coprime_fix(values: Sequence[int]) -> tuple[int, list[int]]:
    """Make the coprimality graph of the values connected by changing at most one.

    Returns the number of changes made and the resulting values.
    """
    result = list(values)
    if not result:
        raise ValueError("need at least one value")
    visited = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for other, value in enumerate(result):
            if other not in visited and gcd(result[node], value) == 1:
                visited.add(other)
                queue.append(other)
    outside = next((index for index in range(len(result)) if index not in visited), None)
    if outside is None:
        return 0, result
    if any(value != _SAFE_PRIME for value in result):
        result[outside] = _SAFE_PRIME
    else:
        result[outside] = _FALLBACK_PRIME
    return 1, result
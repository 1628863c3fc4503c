import random

import pytest

from algokit.sorting import counting_sort, kth_smallest, quick_sort, radix_sort


@pytest.mark.parametrize(
    "values",
    [[], [0], [3, 1, 2], [5, 5, 0, 2, 2, 9, 1], [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]],
)
def test_counting_sort_matches_sorted(values):
    assert counting_sort(values, 10) == sorted(values)


def test_counting_sort_random_input():
    rng = random.Random(7)
    values = [rng.randrange(50) for _ in range(200)]
    assert counting_sort(values, 50) == sorted(values)


def test_counting_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        counting_sort([1, 10], 10)
    with pytest.raises(ValueError):
        counting_sort([-1], 10)


def test_counting_sort_does_not_modify_input():
    values = [3, 1, 2]
    counting_sort(values, 4)
    assert values == [3, 1, 2]


def test_radix_sort_full_digits():
    values = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(values, 3) == sorted(values)


def test_radix_sort_random_input():
    rng = random.Random(3)
    values = [rng.randrange(100000) for _ in range(300)]
    assert radix_sort(values, 5) == sorted(values)


def test_radix_sort_partial_digits_orders_by_low_digit_only():
    assert radix_sort([21, 13], 1) == [21, 13]


def test_radix_sort_zero_digits_keeps_order():
    assert radix_sort([3, 1, 2], 0) == [3, 1, 2]


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1], 2)
    with pytest.raises(ValueError):
        radix_sort([3], -1)


@pytest.mark.parametrize(
    "values",
    [[], [1], [2, 1], [1, 2, 3, 4], [4, 3, 2, 1], [5, 1, 5, 1, 5], ["pear", "apple", "fig"]],
)
def test_quick_sort_matches_sorted(values):
    assert quick_sort(values) == sorted(values)


def test_quick_sort_large_sorted_input():
    values = list(range(5000))
    assert quick_sort(values) == values


def test_quick_sort_random_input():
    rng = random.Random(11)
    values = [rng.randint(-1000, 1000) for _ in range(500)]
    assert quick_sort(values) == sorted(values)


@pytest.mark.parametrize("seed", range(5))
def test_kth_smallest_every_rank(seed):
    values = [7, 10, 4, 3, 20, 15, 1, 8]
    ordered = sorted(values)
    for k in range(1, len(values) + 1):
        assert kth_smallest(values, k, random.Random(seed)) == ordered[k - 1]


def test_kth_smallest_default_rng():
    values = list(range(100, 0, -1))
    assert kth_smallest(values, 1) == min(values)
    assert kth_smallest(values, len(values)) == max(values)


@pytest.mark.parametrize("k", [0, 4, -1])
def test_kth_smallest_rejects_bad_k(k):
    with pytest.raises(ValueError):
        kth_smallest([1, 2, 3], k)
import random
from itertools import accumulate

import pytest

from algokit.fenwick import FenwickTree


def test_prefix_sums_match_accumulate():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    tree = FenwickTree.from_values(values)
    expected = [0, *accumulate(values)]
    assert [tree.prefix_sum(i) for i in range(len(values) + 1)] == expected


def test_source_query_of_six():
    values = [2, 7, 1, 8, 2, 8, 1]
    tree = FenwickTree.from_values(values)
    assert tree.prefix_sum(6) == sum(values[:6])


def test_random_adds():
    rng = random.Random(9)
    size = 30
    tree = FenwickTree(size)
    values = [0] * size
    for _ in range(200):
        index = rng.randint(1, size)
        delta = rng.randint(-20, 20)
        tree.add(index, delta)
        values[index - 1] += delta
        probe = rng.randint(0, size)
        assert tree.prefix_sum(probe) == sum(values[:probe])


def test_empty_tree():
    tree = FenwickTree(0)
    assert tree.prefix_sum(0) == 0


@pytest.mark.parametrize("index", [0, 6, -1])
def test_add_out_of_range(index):
    with pytest.raises(IndexError):
        FenwickTree(5).add(index, 1)


@pytest.mark.parametrize("index", [-1, 6])
def test_prefix_sum_out_of_range(index):
    with pytest.raises(IndexError):
        FenwickTree(5).prefix_sum(index)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FenwickTree(-1)
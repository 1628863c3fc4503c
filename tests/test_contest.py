from itertools import accumulate

import pytest

from algokit.contest import (
    coprime_fix,
    elevator_times,
    groom_fortunes,
    max_palindromes,
    min_parity_merge,
    min_reverse_cost,
)


def test_elevator_worked_example():
    stairs = [7, 6, 18, 6, 16, 18, 1, 17, 17]
    elevator = [6, 9, 3, 10, 9, 1, 10, 1, 5]
    assert elevator_times(stairs, elevator, 2) == [0, 7, 13, 18, 24, 35, 36, 37, 40, 45]


def test_elevator_with_huge_overhead_walks_the_stairs():
    stairs = [3, 1, 4, 1, 5, 9]
    elevator = [1, 1, 1, 1, 1, 1]
    times = elevator_times(stairs, elevator, 10**9)
    assert times == [0, *accumulate(stairs)]


def test_elevator_free_boarding_takes_cheaper_leg():
    stairs = [5, 2, 8, 3]
    elevator = [4, 6, 1, 3]
    times = elevator_times(stairs, elevator, 0)
    assert times == [0, *accumulate(map(min, stairs, elevator))]


def test_elevator_times_never_decrease():
    times = elevator_times([4, 2, 7, 1, 9], [3, 8, 2, 6, 1], 3)
    assert len(times) == 6
    assert times == sorted(times)


def test_elevator_length_mismatch():
    with pytest.raises(ValueError):
        elevator_times([1, 2], [1], 1)


def test_palindromes_worked_example():
    assert max_palindromes(["1110", "100110", "010101"]) == 2


def test_palindromes_uniform_strings_all_count():
    strings = ["0", "111", "0000", "11"]
    assert max_palindromes(strings) == len(strings)


def test_palindromes_bounded_by_count():
    strings = ["01", "10", "0110", "1001", "10"]
    assert max_palindromes(strings) <= len(strings)
    assert max_palindromes(strings + ["101"]) == len(strings) + 1


def test_parity_merge_worked_example():
    assert min_parity_merge("0709") == "0079"


def test_parity_merge_keeps_parity_orders():
    digits = "246813579086"
    result = min_parity_merge(digits)
    assert sorted(result) == sorted(digits)
    assert [d for d in result if int(d) % 2 == 0] == [d for d in digits if int(d) % 2 == 0]
    assert [d for d in result if int(d) % 2 == 1] == [d for d in digits if int(d) % 2 == 1]


def test_parity_merge_sorted_digits_unchanged():
    assert min_parity_merge("0123456789") == "0123456789"


def test_parity_merge_rejects_non_digits():
    with pytest.raises(ValueError):
        min_parity_merge("12a")


def test_reverse_cost_reverses_first_word():
    costs = [1, 2]
    assert min_reverse_cost(costs, ["ba", "ac"]) == costs[0]


def test_reverse_cost_impossible():
    assert min_reverse_cost([5, 5], ["bbb", "aaa"]) is None


def test_reverse_cost_sorted_needs_nothing():
    assert min_reverse_cost([3, 4, 5], ["abc", "abd", "b"]) == min_reverse_cost([9, 9, 9], ["abc", "abd", "b"])
    assert min_reverse_cost([3, 4, 5], ["abc", "abd", "b"]) == min([0])


def test_reverse_cost_validation():
    with pytest.raises(ValueError):
        min_reverse_cost([1], ["a", "b"])
    with pytest.raises(ValueError):
        min_reverse_cost([], [])


def _reactions(fortunes):
    oh = wow = 0
    total = largest = fortunes[0]
    for value in fortunes[1:]:
        if value > total:
            wow += 1
        elif value > largest:
            oh += 1
        total += value
        largest = max(largest, value)
    return oh, wow


@pytest.mark.parametrize("n, a, b", [(5, 0, 0), (10, 2, 3), (6, 1, 4), (15, 5, 5), (3, 1, 0)])
def test_groom_fortunes_reactions(n, a, b):
    fortunes = groom_fortunes(n, a, b)
    assert len(fortunes) == n
    assert _reactions(fortunes) == (a, b)


def test_groom_fortunes_impossible():
    assert groom_fortunes(2, 1, 0) is None


def test_groom_fortunes_too_small():
    with pytest.raises(ValueError):
        groom_fortunes(3, 2, 1)


def test_coprime_fix_connected_input_unchanged():
    assert coprime_fix([2, 3]) == (0, [2, 3])


def test_coprime_fix_replaces_isolated_value():
    assert coprime_fix([2, 4]) == (1, [2, 47])


def test_coprime_fix_all_safe_primes():
    assert coprime_fix([47, 47]) == (1, [47, 29])


def test_coprime_fix_rejects_empty():
    with pytest.raises(ValueError):
        coprime_fix([])
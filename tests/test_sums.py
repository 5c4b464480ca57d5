import pytest

from gokata.sums import sum_all, sum_all_tails, total


def test_total_of_five_numbers():
    assert total([1, 2, 3, 4, 5]) == 15


def test_total_of_empty_collection():
    assert total([]) == 0


def test_sum_all_multiple_collections():
    assert sum_all([1, 2], [0, 9]) == [3, 9]


def test_sum_all_without_arguments():
    assert sum_all() == []


def test_sum_all_tails():
    assert sum_all_tails([1, 2], [0, 3, 9]) == [2, 12]


def test_sum_all_tails_safely_sums_empty():
    assert sum_all_tails([], [0, 9]) == [0, 9]


@pytest.mark.parametrize("numbers", [[5], [1, 2, 3], [7, -7, 4]])
def test_head_plus_tail_equals_total(numbers):
    assert numbers[0] + sum_all_tails(numbers)[0] == total(numbers)
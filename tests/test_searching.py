import random

import pytest

from algokit.searching import (
    binary_search,
    exponential_search,
    fibonacci_search,
    interpolation_search,
    jump_search,
)


def _distinct_sorted(seed, length):
    rng = random.Random(seed)
    return sorted(rng.sample(range(-500, 500), length))


def test_finds_every_element_of_distinct_lists():
    for length in range(1, 40):
        values = _distinct_sorted(length, length)
        for index, value in enumerate(values):
            assert binary_search(values, value) == index
            assert exponential_search(values, value) == index
            assert fibonacci_search(values, value) == index
            assert interpolation_search(values, value) == index
            assert jump_search(values, value) == index


@pytest.mark.parametrize("missing", [-5, 1, 17, 59, 100])
def test_missing_values_return_none(missing):
    values = [v * 2 for v in range(30)]
    assert binary_search(values, missing) is None
    assert exponential_search(values, missing) is None
    assert fibonacci_search(values, missing) is None
    assert interpolation_search(values, missing) is None
    assert jump_search(values, missing) is None


def test_empty_sequence():
    assert binary_search([], 3) is None
    assert exponential_search([], 3) is None
    assert fibonacci_search([], 3) is None
    assert interpolation_search([], 3) is None
    assert jump_search([], 3) is None


def test_duplicates_find_an_equal_element():
    values = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610]
    for target in set(values):
        assert values[binary_search(values, target)] == target
        assert values[exponential_search(values, target)] == target
        assert values[fibonacci_search(values, target)] == target
        assert values[interpolation_search(values, target)] == target
        assert values[jump_search(values, target)] == target


def test_exponential_search_source_example():
    values = [2, 3, 4, 10, 40]
    assert exponential_search(values, 10) == values.index(10)


def test_fibonacci_search_source_example():
    values = [10, 22, 35, 40, 45, 50, 80, 82, 85, 90, 100, 235]
    assert fibonacci_search(values, 235) == values.index(235)


def test_interpolation_search_source_example():
    values = [10, 12, 13, 16, 18, 19, 20, 21, 22, 23, 24, 33, 35, 42, 47]
    assert interpolation_search(values, 18) == values.index(18)


def test_jump_search_source_example():
    values = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610]
    assert jump_search(values, 55) == values.index(55)


def test_jump_search_returns_first_occurrence():
    values = [1, 2, 2, 2, 2, 2, 2, 3, 4]
    assert jump_search(values, 2) == values.index(2)


def test_binary_search_respects_bounds():
    values = list(range(20))
    assert binary_search(values, 15, 0, 9) is None
    assert binary_search(values, 5, 0, 9) == 5
    assert binary_search(values, 15, 10, 19) == 15


def test_interpolation_search_constant_run():
    values = [4, 4, 4, 4]
    assert values[interpolation_search(values, 4)] == 4
    assert interpolation_search(values, 5) is None
import math
import statistics

import pytest

from dsakit.searching import (
    aggressive_cows,
    allocate_books,
    binary_search,
    find_position,
    first_and_last_position,
    first_occurrence,
    get_pivot,
    last_occurrence,
    median_of_two,
    sqrt_integer,
    sqrt_precise,
)

SORTED = [1, 3, 8, 10, 17, 21, 34]
DUPLICATES = [0, 1, 1, 5, 5, 5, 5, 7, 9, 9]


def test_binary_search_finds_each_element():
    for value in SORTED:
        index = binary_search(SORTED, value)
        assert SORTED[index] == value


def test_binary_search_missing():
    for value in (0, 2, 9, 35):
        assert binary_search(SORTED, value) == -1


def test_binary_search_respects_range():
    assert binary_search(SORTED, SORTED[0], 2, len(SORTED) - 1) == -1
    assert binary_search(SORTED, SORTED[3], 2, 4) == 3


@pytest.mark.parametrize("key", sorted(set(DUPLICATES)))
def test_occurrences_bound_the_run(key):
    first = first_occurrence(DUPLICATES, key)
    last = last_occurrence(DUPLICATES, key)
    assert first == DUPLICATES.index(key)
    assert last == len(DUPLICATES) - 1 - DUPLICATES[::-1].index(key)
    assert first_and_last_position(DUPLICATES, key) == (first, last)


def test_first_and_last_position_absent():
    assert first_and_last_position(DUPLICATES, 4) == (-1, -1)
    assert first_and_last_position([], 4) == (-1, -1)


@pytest.mark.parametrize("shift", range(1, len(SORTED)))
def test_get_pivot_of_rotation(shift):
    rotated = SORTED[shift:] + SORTED[:shift]
    pivot = get_pivot(rotated)
    assert pivot == len(SORTED) - shift
    assert rotated[pivot] == min(rotated)


def test_get_pivot_unrotated_gives_last_index():
    assert get_pivot(SORTED) == len(SORTED) - 1


@pytest.mark.parametrize("shift", range(len(SORTED)))
def test_find_position_in_rotation(shift):
    rotated = SORTED[shift:] + SORTED[:shift]
    for value in SORTED:
        assert rotated[find_position(rotated, value)] == value
    for value in (0, 2, 35):
        assert find_position(rotated, value) == -1


def test_find_position_empty():
    assert find_position([], 3) == -1


def test_sqrt_integer_bounds():
    for n in range(300):
        root = sqrt_integer(n)
        assert root * root <= n < (root + 1) * (root + 1)


def test_sqrt_integer_negative():
    with pytest.raises(ValueError):
        sqrt_integer(-4)


@pytest.mark.parametrize("n", [2, 3, 10, 37, 50, 99])
def test_sqrt_precise_close_below(n):
    result = sqrt_precise(n, 3)
    assert result * result < n
    assert 0 <= math.sqrt(n) - result < 0.0011
    assert math.isqrt(n) <= result


def test_sqrt_precise_perfect_square():
    assert sqrt_precise(49, 3) == math.isqrt(49)


def test_sqrt_precise_precision_narrows_error():
    coarse = sqrt_precise(2, 1)
    fine = sqrt_precise(2, 4)
    assert coarse <= fine < math.sqrt(2)
    assert math.sqrt(2) - fine < math.sqrt(2) - coarse


def test_aggressive_cows_two_cows_span_range():
    stalls = [4, 2, 1, 3, 6]
    assert aggressive_cows(stalls, 2) == max(stalls) - min(stalls)
    assert stalls == [4, 2, 1, 3, 6]


def test_aggressive_cows_decreases_with_more_cows():
    stalls = [1, 2, 4, 8, 9, 15, 22]
    results = [aggressive_cows(stalls, cows) for cows in range(2, len(stalls) + 1)]
    assert results == sorted(results, reverse=True)
    assert results[-1] == min(b - a for a, b in zip(sorted(stalls), sorted(stalls)[1:]))


@pytest.mark.parametrize("cows", [0, 1, 6])
def test_aggressive_cows_invalid_count(cows):
    with pytest.raises(ValueError):
        aggressive_cows([1, 2, 3, 4, 5], cows)


def test_allocate_books_example():
    assert allocate_books([10, 20, 30, 40], 2) == 60


def test_allocate_books_extremes():
    pages = [12, 34, 67, 90]
    assert allocate_books(pages, 1) == sum(pages)
    assert allocate_books(pages, len(pages)) == max(pages)


def test_allocate_books_bounds():
    pages = [5, 17, 100, 11, 3, 42, 8]
    for students in range(1, len(pages) + 1):
        result = allocate_books(pages, students)
        assert max(pages) <= result <= sum(pages)


def test_allocate_books_no_students():
    with pytest.raises(ValueError):
        allocate_books([1, 2], 0)


@pytest.mark.parametrize(
    "first, second",
    [
        ([1, 5, 9], [2, 6, 7]),
        ([1, 3], [2]),
        ([], [4, 8, 15, 16]),
        ([7], []),
        ([1, 2, 3, 4, 5, 6], [0]),
        ([-5, -1, 0], [-3, 2, 2, 10]),
    ],
)
def test_median_of_two_matches_statistics(first, second):
    assert median_of_two(first, second) == statistics.median(first + second)
    assert median_of_two(second, first) == statistics.median(first + second)


def test_median_of_two_empty():
    with pytest.raises(ValueError):
        median_of_two([], [])
import pytest

from dsakit.matrix import (
    column_sums,
    is_present,
    largest_row_sum,
    row_sums,
    search_matrix,
    wave_print,
)

SQUARE = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
WIDE = [[3, -1, 4, 1], [5, 9, 2, 6], [5, 3, 5, 8]]
SORTED = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]


@pytest.mark.parametrize("matrix", [SQUARE, WIDE, SORTED])
def test_every_element_is_present(matrix):
    for row in matrix:
        for value in row:
            assert is_present(matrix, value)


@pytest.mark.parametrize("matrix", [SQUARE, WIDE, SORTED])
def test_missing_element_is_not_present(matrix):
    missing = max(max(row) for row in matrix) + 1
    assert not is_present(matrix, missing)


@pytest.mark.parametrize("matrix", [SQUARE, WIDE, SORTED])
def test_row_and_column_sums_share_total(matrix):
    assert sum(row_sums(matrix)) == sum(column_sums(matrix))
    assert len(row_sums(matrix)) == len(matrix)
    assert len(column_sums(matrix)) == len(matrix[0])


@pytest.mark.parametrize("matrix", [SQUARE, WIDE, SORTED])
def test_column_sums_are_row_sums_of_transpose(matrix):
    transposed = [list(column) for column in zip(*matrix)]
    assert column_sums(matrix) == row_sums(transposed)


@pytest.mark.parametrize("matrix", [SQUARE, WIDE, SORTED])
def test_largest_row_sum_points_at_maximum(matrix):
    index = largest_row_sum(matrix)
    sums = row_sums(matrix)
    assert sums[index] == max(sums)
    assert all(total < sums[index] for total in sums[:index])


def test_largest_row_sum_prefers_first_on_tie():
    assert largest_row_sum([[1, 2], [2, 1]]) == 0


def test_largest_row_sum_of_empty_matrix():
    assert largest_row_sum([]) == -1


def test_search_matrix_finds_every_element():
    for row in SORTED:
        for value in row:
            assert search_matrix(SORTED, value)


def test_search_matrix_rejects_absent_values():
    present = {value for row in SORTED for value in row}
    for value in range(-2, SORTED[-1][-1] + 3):
        assert search_matrix(SORTED, value) == (value in present)


def test_search_matrix_empty():
    assert search_matrix([], 4) is False
    assert search_matrix([[]], 4) is False


def test_wave_print_square():
    assert wave_print(SQUARE) == [1, 4, 7, 8, 5, 2, 3, 6, 9]


def test_wave_print_is_permutation_with_alternating_columns():
    wave = wave_print(WIDE)
    rows = len(WIDE)
    flat = [value for row in WIDE for value in row]
    assert sorted(wave) == sorted(flat)
    for index, column in enumerate(zip(*WIDE)):
        chunk = wave[index * rows:(index + 1) * rows]
        expected = list(reversed(column)) if index % 2 else list(column)
        assert chunk == expected
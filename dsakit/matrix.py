"""Operations on rectangular matrices given as sequences of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def is_present(matrix: Matrix, target: int) -> bool:
    """Return True if ``target`` occurs anywhere in ``matrix``."""
    return any(target in row for row in matrix)


def row_sums(matrix: Matrix) -> list[int]:
    """Return the sum of every row, top to bottom."""
    return [sum(row) for row in matrix]


def column_sums(matrix: Matrix) -> list[int]:
    """Return the sum of every column, left to right."""
    return [sum(column) for column in zip(*matrix)]


def largest_row_sum(matrix: Matrix) -> int:
    """Return the index of the row with the largest sum.

    The first such row wins a tie; a matrix without rows gives -1.
    """
    sums = row_sums(matrix)
    if not sums:
        return -1
    return sums.index(max(sums))


def search_matrix(matrix: Matrix, target: int) -> bool:
    """Binary search a matrix whose rows, read in order, form a sorted list."""
    if not matrix or not matrix[0]:
        return False
    columns = len(matrix[0])
    low, high = 0, len(matrix) * columns - 1
    while low <= high:
        mid = (low + high) // 2
        row, column = divmod(mid, columns)
        element = matrix[row][column]
        if element == target:
            return True
        if element < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def wave_print(matrix: Matrix) -> list[int]:
    """Read the matrix column by column, alternating downwards and upwards."""
    result: list[int] = []
    for index, column in enumerate(zip(*matrix)):
        result.extend(reversed(column) if index % 2 else column)
    return result
"""Multiplication of dense row-major integer matrices."""

from collections.abc import Sequence

Matrix = list[list[int]]


def _shape(matrix: Sequence[Sequence[int]], name: str) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError(f"{name} is not rectangular")
    return rows, cols


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product of ``a`` and ``b``.

    Raises ValueError when the column count of ``a`` differs from the row
    count of ``b`` or when either matrix is ragged.
    """
    _, a_cols = _shape(a, "first matrix")
    b_rows, _ = _shape(b, "second matrix")
    if a_cols != b_rows:
        raise ValueError(
            "Columns of first matrix must equal rows of second matrix."
        )
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]
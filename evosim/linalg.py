"""Small dense linear-algebra helpers over flat row-major lists."""

from __future__ import annotations

from typing import Sequence


def matrix_vector_mult(
    matrix: Sequence[float], vector: Sequence[float], num_rows: int, num_cols: int
) -> list[float]:
    """Multiply a row-major ``num_rows`` x ``num_cols`` matrix by a vector."""
    if len(matrix) != num_rows * num_cols:
        raise ValueError("Matrix size does not match its dimensions")
    if len(vector) != num_cols:
        raise ValueError("Vector length does not match the number of columns")
    return [
        sum(m * v for m, v in zip(matrix[row * num_cols:(row + 1) * num_cols], vector))
        for row in range(num_rows)
    ]


def vector_vector_add(vector1: Sequence[float], vector2: Sequence[float]) -> list[float]:
    """Add two vectors element by element."""
    if len(vector1) != len(vector2):
        raise ValueError("Vectors have different lengths")
    return [a + b for a, b in zip(vector1, vector2)]
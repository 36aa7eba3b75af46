"""Products of 3x3 matrices and homogeneous 2-D coordinate vectors."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]
Vector = tuple[float, float, float]


def mat_vec(matrix: Sequence[Sequence[float]], vector: Sequence[float]) -> Vector:
    """Return ``matrix @ vector`` for a 3x3 matrix and a 3-element column vector."""
    if len(matrix) != 3 or len(vector) != 3 or any(len(row) != 3 for row in matrix):
        raise ValueError("mat_vec expects a 3x3 matrix and a 3-element vector")
    a, b, c = (sum(m * v for m, v in zip(row, vector)) for row in matrix)
    return (a, b, c)


def mat_mul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the 3x3 product ``a @ b``."""
    if len(a) != 3 or len(b) != 3 or any(len(row) != 3 for row in (*a, *b)):
        raise ValueError("mat_mul expects two 3x3 matrices")
    columns = list(zip(*b))
    r0, r1, r2 = (
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )
    return (r0, r1, r2)  # type: ignore[return-value]
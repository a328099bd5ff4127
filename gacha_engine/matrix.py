"""
Dense linear system solver used by every expectation model.

Gaussian elimination with row-wise partial pivoting on a private,
contiguous row-major copy of the inputs. Singularity is detected only when
the selected pivot is exactly zero.
"""
import numpy as np

from gacha_engine.errors import DimensionMismatch, SingularMatrix


def solve_linear_system(A, b):
    """
    Solve ``A @ x = b`` for a square ``A``.

    ``b`` is normally a length-n vector; an ``(n, k)`` array solves k
    right-hand sides in one elimination pass. Neither input is modified.
    """
    try:
        mat = np.array(A, dtype=np.float64, order="C")
        rhs = np.array(b, dtype=np.float64, order="C")
    except ValueError as e:
        raise DimensionMismatch(f"inputs are not rectangular: {e}") from e

    n = len(mat)
    if n == 0:
        if len(rhs):
            raise DimensionMismatch("empty matrix with non-empty right-hand side")
        return np.zeros(0)
    if mat.ndim != 2 or mat.shape[1] != n:
        raise DimensionMismatch(f"matrix must be square, got shape {mat.shape}")
    if rhs.ndim not in (1, 2) or rhs.shape[0] != n:
        raise DimensionMismatch(f"right-hand side of shape {rhs.shape} does not match dimension {n}")

    is_vector = rhs.ndim == 1
    if is_vector:
        rhs = rhs.reshape(n, 1)

    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(mat[i:, i])))
        pivot = mat[pivot_row, i]
        if pivot == 0.0:
            raise SingularMatrix(f"zero pivot in column {i}")

        if pivot_row != i:
            mat[[i, pivot_row]] = mat[[pivot_row, i]]
            rhs[[i, pivot_row]] = rhs[[pivot_row, i]]

        mat[i, i:] /= pivot
        rhs[i] /= pivot

        # rows whose entry in this column is already zero need no update
        rows = np.flatnonzero(mat[i + 1:, i]) + i + 1
        if rows.size:
            factors = mat[rows, i]
            mat[rows, i:] -= np.outer(factors, mat[i, i:])
            rhs[rows] -= np.outer(factors, rhs[i])

    x = np.zeros_like(rhs)
    for i in range(n - 1, -1, -1):
        x[i] = rhs[i] - mat[i, i + 1:] @ x[i + 1:]

    return x[:, 0] if is_vector else x

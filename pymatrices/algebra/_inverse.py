"""
Gauss-Jordan inversion kernel.

Works on a private copy A of the input next to an identity matrix B.
Every row operation is applied to both, so once A has been reduced to a
diagonal matrix and the rows normalized, B holds the inverse.

Three passes:
    forward:        i = 0 .. n-2, clear column i below the diagonal
    backward:       i = n-1 .. 1, clear column i above the diagonal
    normalization:  divide each row of B by the remaining diagonal of A

A zero pivot is replaced by swapping in the first row below it with a
nonzero entry in that column. Pivots are compared to zero exactly; there
is no epsilon, so a near-singular input is inverted rather than rejected.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pymatrices.core.exceptions import SingularMatrixError


def _swap_in_pivot(
    A: NDArray[np.float64],
    B: NDArray[np.float64],
    i: int,
    stage: str,
) -> None:
    """Swap row i with the first lower row that has a nonzero entry in column i."""
    candidates = np.flatnonzero(A[i + 1:, i] != 0)
    if candidates.size == 0:
        raise SingularMatrixError(
            f"Matrix is singular: no nonzero pivot in column {i} "
            f"({stage} elimination)",
            matrix_name='A',
            stage=stage,
            pivot_index=i,
        )
    j = i + 1 + int(candidates[0])
    A[[i, j]] = A[[j, i]]
    B[[i, j]] = B[[j, i]]


def gauss_jordan_inverse(
    matrix: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Invert a square array.

    Args:
        matrix: Square (n x n) float64 array. Not modified.

    Returns:
        (inverse, pivots) where pivots is the diagonal of the reduced A,
        in row order, before normalization.

    Raises:
        SingularMatrixError: If a column has no usable pivot or a diagonal
            entry is exactly zero at normalization.
    """
    size = matrix.shape[0]
    A = np.array(matrix, dtype=np.float64, copy=True)
    B = np.eye(size, dtype=np.float64)

    # Inf/NaN inputs propagate per IEEE-754
    with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
        for i in range(size - 1):
            if A[i, i] == 0:
                _swap_in_pivot(A, B, i, 'forward')
            factors = A[i + 1:, i] / A[i, i]
            A[i + 1:] -= np.multiply.outer(factors, A[i])
            B[i + 1:] -= np.multiply.outer(factors, B[i])

        for i in range(size - 1, 0, -1):
            if A[i, i] == 0:
                _swap_in_pivot(A, B, i, 'backward')
            factors = A[:i, i] / A[i, i]
            A[:i] -= np.multiply.outer(factors, A[i])
            B[:i] -= np.multiply.outer(factors, B[i])

        pivots = np.diag(A).copy()
        for i in range(size):
            d = A[i, i]
            if d == 0:
                raise SingularMatrixError(
                    f"Matrix is singular: zero diagonal entry at row {i}",
                    matrix_name='A',
                    stage='normalization',
                    pivot_index=i,
                )
            if d == 1:
                continue
            B[i] /= d

    return B, pivots

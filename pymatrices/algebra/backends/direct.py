"""
Direct (triple-loop) matrix product.

Each entry C[i, j] is accumulated as a running sum starting from 0.0 and
adding A[i, k] * B[k, j] for k = 0, 1, ..., n-1 in that order. The loop
over k is kept in Python while the (i, j) plane is vectorized, so every
entry sees exactly the same sequence of IEEE-754 operations as the scalar
loop. A BLAS call (A @ B) would reorder the sum and change the rounding.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def direct_product(
    a: NDArray[np.float64],
    b: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Product of (rows x inner) and (inner x cols) arrays, summed in k order.

    Shapes are assumed compatible; callers validate.
    """
    rows, inner = a.shape
    cols = b.shape[1]
    out = np.zeros((rows, cols), dtype=np.float64)
    term = np.empty((rows, cols), dtype=np.float64)
    for k in range(inner):
        np.multiply.outer(a[:, k], b[k, :], out=term)
        out += term
    return out


class DirectProductBackend:
    """Sequential-summation product for any compatible shapes."""

    @property
    def name(self) -> str:
        return 'cpu_direct'

    def multiply(
        self,
        a: NDArray[np.float64],
        b: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        return direct_product(a, b)

"""
Strassen's recursive matrix product.

Splits square operands of even size n into four n/2 x n/2 quadrants and
replaces the eight quadrant products of the block formula with seven:

    M1 = (A11 + A22)(B11 + B22)
    M2 = (A21 + A22) B11
    M3 = A11 (B12 - B22)
    M4 = A22 (B21 - B11)
    M5 = (A11 + A12) B22
    M6 = (A21 - A11)(B11 + B12)
    M7 = (A12 - A22)(B21 + B22)

    C11 = M1 + M4 - M5 + M7
    C12 = M3 + M5
    C21 = M2 + M4
    C22 = M1 - M2 + M3 + M6

Each Mi is computed recursively. A block at or below the threshold, or of
odd size, goes to the direct product instead. The result matches the
direct product up to rounding only: the additions above reorder the sums.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pymatrices.algebra.backends.direct import direct_product


def strassen_product(
    a: NDArray[np.float64],
    b: NDArray[np.float64],
    threshold: int,
) -> NDArray[np.float64]:
    """
    Recursive product of two n x n arrays.

    Entry is gated by StrassenPolicy (n even and n > threshold); the
    recursion itself handles the base case for sub-blocks.
    """
    n = a.shape[0]
    if n <= threshold or n % 2 == 1:
        return direct_product(a, b)

    h = n // 2
    a11, a12 = a[:h, :h], a[:h, h:]
    a21, a22 = a[h:, :h], a[h:, h:]
    b11, b12 = b[:h, :h], b[:h, h:]
    b21, b22 = b[h:, :h], b[h:, h:]

    m1 = strassen_product(a11 + a22, b11 + b22, threshold)
    m2 = strassen_product(a21 + a22, b11, threshold)
    m3 = strassen_product(a11, b12 - b22, threshold)
    m4 = strassen_product(a22, b21 - b11, threshold)
    m5 = strassen_product(a11 + a12, b22, threshold)
    m6 = strassen_product(a21 - a11, b11 + b12, threshold)
    m7 = strassen_product(a12 - a22, b21 + b22, threshold)

    out = np.empty((n, n), dtype=np.float64)
    out[:h, :h] = m1 + m4 - m5 + m7
    out[:h, h:] = m3 + m5
    out[h:, :h] = m2 + m4
    out[h:, h:] = m1 - m2 + m3 + m6
    return out


class StrassenProductBackend:
    """Recursive product for square operands of even size above the threshold."""

    def __init__(self, threshold: int):
        self._threshold = threshold

    @property
    def name(self) -> str:
        return 'cpu_strassen'

    @property
    def threshold(self) -> int:
        return self._threshold

    def multiply(
        self,
        a: NDArray[np.float64],
        b: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        return strassen_product(a, b, self._threshold)

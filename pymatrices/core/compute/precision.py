"""
Numerical precision constants.

Provides the float64 machine epsilon and the pivot-ratio helper used by the
near-singular diagnostic in inversion.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


def pivot_ratio(pivots: NDArray[np.floating[Any]]) -> float:
    """
    Ratio of the smallest to the largest absolute pivot.

    Returns 0.0 when every pivot is zero and NaN when any pivot is NaN.
    """
    magnitudes = np.abs(pivots)
    largest = float(np.max(magnitudes))
    if largest == 0.0:
        return 0.0
    return float(np.min(magnitudes)) / largest

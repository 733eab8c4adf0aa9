"""
Random fill for matrices.

This is the one mutating operation in the package. It lives outside
pymatrices.algebra so the engine stays a set of pure functions.
"""

from __future__ import annotations

import numpy as np

from pymatrices.core.exceptions import ValidationError
from pymatrices.matrix import Matrix


def fill_random(
    matrix: Matrix,
    rng: np.random.Generator | int | None = None,
) -> None:
    """
    Overwrite every entry with an independent uniform draw from [0, 1).

    The matrix is modified in place; nothing is allocated or returned.

    Args:
        matrix: Matrix to fill
        rng: numpy Generator, integer seed, or None for fresh OS entropy

    Raises:
        ValidationError: If matrix is not a Matrix
    """
    if not isinstance(matrix, Matrix):
        raise ValidationError(
            f"matrix: expected Matrix, got {type(matrix).__name__}"
        )
    generator = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    # Matrix.data is read-only; write through the owned buffer
    generator.random(out=matrix._data)

"""
Public entry points of the matrix algebra engine.

Every function is pure: operands are never modified and the result is a
newly allocated Matrix. Failures raise immediately (see core.exceptions);
no partial result is ever returned.

Functions:
    add(m1, m2)         elementwise sum
    sub(m1, m2)         elementwise difference
    scale(c, m)         scalar multiple
    transpose(m)        rows become columns
    multiply(m1, m2)    matrix product, direct or Strassen per policy
    inverse(m)          Gauss-Jordan inverse
"""

from __future__ import annotations

import numbers
import warnings

import numpy as np

from pymatrices.core.exceptions import IllConditionedWarning, ValidationError
from pymatrices.core.compute.precision import EPSILON_64, pivot_ratio
from pymatrices.matrix import Matrix
from pymatrices.algebra.config import StrassenPolicy, DEFAULT_POLICY
from pymatrices.algebra.backends.direct import DirectProductBackend
from pymatrices.algebra.backends.strassen import StrassenProductBackend
from pymatrices.algebra._common import (
    ensure_matrix,
    check_same_shape,
    check_inner_dimensions,
    check_square,
)
from pymatrices.algebra._inverse import gauss_jordan_inverse


def _get_backend(m1: Matrix, m2: Matrix, policy: StrassenPolicy):
    """Select the product backend for a pair of compatible operands."""
    if policy.applies(m1.shape, m2.shape):
        return StrassenProductBackend(threshold=policy.threshold)
    return DirectProductBackend()


def add(m1: Matrix, m2: Matrix) -> Matrix:
    """
    Elementwise sum.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    ensure_matrix(m1, 'm1')
    ensure_matrix(m2, 'm2')
    check_same_shape(m1, m2, 'add')
    return Matrix._from_owned(m1.data + m2.data)


def sub(m1: Matrix, m2: Matrix) -> Matrix:
    """
    Elementwise difference m1 - m2.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    ensure_matrix(m1, 'm1')
    ensure_matrix(m2, 'm2')
    check_same_shape(m1, m2, 'sub')
    return Matrix._from_owned(m1.data - m2.data)


def scale(c: float, m: Matrix) -> Matrix:
    """
    Multiply every entry by the scalar c.

    NaN and infinite scalars are accepted and propagate per IEEE-754.

    Raises:
        ValidationError: If c is not a real number, or is an int (or other
            exact real) too large to convert to float64
    """
    if isinstance(c, bool) or not isinstance(c, (numbers.Real, np.floating, np.integer)):
        raise ValidationError(
            f"c: expected a real scalar, got {type(c).__name__} {c!r}"
        )
    try:
        factor = float(c)
    except OverflowError as e:
        raise ValidationError(
            f"c: {type(c).__name__} value is outside the float64 range"
        ) from e
    ensure_matrix(m, 'm')
    with np.errstate(over='ignore', invalid='ignore'):
        return Matrix._from_owned(factor * m.data)


def transpose(m: Matrix) -> Matrix:
    """Matrix of shape (cols, rows) with result[i, j] = m[j, i]."""
    ensure_matrix(m, 'm')
    return Matrix._from_owned(m.data.T.copy())


def multiply(
    m1: Matrix,
    m2: Matrix,
    *,
    policy: StrassenPolicy | None = None,
) -> Matrix:
    """
    Matrix product m1 @ m2.

    Square operands of even size above policy.threshold use Strassen's
    recursive product; everything else uses the direct product, which
    sums each entry over k in order.

    multiply(A, identity) == A holds exactly on the direct path only; on
    the Strassen path the result matches A to rounding (STRASSEN_FP64).

    Parameters
    ----------
    m1 : Matrix
        Left operand (r x n).
    m2 : Matrix
        Right operand (n x c).
    policy : StrassenPolicy, optional
        Dispatch gate. Defaults to DEFAULT_POLICY (threshold 32).

    Returns
    -------
    Matrix of shape (r, c).

    Raises
    ------
    DimensionMismatchError
        If m1.cols != m2.rows.
    """
    ensure_matrix(m1, 'm1')
    ensure_matrix(m2, 'm2')
    check_inner_dimensions(m1, m2)
    if policy is None:
        policy = DEFAULT_POLICY
    elif not isinstance(policy, StrassenPolicy):
        raise ValidationError(
            f"policy: expected StrassenPolicy, got {type(policy).__name__}"
        )

    be = _get_backend(m1, m2, policy)
    with np.errstate(over='ignore', invalid='ignore'):
        product = be.multiply(m1.data, m2.data)
    return Matrix._from_owned(product)


def inverse(m: Matrix) -> Matrix:
    """
    Inverse by Gauss-Jordan elimination with row-swap pivoting.

    Pivots are tested against exactly zero. An input that is singular only
    up to rounding is inverted; when the smallest pivot is within n machine
    epsilons of the largest, an IllConditionedWarning is emitted and the
    (likely inaccurate) inverse is still returned.

    Raises:
        NonSquareError: If m is not square
        SingularMatrixError: If elimination finds no nonzero pivot for a
            column, or a diagonal entry is exactly zero at normalization
    """
    ensure_matrix(m, 'm')
    check_square(m, 'inverse')

    inv, pivots = gauss_jordan_inverse(m.data)

    limit = m.rows * EPSILON_64
    ratio = pivot_ratio(pivots)
    if ratio <= limit:
        warnings.warn(
            f"Matrix is ill-conditioned: smallest/largest pivot ratio "
            f"{ratio:.3e} is at or below {limit:.3e}. The inverse may be "
            f"dominated by rounding error.",
            IllConditionedWarning,
            stacklevel=2,
        )
    return Matrix._from_owned(inv)

"""
Shared operand checks for the algebra engine.
"""

from __future__ import annotations

from typing import Any

from pymatrices.core.exceptions import (
    DimensionMismatchError,
    NonSquareError,
    ValidationError,
)
from pymatrices.matrix import Matrix


def ensure_matrix(value: Any, name: str) -> Matrix:
    """Reject anything that is not a Matrix."""
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected Matrix, got {type(value).__name__}"
        )
    return value


def check_same_shape(m1: Matrix, m2: Matrix, operation: str) -> None:
    """Elementwise operations need identical (rows, cols)."""
    if m1.shape != m2.shape:
        raise DimensionMismatchError(
            f"{operation}: dimensions of matrices must be equal. "
            f"Expected: {m1.rows} x {m1.cols}, but found: {m2.rows} x {m2.cols}",
            operation=operation,
            expected=m1.shape,
            actual=m2.shape,
        )


def check_inner_dimensions(m1: Matrix, m2: Matrix) -> None:
    """Columns of the left operand must equal rows of the right one."""
    if m1.cols != m2.rows:
        raise DimensionMismatchError(
            "multiply: number of columns of the first matrix must equal the "
            f"number of rows of the second one. Expected: {m1.cols}, "
            f"but found: {m2.rows}",
            operation='multiply',
            expected=m1.cols,
            actual=m2.rows,
        )


def check_square(m: Matrix, operation: str) -> None:
    if not m.is_square:
        raise NonSquareError(
            f"{operation}: matrix must be square. Found: {m.rows} x {m.cols}",
            shape=m.shape,
        )

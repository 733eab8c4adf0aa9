"""
Core infrastructure for PyMatrices.

This module provides shared abstractions and utilities used by the matrix
container, the algebra engine and the benchmarking harness.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerance tiers, precision constants
"""

from pymatrices.core.result import Result
from pymatrices.core.exceptions import (
    PyMatricesError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    NonSquareError,
    MatrixIndexError,
    NumericalError,
    SingularMatrixError,
    IllConditionedWarning,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatricesError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "NonSquareError",
    "MatrixIndexError",
    "NumericalError",
    "SingularMatrixError",
    "IllConditionedWarning",
]

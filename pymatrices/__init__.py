"""
PyMatrices: dense matrix algebra for Python.

A small engine of pure functions over a float64 Matrix container:
elementwise arithmetic, transpose, a matrix product that switches to
Strassen's recursion for large square operands, and Gauss-Jordan
inversion with row-swap pivoting.

Submodules:
    matrix: Matrix container
    algebra: add, sub, scale, transpose, multiply, inverse
    random: fill_random (in-place, kept apart from the pure engine)
    benchmarking: timing harness for multiply and inverse
"""

__version__ = "0.1.0"

from pymatrices.matrix import Matrix
from pymatrices.algebra import (
    add,
    sub,
    scale,
    transpose,
    multiply,
    inverse,
    StrassenPolicy,
    DEFAULT_POLICY,
    DIRECT_ONLY,
)
from pymatrices.random import fill_random
from pymatrices.core.exceptions import (
    PyMatricesError,
    DimensionMismatchError,
    NonSquareError,
    SingularMatrixError,
    IllConditionedWarning,
)

__all__ = [
    "__version__",
    "Matrix",
    "add",
    "sub",
    "scale",
    "transpose",
    "multiply",
    "inverse",
    "fill_random",
    "StrassenPolicy",
    "DEFAULT_POLICY",
    "DIRECT_ONLY",
    "PyMatricesError",
    "DimensionMismatchError",
    "NonSquareError",
    "SingularMatrixError",
    "IllConditionedWarning",
]

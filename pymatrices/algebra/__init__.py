"""
Matrix algebra engine.

Pure functions over Matrix values. Each returns a new Matrix; operands
are never modified.

Public API:
    add(m1, m2)                 - Elementwise sum
    sub(m1, m2)                 - Elementwise difference
    scale(c, m)                 - Scalar multiple
    transpose(m)                - Transpose
    multiply(m1, m2, policy=)   - Product (direct or Strassen)
    inverse(m)                  - Gauss-Jordan inverse
"""

from pymatrices.algebra.config import StrassenPolicy, DEFAULT_POLICY, DIRECT_ONLY
from pymatrices.algebra.solvers import (
    add,
    sub,
    scale,
    transpose,
    multiply,
    inverse,
)

__all__ = [
    "add",
    "sub",
    "scale",
    "transpose",
    "multiply",
    "inverse",
    "StrassenPolicy",
    "DEFAULT_POLICY",
    "DIRECT_ONLY",
]

"""
Shared compute infrastructure for PyMatrices.

Submodules:
    timing: Repeat-aware timing of benchmark cells
    tolerances: Tolerance tiers for comparing results
    precision: Numerical precision constants and utilities
"""

from pymatrices.core.compute.timing import Timer, cell_key
from pymatrices.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    CPU_FP64,
    STRASSEN_FP64,
    INVERSE_FP64,
    select_tolerance,
)
from pymatrices.core.compute.precision import EPSILON_64

__all__ = [
    # Timing
    "Timer",
    "cell_key",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "STRASSEN_FP64",
    "INVERSE_FP64",
    "select_tolerance",
    # Precision
    "EPSILON_64",
]

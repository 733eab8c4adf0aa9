"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different compute paths:
- Elementwise ops, transpose, direct product against itself: exact
- Direct product against another summation order: float64 rounding
- Strassen product against the direct product: relaxed, since the
  recursive scheme reorders and recombines partial sums
- Inversion round trips (A @ inv(A) against I): relaxed further

Used by Matrix.allclose, the benchmark harness and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# No arithmetic performed, or identical arithmetic in identical order
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bit-for-bit equality',
)

# Same algorithm, different summation order
CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='cpu_fp64',
    description='CPU double precision, summation order may differ',
)

# Strassen against the direct triple-loop product
STRASSEN_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='strassen_fp64',
    description='Recursive product against the direct product',
)

# A @ inv(A) against the identity, well-conditioned A
INVERSE_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='inverse_fp64',
    description='Gauss-Jordan round trip, well-conditioned input',
)


_BY_OPERATION = {
    'add': EXACT,
    'sub': EXACT,
    'scale': EXACT,
    'transpose': EXACT,
    'multiply': CPU_FP64,
    'strassen': STRASSEN_FP64,
    'inverse': INVERSE_FP64,
}


def select_tolerance(operation: str) -> ToleranceTier:
    """
    Select the tolerance tier for comparing results of an operation.

    Raises:
        KeyError: If the operation is unknown, listing the known ones
    """
    try:
        return _BY_OPERATION[operation]
    except KeyError:
        known = ", ".join(sorted(_BY_OPERATION))
        raise KeyError(
            f"No tolerance tier for operation {operation!r}. Known: {known}"
        ) from None

"""
Matrix product backends.

    direct: sequential-summation triple loop, any compatible shapes
    strassen: seven-product recursion for large square even operands
"""

from pymatrices.algebra.backends.direct import DirectProductBackend, direct_product
from pymatrices.algebra.backends.strassen import StrassenProductBackend, strassen_product

__all__ = [
    "DirectProductBackend",
    "StrassenProductBackend",
    "direct_product",
    "strassen_product",
]

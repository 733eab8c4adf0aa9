"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrices import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_pair():
    """The 2 x 2 pair used throughout the examples."""
    a = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    b = Matrix.from_rows([[5.0, 6.0], [7.0, 8.0]])
    return a, b


@pytest.fixture
def well_conditioned(rng):
    """Diagonally dominant 6 x 6 matrix (always invertible)."""
    n = 6
    data = rng.standard_normal((n, n)) + n * np.eye(n)
    return Matrix.from_array(data)


@pytest.fixture
def large_even_pair(rng):
    """Square 64 x 64 operands, large enough for the Strassen path."""
    n = 64
    return (
        Matrix.from_array(rng.standard_normal((n, n))),
        Matrix.from_array(rng.standard_normal((n, n))),
    )

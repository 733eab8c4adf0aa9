"""
Benchmarking harness.

Public API:
    benchmark_multiply(sizes)  - Time multiply() per StrassenPolicy
    benchmark_inverse(sizes)   - Time inverse() and record residuals
"""

from pymatrices.benchmarking.solution import BenchmarkParams, BenchmarkSolution
from pymatrices.benchmarking.harness import benchmark_multiply, benchmark_inverse

__all__ = [
    "benchmark_multiply",
    "benchmark_inverse",
    "BenchmarkParams",
    "BenchmarkSolution",
]

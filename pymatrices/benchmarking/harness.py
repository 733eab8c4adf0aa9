"""
Timing harness for multiply() and inverse().

Operands are filled with fill_random from one seeded generator, so a run
is reproducible given the seed (timings aside). Typical use is tuning the
Strassen cutover:

    sol = benchmark_multiply(
        [32, 64, 128],
        policies=(StrassenPolicy(threshold=32), StrassenPolicy(threshold=64), DIRECT_ONLY),
    )
    print(sol.summary())
"""

from __future__ import annotations

from typing import Iterable, Sequence
import warnings

import numpy as np

from pymatrices.core.compute.timing import Timer, cell_key
from pymatrices.core.compute.tolerances import select_tolerance
from pymatrices.core.exceptions import ValidationError
from pymatrices.core.result import Result
from pymatrices.core.validation import check_positive_int
from pymatrices.matrix import Matrix
from pymatrices.random import fill_random
from pymatrices.algebra.config import StrassenPolicy, DEFAULT_POLICY, DIRECT_ONLY
from pymatrices.algebra.solvers import multiply, inverse
from pymatrices.benchmarking.solution import BenchmarkParams, BenchmarkSolution


def _check_sizes(sizes: Iterable[int]) -> tuple[int, ...]:
    checked = tuple(check_positive_int(n, 'sizes') for n in sizes)
    if not checked:
        raise ValidationError("sizes: need at least one size")
    return checked


def _check_policies(policies: Sequence[StrassenPolicy]) -> tuple[StrassenPolicy, ...]:
    policies = tuple(policies)
    if not policies:
        raise ValidationError("policies: need at least one policy")
    for p in policies:
        if not isinstance(p, StrassenPolicy):
            raise ValidationError(
                f"policies: expected StrassenPolicy, got {type(p).__name__}"
            )
    names = [p.name for p in policies]
    if len(set(names)) != len(names):
        raise ValidationError(f"policies: duplicate policies {names}")
    return policies


def _random_square(n: int, rng: np.random.Generator) -> Matrix:
    m = Matrix(n)
    fill_random(m, rng)
    return m


def benchmark_multiply(
    sizes: Iterable[int],
    *,
    policies: Sequence[StrassenPolicy] = (DEFAULT_POLICY, DIRECT_ONLY),
    repeats: int = 3,
    seed: int | None = None,
) -> BenchmarkSolution:
    """
    Time multiply() on random n x n operands under each dispatch policy.

    Parameters
    ----------
    sizes : iterable of int
        Operand sizes n.
    policies : sequence of StrassenPolicy
        Variants to time. The first one is the reference for max_deviation.
    repeats : int
        Timed runs per (size, policy); the median is reported.
    seed : int, optional
        Seed for the operand generator.

    Returns
    -------
    BenchmarkSolution with one timing column per policy. A warning is
    recorded for every size where the products disagree by more than the
    Strassen tolerance tier.
    """
    sizes = _check_sizes(sizes)
    policies = _check_policies(policies)
    repeats = check_positive_int(repeats, 'repeats')
    rng = np.random.default_rng(seed)
    tolerance = select_tolerance('strassen')

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []
    medians = np.empty((len(sizes), len(policies)), dtype=np.float64)
    deviation = np.zeros(len(sizes), dtype=np.float64)

    for i, n in enumerate(sizes):
        a = _random_square(n, rng)
        b = _random_square(n, rng)
        products = []
        for j, policy in enumerate(policies):
            key = cell_key('multiply', n, policy.name)
            product = timer.run(key, lambda: multiply(a, b, policy=policy), repeats)
            medians[i, j] = timer.median(key)
            products.append(product.data)

        reference = products[0]
        scale = max(float(np.max(np.abs(reference))), np.finfo(np.float64).tiny)
        for other in products[1:]:
            deviation[i] = max(deviation[i], float(np.max(np.abs(other - reference))) / scale)
        if deviation[i] > tolerance.rtol:
            warnings_list.append(
                f"n={n}: products differ by {deviation[i]:.3e} "
                f"(tolerance {tolerance.rtol:.0e})"
            )

    timer.stop()

    params = BenchmarkParams(
        operation='multiply',
        sizes=sizes,
        labels=tuple(p.name for p in policies),
        median_seconds=medians,
        max_deviation=deviation,
    )
    result = Result(
        params=params,
        info={'operation': 'multiply', 'repeats': repeats, 'seed': seed},
        timing=timer.result(),
        backend_name='benchmark_multiply',
        warnings=tuple(warnings_list),
    )
    return BenchmarkSolution(_result=result)


def benchmark_inverse(
    sizes: Iterable[int],
    *,
    repeats: int = 3,
    seed: int | None = None,
) -> BenchmarkSolution:
    """
    Time inverse() on random n x n matrices.

    The residual max |A @ inv(A) - I| is recorded per size. Ill-conditioning
    warnings raised by inverse() are captured into the result's warnings
    instead of being re-emitted.

    Raises
    ------
    SingularMatrixError
        If a random matrix happens to be exactly singular.
    """
    sizes = _check_sizes(sizes)
    repeats = check_positive_int(repeats, 'repeats')
    rng = np.random.default_rng(seed)

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []
    medians = np.empty((len(sizes), 1), dtype=np.float64)
    residual = np.empty(len(sizes), dtype=np.float64)

    for i, n in enumerate(sizes):
        a = _random_square(n, rng)
        key = cell_key('inverse', n, 'gauss_jordan')
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            inv = timer.run(key, lambda: inverse(a), repeats)
        medians[i, 0] = timer.median(key)
        # One message per size is enough; every repeat sees the same input
        messages = sorted({str(w.message) for w in caught})
        warnings_list.extend(f"n={n}: {msg}" for msg in messages)

        product = multiply(a, inv)
        residual[i] = float(np.max(np.abs(product.data - np.eye(n))))

    timer.stop()

    params = BenchmarkParams(
        operation='inverse',
        sizes=sizes,
        labels=('gauss_jordan',),
        median_seconds=medians,
        max_deviation=residual,
    )
    result = Result(
        params=params,
        info={'operation': 'inverse', 'repeats': repeats, 'seed': seed},
        timing=timer.result(),
        backend_name='benchmark_inverse',
        warnings=tuple(warnings_list),
    )
    return BenchmarkSolution(_result=result)

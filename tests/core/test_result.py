"""
Tests for the Result envelope as the benchmarking harness uses it.

Covers:
    - BenchmarkParams payload carried through Result and BenchmarkSolution
    - timing must come from a stopped Timer ('total_seconds' present)
    - warnings captured by benchmark_inverse, looked up per size
    - provenance seen through BenchmarkSolution
"""

from dataclasses import FrozenInstanceError
import warnings

import numpy as np
import pytest

from pymatrices.benchmarking import (
    BenchmarkParams,
    BenchmarkSolution,
    benchmark_inverse,
    benchmark_multiply,
)
from pymatrices.benchmarking import harness
from pymatrices.core.exceptions import IllConditionedWarning, ValidationError
from pymatrices.core.result import Result


def _params(sizes=(4, 8)):
    return BenchmarkParams(
        operation='multiply',
        sizes=sizes,
        labels=('strassen_32', 'direct'),
        median_seconds=np.full((len(sizes), 2), 1e-3),
        max_deviation=np.zeros(len(sizes)),
    )


# ═══════════════════════════════════════════════════════════════════════
# Payload
# ═══════════════════════════════════════════════════════════════════════


class TestBenchmarkPayload:

    def test_solution_reads_payload(self):
        result = Result(
            params=_params(),
            info={'operation': 'multiply', 'repeats': 1, 'seed': 0},
            timing={'total_seconds': 0.01},
            backend_name='benchmark_multiply',
        )
        sol = BenchmarkSolution(_result=result)
        assert sol.sizes == (4, 8)
        assert sol.seconds(8, 'direct') == 1e-3
        assert sol.max_deviation.shape == (2,)

    def test_harness_payload_shapes(self):
        sol = benchmark_multiply([4, 6, 8], repeats=1, seed=0)
        params = sol._result.params
        assert isinstance(params, BenchmarkParams)
        assert params.median_seconds.shape == (len(params.sizes), len(params.labels))
        assert params.max_deviation.shape == (len(params.sizes),)

    def test_result_frozen(self):
        sol = benchmark_multiply([4], repeats=1, seed=0)
        with pytest.raises(FrozenInstanceError):
            sol._result.backend_name = 'other'

    def test_timing_requires_total(self):
        with pytest.raises(ValidationError, match="total_seconds"):
            Result(
                params=_params(),
                info={},
                timing={'multiply_n4_direct': 0.01},
                backend_name='benchmark_multiply',
            )

    def test_warning_list_stored_as_tuple(self):
        result = Result(
            params=_params(),
            info={},
            timing={'total_seconds': 0.01},
            backend_name='benchmark_multiply',
            warnings=['n=4: products differ by 1.000e-06 (tolerance 1e-10)'],
        )
        assert isinstance(result.warnings, tuple)


# ═══════════════════════════════════════════════════════════════════════
# Warnings per size
# ═══════════════════════════════════════════════════════════════════════


class TestCapturedWarnings:

    @pytest.fixture
    def warning_inverse(self, monkeypatch):
        """inverse() that always reports ill-conditioning."""
        real_inverse = harness.inverse

        def noisy(m):
            warnings.warn("pivot ratio 1.0e-17", IllConditionedWarning, stacklevel=2)
            return real_inverse(m)

        monkeypatch.setattr(harness, 'inverse', noisy)

    def test_benchmark_inverse_captures(self, warning_inverse):
        with warnings.catch_warnings():
            warnings.simplefilter("error", IllConditionedWarning)
            sol = benchmark_inverse([3, 5], repeats=3, seed=0)
        # One message per size, not per repeat
        assert sol.warnings == (
            "n=3: pivot ratio 1.0e-17",
            "n=5: pivot ratio 1.0e-17",
        )
        assert sol.warnings_for(5) == ("pivot ratio 1.0e-17",)

    def test_summary_lists_warnings(self, warning_inverse):
        sol = benchmark_inverse([3], repeats=1, seed=0)
        assert "Warning: n=3: pivot ratio" in sol.summary()

    def test_well_conditioned_run_has_none(self):
        sol = benchmark_inverse([4], repeats=1, seed=2)
        assert sol.warnings == ()
        assert sol.warnings_for(4) == ()

    def test_warnings_for_prefix_is_exact(self):
        result = Result(
            params=_params(sizes=(4, 40)),
            info={},
            timing={'total_seconds': 0.01},
            backend_name='benchmark_multiply',
            warnings=('n=40: products differ by 2.000e-09 (tolerance 1e-10)',),
        )
        assert result.warnings_for(4) == ()
        assert result.warnings_for(40) == ('products differ by 2.000e-09 (tolerance 1e-10)',)

    def test_warnings_for_unknown_size(self):
        sol = benchmark_multiply([4], repeats=1, seed=0)
        with pytest.raises(ValidationError, match="not benchmarked"):
            sol.warnings_for(7)


# ═══════════════════════════════════════════════════════════════════════
# Provenance
# ═══════════════════════════════════════════════════════════════════════


class TestProvenance:

    def test_versions_recorded(self):
        import pymatrices

        sol = benchmark_multiply([2], repeats=1, seed=0)
        assert sol.provenance['pymatrices_version'] == pymatrices.__version__
        assert sol.provenance['numpy_version'] == np.__version__
        assert 'python_version' in sol.provenance

    def test_runs_do_not_share_provenance(self):
        a = benchmark_inverse([2], repeats=1, seed=0)
        b = benchmark_inverse([2], repeats=1, seed=0)
        assert a.provenance == b.provenance
        assert a.provenance is not b.provenance

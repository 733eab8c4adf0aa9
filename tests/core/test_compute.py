"""
Tests for shared compute infrastructure: benchmark Timer, tolerance tiers, precision.
"""

import time

import numpy as np
import pytest

from pymatrices.core.compute import (
    CPU_FP64,
    EPSILON_64,
    EXACT,
    INVERSE_FP64,
    STRASSEN_FP64,
    Timer,
    cell_key,
    select_tolerance,
)
from pymatrices.core.compute.precision import pivot_ratio


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_run_records_each_repeat(self):
        timer = Timer()
        timer.start()
        calls = []
        value = timer.run('work', lambda: calls.append(1) or len(calls), repeats=3)
        timer.stop()
        assert value == 3
        assert len(timer.samples('work')) == 3
        assert all(s >= 0.0 for s in timer.samples('work'))

    def test_median_of_samples(self):
        timer = Timer()
        timer.start()
        timer.run('sleep', lambda: time.sleep(0.001), repeats=3)
        timer.stop()
        assert timer.median('sleep') >= 0.001
        assert timer.median('sleep') == float(np.median(timer.samples('sleep')))

    def test_repeated_key_appends(self):
        timer = Timer()
        timer.run('k', lambda: None, repeats=2)
        timer.run('k', lambda: None, repeats=1)
        assert len(timer.samples('k')) == 3

    def test_failing_call_not_recorded(self):
        timer = Timer()

        def boom():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            timer.run('failing', boom, repeats=2)
        with pytest.raises(KeyError, match="failing"):
            timer.samples('failing')

    def test_bad_repeats(self):
        with pytest.raises(ValueError, match="repeats"):
            Timer().run('k', lambda: None, repeats=0)

    def test_result_sums_cells(self):
        timer = Timer()
        timer.start()
        timer.run(cell_key('multiply', 4, 'direct'), lambda: time.sleep(0.001), repeats=2)
        timer.stop()
        result = timer.result()
        cell = result['multiply_n4_direct']
        assert cell == pytest.approx(sum(timer.samples('multiply_n4_direct')))
        assert result['total_seconds'] >= cell

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_cell_key(self):
        assert cell_key('inverse', 10, 'gauss_jordan') == 'inverse_n10_gauss_jordan'


# ═══════════════════════════════════════════════════════════════════════
# Tolerance tiers
# ═══════════════════════════════════════════════════════════════════════


class TestTolerances:

    def test_exact_is_zero(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0

    def test_tiers_ordered(self):
        assert CPU_FP64.rtol < STRASSEN_FP64.rtol <= INVERSE_FP64.rtol

    @pytest.mark.parametrize("operation", ['add', 'sub', 'scale', 'transpose'])
    def test_elementwise_ops_are_exact(self, operation):
        assert select_tolerance(operation) is EXACT

    def test_strassen_tier(self):
        assert select_tolerance('strassen') is STRASSEN_FP64

    def test_unknown_operation(self):
        with pytest.raises(KeyError, match="Known"):
            select_tolerance('determinant')


# ═══════════════════════════════════════════════════════════════════════
# Precision
# ═══════════════════════════════════════════════════════════════════════


class TestPrecision:

    def test_epsilon(self):
        assert EPSILON_64 == np.finfo(np.float64).eps

    def test_pivot_ratio(self):
        assert pivot_ratio(np.array([4.0, -2.0, 1.0])) == 0.25

    def test_pivot_ratio_all_zero(self):
        assert pivot_ratio(np.zeros(3)) == 0.0

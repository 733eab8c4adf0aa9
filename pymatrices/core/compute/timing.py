"""
Wall-clock timing for the benchmarking harness.

A benchmark cell is one (operation, size, label) triple run a number of
times. The Timer keeps the duration of every repeat so the harness can
report medians, and flattens to the dict stored in Result.timing:

    {'total_seconds': 0.41, 'multiply_n64_direct': 0.22, ...}

where each cell entry is the summed time of its repeats.
"""

import time
from typing import Any, Callable

import numpy as np


def cell_key(operation: str, n: int, label: str) -> str:
    """Timing key for one benchmark cell, e.g. 'multiply_n64_direct'."""
    return f"{operation}_n{n}_{label}"


class Timer:
    """
    Repeat-aware timer for benchmark cells.

    Usage:
        timer = Timer()
        timer.start()
        key = cell_key('multiply', 64, 'direct')
        product = timer.run(key, lambda: multiply(a, b, policy=DIRECT_ONLY), repeats=3)
        timer.stop()

        timer.median(key)   # seconds, median of the three runs
        timer.result()      # {'total_seconds': ..., 'multiply_n64_direct': ...}
    """

    def __init__(self):
        self._samples: dict[str, list[float]] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    def run(self, key: str, fn: Callable[[], Any], repeats: int) -> Any:
        """
        Call fn repeats times, recording each duration under key.

        Calling run again with the same key appends further samples.
        A call that raises is not recorded and the exception propagates.

        Returns:
            The value returned by the last call
        """
        if repeats < 1:
            raise ValueError(f"repeats: must be >= 1, got {repeats}")
        value = None
        for _ in range(repeats):
            start = time.perf_counter()
            value = fn()
            elapsed = time.perf_counter() - start
            self._samples.setdefault(key, []).append(elapsed)
        return value

    def samples(self, key: str) -> tuple[float, ...]:
        """Recorded durations for key, in run order."""
        if key not in self._samples:
            raise KeyError(f"No samples for {key!r}. Recorded: {sorted(self._samples)}")
        return tuple(self._samples[key])

    def median(self, key: str) -> float:
        return float(np.median(self.samples(key)))

    def result(self) -> dict[str, float]:
        """
        Flattened timings: 'total_seconds' plus the summed time per cell.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        for key, samples in self._samples.items():
            result[key] = float(sum(samples))
        return result

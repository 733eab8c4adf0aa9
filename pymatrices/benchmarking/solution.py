"""
Benchmark solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrices.core.result import Result
from pymatrices.core.exceptions import ValidationError


@dataclass(frozen=True)
class BenchmarkParams:
    """
    Parameter payload for a benchmark run.

    Attributes:
        operation: 'multiply' or 'inverse'
        sizes: Matrix sizes n (operands are n x n), in run order
        labels: One label per timed variant (policy name, or 'gauss_jordan')
        median_seconds: Median wall time per run, shape (len(sizes), len(labels))
        max_deviation: Per size. For multiply, the largest relative
            difference between the first variant's product and any other
            variant's. For inverse, max |A @ inv(A) - I|.
    """
    operation: str
    sizes: tuple[int, ...]
    labels: tuple[str, ...]
    median_seconds: NDArray[np.floating[Any]]
    max_deviation: NDArray[np.floating[Any]]


@dataclass
class BenchmarkSolution:
    """
    User-facing benchmark results.

    Wraps Result[BenchmarkParams] and provides convenient accessors.
    """
    _result: Result[BenchmarkParams]

    @property
    def operation(self) -> str:
        return self._result.params.operation

    @property
    def sizes(self) -> tuple[int, ...]:
        return self._result.params.sizes

    @property
    def labels(self) -> tuple[str, ...]:
        return self._result.params.labels

    @property
    def median_seconds(self) -> NDArray[np.floating[Any]]:
        """Median seconds per run, shape (n_sizes, n_labels)."""
        return self._result.params.median_seconds

    @property
    def max_deviation(self) -> NDArray[np.floating[Any]]:
        return self._result.params.max_deviation

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def warnings_for(self, size: int) -> tuple[str, ...]:
        """Warnings recorded at one size."""
        if size not in self.sizes:
            raise ValidationError(f"size: {size} not benchmarked. Available: {self.sizes}")
        return self._result.warnings_for(size)

    def seconds(self, size: int, label: str) -> float:
        """
        Median seconds for one (size, label) cell.

        Raises:
            ValidationError: If the size or label was not benchmarked
        """
        if size not in self.sizes:
            raise ValidationError(f"size: {size} not benchmarked. Available: {self.sizes}")
        if label not in self.labels:
            raise ValidationError(f"label: {label!r} not benchmarked. Available: {self.labels}")
        return float(self.median_seconds[self.sizes.index(size), self.labels.index(label)])

    def fastest(self, size: int) -> str:
        """Label with the smallest median time at this size."""
        if size not in self.sizes:
            raise ValidationError(f"size: {size} not benchmarked. Available: {self.sizes}")
        row = self.median_seconds[self.sizes.index(size)]
        return self.labels[int(np.argmin(row))]

    def summary(self) -> str:
        """Text table of median timings."""
        deviation_header = 'max dev' if self.operation == 'multiply' else 'residual'
        header = f"{'n':>6} " + " ".join(f"{label:>14}" for label in self.labels)
        header += f" {deviation_header:>12}"
        width = len(header)
        lines = [
            f"Benchmark: {self.operation}",
            "=" * width,
            f"Repeats: {self.info.get('repeats')}",
            "",
            header,
            "-" * width,
        ]
        for i, n in enumerate(self.sizes):
            cells = " ".join(f"{t * 1000:>12.3f}ms" for t in self.median_seconds[i])
            lines.append(f"{n:>6} {cells} {self.max_deviation[i]:>12.3e}")
        lines.append("-" * width)
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"BenchmarkSolution(operation={self.operation!r}, "
            f"sizes={self.sizes}, labels={self.labels})"
        )

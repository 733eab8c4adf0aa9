"""
Result envelope returned by the benchmarking harness.

A benchmark run produces a typed payload (BenchmarkParams) plus the
bookkeeping needed to compare runs later: the flattened Timer output,
the run configuration, per-size warnings and the library versions that
produced the numbers.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

import numpy as np

from pymatrices.core.exceptions import ValidationError

P = TypeVar('P')  # Payload type


def _default_provenance() -> dict[str, str]:
    """Versions in effect when a benchmark ran."""
    from pymatrices import __version__
    return {
        'pymatrices_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable benchmark envelope.

    Attributes:
        params: Measurement payload
        info: Run configuration (operation, repeats, seed)
        timing: Timer.result() output; must contain 'total_seconds'
        backend_name: Harness entry point that produced the result
        warnings: Messages of the form 'n=<size>: <text>'
        provenance: Library and interpreter versions, filled in automatically
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float]
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def __post_init__(self):
        if 'total_seconds' not in self.timing:
            raise ValidationError(
                f"timing: missing 'total_seconds', got keys {sorted(self.timing)}"
            )
        # Harness code collects warnings in a list
        object.__setattr__(self, 'warnings', tuple(self.warnings))

    def warnings_for(self, n: int) -> tuple[str, ...]:
        """Warnings recorded for operand size n, without the 'n=<size>: ' prefix."""
        prefix = f"n={n}: "
        return tuple(w[len(prefix):] for w in self.warnings if w.startswith(prefix))

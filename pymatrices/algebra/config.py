"""
Dispatch policy for matrix multiplication.

The recursive (Strassen) product only pays off above a hardware-dependent
size. The gate is a frozen dataclass so it can be benchmarked, tuned and
passed explicitly to multiply().
"""

from dataclasses import dataclass

from pymatrices.core.validation import check_positive_int


@dataclass(frozen=True)
class StrassenPolicy:
    """
    When multiply() hands square operands to the recursive product.

    Attributes:
        threshold: Operands must have more rows than this. The recursion
                   also falls back to the direct product once a block is
                   at or below this size.
        enabled: False forces the direct product for every input.
    """
    threshold: int = 32
    enabled: bool = True

    def __post_init__(self):
        check_positive_int(self.threshold, 'threshold')

    def applies(self, left_shape: tuple[int, int], right_shape: tuple[int, int]) -> bool:
        """
        Gate: enabled, both operands square and even, and larger than threshold.
        """
        if not self.enabled:
            return False
        n = left_shape[0]
        return (
            left_shape[0] == left_shape[1]
            and right_shape[0] == right_shape[1]
            and n % 2 == 0
            and right_shape[0] % 2 == 0
            and n > self.threshold
        )

    @property
    def name(self) -> str:
        if not self.enabled:
            return 'direct'
        return f'strassen_{self.threshold}'


# Default cutover: square, even, more than 32 rows
DEFAULT_POLICY = StrassenPolicy()

# Always use the direct triple-loop product
DIRECT_ONLY = StrassenPolicy(enabled=False)

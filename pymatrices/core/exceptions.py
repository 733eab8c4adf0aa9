"""
Exception hierarchy for PyMatrices.

All exceptions inherit from PyMatricesError to allow catching any
library-specific error. Callers tell failure kinds apart by class
(DimensionMismatchError, NonSquareError, SingularMatrixError), never by
matching on message text.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatricesError(Exception):
    """Base exception for all PyMatrices errors."""
    pass


class ValidationError(PyMatricesError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for shape problems. Use the subclasses below to tell an
    operand mismatch apart from a non-square inversion request.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible with the requested operation.

    Attributes:
        operation: Name of the operation that rejected the operands
        expected: Expected dimension (an int or a (rows, cols) pair)
        actual: Dimension that was found instead
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: int | tuple[int, int] | None = None,
        actual: int | tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class NonSquareError(DimensionError):
    """
    A square matrix was required but a rectangular one was given.

    Attributes:
        shape: Actual (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class MatrixIndexError(ValidationError, IndexError):
    """
    Element access outside the matrix bounds.

    Also an IndexError, so generic sequence code keeps working.

    Attributes:
        index: The (row, col) that was requested
        shape: The (rows, cols) of the matrix
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyMatricesError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when elimination cannot find a nonzero pivot in a column, or a
    diagonal entry is exactly zero when the rows are normalized.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        stage: Elimination stage that failed ('forward', 'backward',
               'normalization')
        pivot_index: Row/column index of the missing pivot
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        stage: str | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.stage = stage
        self.pivot_index = pivot_index


class IllConditionedWarning(RuntimeWarning):
    """
    Inversion succeeded but the pivots span a range close to machine precision.

    The returned inverse may be dominated by rounding error.
    """
    pass

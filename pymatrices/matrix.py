"""
Matrix: dense float64 container.

Owns a rectangular array of doubles with a fixed shape for its lifetime.
Every Matrix holds its own buffer; constructors copy their input and the
algebra engine always returns a freshly allocated Matrix.

Construction:
    Matrix(3)                       3 x 3 zeros
    Matrix(2, 4)                    2 x 4 zeros
    Matrix.from_rows([[1, 2], [3, 4]])
    Matrix.from_array(np_array)
    Matrix.identity(5)
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices.core.exceptions import MatrixIndexError, ValidationError
from pymatrices.core.compute.tolerances import ToleranceTier, CPU_FP64
from pymatrices.core.validation import (
    check_array,
    check_2d,
    check_non_empty,
    check_positive_int,
)


class Matrix:
    """
    Dense real matrix with (row, col) element access.

    Equality is structural: two matrices are equal when they have the same
    shape and exactly equal entries, with NaN equal to NaN in the same
    position. Matrices are mutable (set, swap_rows)
    and therefore unhashable.
    """

    __slots__ = ('_data',)

    def __init__(self, rows: int, cols: int | None = None):
        rows = check_positive_int(rows, 'rows')
        cols = rows if cols is None else check_positive_int(cols, 'cols')
        self._data = np.zeros((rows, cols), dtype=np.float64)

    # === Construction ===

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D array-like. The input is copied.

        Raises:
            ValidationError: If the input is non-numeric or has a zero dimension
            DimensionError: If the input is not 2D
        """
        data = check_array(array, 'array')
        check_2d(data, 'array')
        check_non_empty(data, 'array')
        return cls._from_owned(np.array(data, dtype=np.float64, copy=True, order='C'))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> Matrix:
        """
        Build a Matrix from a sequence of equal-length rows.

        Raises:
            ValidationError: If the rows are ragged, empty or non-numeric
        """
        rows = [list(r) for r in rows]
        if not rows:
            raise ValidationError("rows: need at least 1 row, got 0")
        lengths = {len(r) for r in rows}
        if len(lengths) > 1:
            raise ValidationError(
                f"rows: all rows must have the same length, got lengths {sorted(lengths)}"
            )
        return cls.from_array(rows)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Square identity matrix of the given size."""
        size = check_positive_int(size, 'size')
        return cls._from_owned(np.eye(size, dtype=np.float64))

    @classmethod
    def _from_owned(cls, data: NDArray[np.float64]) -> Matrix:
        """Adopt a freshly allocated 2D float64 buffer without copying."""
        matrix = cls.__new__(cls)
        matrix._data = np.ascontiguousarray(data, dtype=np.float64)
        return matrix

    # === Shape ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def is_even(self) -> bool:
        """True when the row count is even. Only meaningful for square matrices."""
        return self.rows % 2 == 0

    # === Element access ===

    def _check_index(self, row: int, col: int) -> None:
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise MatrixIndexError(
                    f"Matrix indices must be integers, got ({row!r}, {col!r})",
                    index=(row, col),
                    shape=self.shape,
                )
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise MatrixIndexError(
                f"Index ({row}, {col}) out of range for matrix of shape "
                f"{self.rows} x {self.cols}",
                index=(int(row), int(col)),
                shape=self.shape,
            )

    def get(self, row: int, col: int) -> float:
        """Entry at (row, col)."""
        self._check_index(row, col)
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite the entry at (row, col)."""
        self._check_index(row, col)
        try:
            self._data[row, col] = float(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"value: expected a real number, got {type(value).__name__} {value!r}"
            ) from e

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = self._unpack(index)
        return self.get(row, col)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = self._unpack(index)
        self.set(row, col, value)

    def _unpack(self, index: Any) -> tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise MatrixIndexError(
                f"Matrix index must be a (row, col) pair, got {index!r}",
                shape=self.shape,
            )
        return index

    def swap_rows(self, i: int, j: int) -> None:
        """Swap rows i and j in place."""
        self._check_index(i, 0)
        self._check_index(j, 0)
        if i != j:
            self._data[[i, j]] = self._data[[j, i]]

    # === Copies and views ===

    def copy(self) -> Matrix:
        """Deep copy."""
        return Matrix._from_owned(self._data.copy())

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the underlying (rows x cols) array."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_array(self) -> NDArray[np.float64]:
        """Independent copy of the entries as a numpy array."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        """Entries as nested Python lists, row by row."""
        return self._data.tolist()

    def __array__(self, dtype=None, copy=None):
        # The buffer is never handed out writable
        if copy is False:
            raise ValueError("Matrix cannot be converted to an array without copying")
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data, equal_nan=True)
        )

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: Matrix, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """
        Shape-aware approximate equality.

        Args:
            other: Matrix to compare with
            tolerance: Tier supplying rtol/atol (see core.compute.tolerances)

        Returns:
            False on shape mismatch, otherwise numpy.allclose under the tier
            (NaN matches NaN, as in ==)
        """
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol,
            equal_nan=True,
        ))

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"

    def __str__(self) -> str:
        return np.array2string(self._data, precision=6, suppress_small=True)

"""Dense matrices stored in row-major order."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any

import numpy as np

from .container import DataContainer
from .exceptions import LinxError, SizeError, check_bounds


class Matrix(DataContainer):
    """A matrix of ``rows`` by ``columns`` values, stored row after row.

    Arithmetic is element-wise.
    """

    def __init__(
        self,
        rows: int = 2,
        columns: int | None = None,
        values: Sequence[Any] | None = None,
        dtype: Any = None,
    ) -> None:
        rows = operator.index(rows)
        columns = rows if columns is None else operator.index(columns)
        if rows < 0 or columns < 0:
            raise ValueError(f"Matrix shape must not be negative, got ({rows}, {columns})")
        self._rows = rows
        self._columns = columns
        super().__init__(values, size=rows * columns, dtype=dtype)

    @classmethod
    def identity(cls, rows: int = 2, columns: int | None = None) -> "Matrix":
        """Create a floating-point matrix with ones on the diagonal and zeros elsewhere."""
        out = cls(rows, columns, dtype=float)
        out.as_array()[np.diag_indices(out.rank)] = 1
        return out

    @classmethod
    def diagonal(
        cls,
        values: Sequence[Any],
        rows: int | None = None,
        columns: int | None = None,
    ) -> "Matrix":
        """Create a matrix with given values on the diagonal and zeros elsewhere.

        The matrix is square of side ``len(values)`` by default.
        """
        values = list(values)
        rows = len(values) if rows is None else rows
        diagonal = np.asarray(values)
        out = cls(rows, columns, dtype=diagonal.dtype if values else float)
        if len(values) > out.rank:
            raise SizeError(len(values), out.rank)
        indices = np.arange(len(values))
        out.as_array()[indices, indices] = diagonal
        return out

    @property
    def rows(self) -> int:
        """The number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """The number of columns."""
        return self._columns

    @property
    def rank(self) -> int:
        """The length of the diagonal."""
        return min(self._rows, self._columns)

    def shape(self) -> tuple[int, int]:
        """Get the number of rows and columns."""
        return (self._rows, self._columns)

    def as_array(self) -> np.ndarray:
        """Get a two-dimensional view of the values."""
        return self.data.reshape(self._rows, self._columns)

    def _flat_index(self, key: Any) -> Any:
        if not isinstance(key, tuple):
            return key
        if len(key) != 2:
            raise IndexError(f"Expected a (row, column) pair, got {key!r}")
        row, column = (operator.index(k) for k in key)
        check_bounds("Row ", row, (0, self._rows - 1))
        check_bounds("Column ", column, (0, self._columns - 1))
        return column + self._columns * row

    def __getitem__(self, key: Any) -> Any:
        return super().__getitem__(self._flat_index(key))

    def __setitem__(self, key: Any, value: Any) -> None:
        super().__setitem__(self._flat_index(key), value)

    def _require_square(self) -> None:
        if self._rows != self._columns:
            raise ValueError(f"Matrix must be square, got shape ({self._rows}, {self._columns})")

    def determinant(self) -> float:
        """Compute the determinant of a square matrix."""
        self._require_square()
        return float(np.linalg.det(self.as_array().astype(float)))

    def inverse(self) -> "Matrix":
        """Invert a square matrix in place."""
        self._require_square()
        try:
            inverted = np.linalg.inv(self.as_array().astype(float))
        except np.linalg.LinAlgError as error:
            raise LinxError("Cannot invert a singular matrix") from error
        with np.errstate(all="ignore"):
            self.data[...] = inverted.reshape(-1).astype(self.dtype, copy=False)
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix) and other.shape() != self.shape():
            return False
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._columns}, {self.data.tolist()!r})"
"""Contiguous one-dimensional data containers with pixel-wise arithmetic."""

from __future__ import annotations

import copy
import operator
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

import numpy as np

from .exceptions import check_bounds, check_size


def _is_integral(lhs: np.ndarray, rhs: np.ndarray) -> bool:
    return bool(np.issubdtype(np.result_type(lhs, rhs), np.integer))


def _divide(lhs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """Divide element-wise, truncating towards zero for integers."""
    if _is_integral(lhs, rhs):
        if np.any(rhs == 0):
            raise ZeroDivisionError("integer division by zero")
        quotient = np.floor_divide(lhs, rhs)
        return quotient + ((quotient < 0) & (quotient * rhs != lhs))
    return np.true_divide(lhs, rhs)


def _modulo(lhs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """Compute the remainder element-wise, with the sign of the dividend."""
    if _is_integral(lhs, rhs) and np.any(rhs == 0):
        raise ZeroDivisionError("integer modulo by zero")
    return np.fmod(lhs, rhs)


class DataContainer:
    """A contiguous container of values with element-wise arithmetic.

    Values are stored in a one-dimensional NumPy array whose type is kept
    through arithmetic: results are cast back to it.
    Integer division truncates towards zero and the remainder takes the sign of the dividend.
    """

    def __init__(
        self,
        values: Iterable[Any] | None = None,
        size: int | None = None,
        dtype: Any = None,
        *,
        share: bool = False,
    ) -> None:
        if values is None:
            length = 0 if size is None else operator.index(size)
            if length < 0:
                raise ValueError(f"Size must not be negative, got {length}")
            data = np.zeros(length, dtype=float if dtype is None else dtype)
        elif share:
            if not isinstance(values, np.ndarray) or values.ndim != 1:
                raise ValueError("Only one-dimensional arrays can be shared")
            if dtype is not None and np.dtype(dtype) != values.dtype:
                raise ValueError(f"Cannot share an array of type {values.dtype} as {np.dtype(dtype)}")
            data = values
        else:
            if isinstance(values, DataContainer):
                values = values._data
            elif not isinstance(values, (np.ndarray, Sequence)):
                values = list(values)
            data = np.array(values, dtype=dtype).reshape(-1)
        if size is not None:
            check_size(len(data), operator.index(size))
        self._data = data

    @property
    def data(self) -> np.ndarray:
        """The underlying one-dimensional array (not a copy)."""
        return self._data

    @property
    def dtype(self) -> np.dtype:
        """The value type."""
        return self._data.dtype

    def at(self, index: int) -> Any:
        """Access an element with bound checking; negative indices count from the end."""
        length = len(self)
        i = operator.index(index)
        check_bounds(f"Index {i}", i, (-length, length - 1))
        return self[i if i >= 0 else i + length]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data.tolist())

    def __getitem__(self, index: Any) -> Any:
        value = self._data[index]
        if isinstance(value, np.generic):
            return value.item()
        return value

    def __setitem__(self, index: Any, value: Any) -> None:
        self._data[index] = value

    def move_to(self) -> np.ndarray:
        """Hand over the underlying array, leaving the container empty."""
        data = self._data
        self._data = np.empty(0, dtype=data.dtype)
        return data

    def _operand(self, other: Any) -> np.ndarray | None:
        if isinstance(other, (str, bytes)):
            return None
        if isinstance(other, DataContainer):
            array = other._data
        elif isinstance(other, (np.ndarray, Sequence)):
            array = np.asarray(other).reshape(-1)
        else:
            return np.asarray(other)
        check_size(len(array), len(self))
        return array

    def _evaluate(
        self, func: Callable[[np.ndarray, np.ndarray], np.ndarray], operand: np.ndarray, reflected: bool
    ) -> np.ndarray:
        lhs, rhs = (operand, self._data) if reflected else (self._data, operand)
        with np.errstate(all="ignore"):
            result = np.asarray(func(lhs, rhs))
            return result.astype(self._data.dtype, copy=False)

    def _derive(self, data: np.ndarray) -> "DataContainer":
        out = copy.copy(self)
        out._data = data
        return out

    def _binary(self, func: Callable, other: Any, reflected: bool = False) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._derive(self._evaluate(func, operand, reflected))

    def _inplace(self, func: Callable, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self._data[...] = self._evaluate(func, operand, False)
        return self

    def __add__(self, other: Any) -> Any:
        return self._binary(np.add, other)

    def __radd__(self, other: Any) -> Any:
        return self._binary(np.add, other, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary(np.subtract, other)

    def __rsub__(self, other: Any) -> Any:
        return self._binary(np.subtract, other, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary(np.multiply, other)

    def __rmul__(self, other: Any) -> Any:
        return self._binary(np.multiply, other, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary(_divide, other)

    def __mod__(self, other: Any) -> Any:
        return self._binary(_modulo, other)

    def __iadd__(self, other: Any) -> Any:
        return self._inplace(np.add, other)

    def __isub__(self, other: Any) -> Any:
        return self._inplace(np.subtract, other)

    def __imul__(self, other: Any) -> Any:
        return self._inplace(np.multiply, other)

    def __itruediv__(self, other: Any) -> Any:
        return self._inplace(_divide, other)

    def __imod__(self, other: Any) -> Any:
        return self._inplace(_modulo, other)

    def __neg__(self) -> "DataContainer":
        with np.errstate(all="ignore"):
            return self._derive(np.negative(self._data).astype(self._data.dtype, copy=False))

    def __pos__(self) -> "DataContainer":
        return self._derive(self._data.copy())

    def increment(self) -> "DataContainer":
        """Add one to each element, in place."""
        return self._inplace(np.add, 1)

    def decrement(self) -> "DataContainer":
        """Subtract one from each element, in place."""
        return self._inplace(np.subtract, 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataContainer):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r})"
"""N-dimensional rasters: contiguous pixel data with a shape."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable, Sequence
from typing import Any

import numpy as np

from .box import Box
from .container import DataContainer
from .exceptions import LinxError, check_bounds, check_size


class Raster(DataContainer):
    """Pixel data of an N-dimensional image.

    Values are stored contiguously, the first axis being the fastest:
    the raw index of position ``p`` is ``p[0] + shape[0] * (p[1] + shape[1] * (...))``.

    Elements can be accessed by raw index (``raster[i]``) or by position
    (``raster[x, y]`` or ``raster[(x, y)]``); `at` adds bound checking and backward indexing.
    """

    def __init__(
        self,
        shape: Sequence[int] = (0, 0),
        values: Iterable[Any] | None = None,
        dtype: Any = None,
        *,
        share: bool = False,
    ) -> None:
        self._shape = tuple(operator.index(s) for s in shape)
        if any(s < 0 for s in self._shape):
            raise ValueError(f"Raster shape must not be negative, got {self._shape}")
        super().__init__(values, size=math.prod(self._shape), dtype=dtype, share=share)

    def shape(self) -> tuple[int, ...]:
        """Get the length along each axis."""
        return self._shape

    def domain(self) -> Box:
        """Get the box which spans from the first to the last pixel position."""
        return Box.from_shape(self._shape)

    def dimension(self) -> int:
        """Get the number of axes."""
        return len(self._shape)

    def length(self, axis: int) -> int:
        """Get the length along a given axis."""
        return self._shape[axis]

    def contains(self, position: Sequence[float]) -> bool:
        """Check whether a (possibly non-integral) position lies inside the domain."""
        return all(0 <= p < s for p, s in zip(position, self._shape))

    def index(self, position: Sequence[int]) -> int:
        """Compute the raw index of a given position."""
        coordinates = tuple(operator.index(p) for p in position)
        check_size(len(coordinates), len(self._shape))
        result = 0
        for p, s in zip(reversed(coordinates), reversed(self._shape)):
            result = p + s * result
        return result

    def _key(self, key: Any) -> Any:
        if isinstance(key, (tuple, list)):
            return self.index(key)
        return key

    def __getitem__(self, key: Any) -> Any:
        return super().__getitem__(self._key(key))

    def __setitem__(self, key: Any, value: Any) -> None:
        super().__setitem__(self._key(key), value)

    def at(self, index: Any) -> Any:
        """Access an element by raw index or position, with bound checking.

        Negative indices or coordinates count backwards from the end.
        """
        if not isinstance(index, (tuple, list)):
            return super().at(index)
        check_size(len(index), len(self._shape))
        bounded = []
        for axis, (p, s) in enumerate(zip(index, self._shape)):
            p = operator.index(p)
            check_bounds(f"pos[{axis}]", p, (-s, s - 1))
            bounded.append(p + s if p < 0 else p)
        return self[tuple(bounded)]

    def is_contiguous(self, region: Box, dimension: int = 2) -> bool:
        """Check whether a region is contiguous in memory as a ``dimension``-D block.

        The axes below ``dimension - 1`` must be spanned fully,
        and the axes from ``dimension`` on must be flat.
        """
        check_size(region.dimension(), self.dimension())
        front, back = region.front, region.back
        for axis in range(dimension - 1):
            if front[axis] != 0 or back[axis] != self._shape[axis] - 1:
                return False
        return all(back[axis] == front[axis] for axis in range(dimension, self.dimension()))

    def slice(self, region: Box, dimension: int = 2) -> "Raster":
        """Create a ``dimension``-D view of a contiguous region, sharing the data."""
        if not 0 <= dimension <= self.dimension():
            raise ValueError(f"Slice dimension {dimension} not in [0, {self.dimension()}]")
        if not self.is_contiguous(region, dimension):
            raise LinxError("Cannot slice: Box is not contiguous.")
        if region.size() == 0 or not region <= self.domain():
            raise LinxError("Cannot slice: Box is not inside the raster domain.")
        shape = region.shape()[:dimension]
        start = self.index(region.front)
        return Raster(shape, self.data[start:start + math.prod(shape)], share=True)

    def section(self, index: int) -> "Raster":
        """Create a view of dimension N-1 at a given index along the last axis."""
        if not self._shape:
            raise LinxError("Cannot take a section of a raster of dimension 0.")
        last = self.dimension() - 1
        index = operator.index(index)
        check_bounds("Index ", index, (0, self._shape[last] - 1))
        front = [0] * self.dimension()
        back = [s - 1 for s in self._shape]
        front[last] = index
        back[last] = index
        return self.slice(Box(tuple(front), tuple(back)), last)

    def fill(self, value: Any) -> "Raster":
        """Set every pixel to a given value."""
        self.data.fill(value)
        return self

    def range(self, start: Any = 0, step: Any = 1) -> "Raster":
        """Fill the pixels with ``start``, ``start + step``, ``start + 2 * step``, etc."""
        with np.errstate(all="ignore"):
            values = np.arange(len(self)) * step + start
            self.data[...] = values.astype(self.dtype, copy=False) if self.dtype != object else values
        return self

    def _sources(self, args: Sequence[Iterable[Any]]) -> list[list[Any]]:
        sources = []
        for arg in args:
            values = list(arg)
            check_size(len(values), len(self))
            sources.append(values)
        return sources

    def _store(self, values: Iterable[Any]) -> None:
        for i, value in enumerate(values):
            self.data[i] = value

    def generate(self, func: Callable[..., Any], *args: Iterable[Any]) -> "Raster":
        """Set each pixel to ``func`` applied to the matching elements of ``args``."""
        sources = self._sources(args)
        if sources:
            self._store(func(*values) for values in zip(*sources))
        else:
            self._store(func() for _ in range(len(self)))
        return self

    def apply(self, func: Callable[..., Any], *args: Iterable[Any]) -> "Raster":
        """Set each pixel to ``func`` of its value and the matching elements of ``args``."""
        sources = self._sources(args)
        self._store([func(value, *others) for value, *others in zip(self, *sources)])
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raster):
            return NotImplemented
        if self._shape != other._shape or len(self) != len(other):
            return False
        return all(bool(a == b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Raster({self._shape!r}, {self.data.tolist()!r})"
"""Extrapolation and interpolation methods, and an interpolation decorator."""

from __future__ import annotations

import math
import operator
from collections.abc import Sequence
from typing import Any

from .box import Box, clamp_to_shape


def _integral(position: Sequence[Any]) -> tuple[int, ...]:
    return tuple(operator.index(p) for p in position)


class Constant:
    """Constant (Dirichlet) boundary conditions: a fixed value outside the domain."""

    def __init__(self, value: Any = 0) -> None:
        self.value = value

    def at(self, raster: Any, position: Sequence[int]) -> Any:
        """Get the pixel value, or the constant if the position is outside the domain."""
        position = _integral(position)
        return raster[position] if raster.contains(position) else self.value

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"


class Nearest:
    """Nearest-neighbour interpolation or extrapolation (zero-flux Neumann boundary conditions)."""

    def at(self, raster: Any, position: Sequence[int]) -> Any:
        """Get the value at the nearest in-domain position."""
        return raster[clamp_to_shape(_integral(position), raster.shape())]

    def interpolate(self, raster: Any, position: Sequence[float]) -> Any:
        """Get the value at the nearest integral position.

        Coordinates are shifted by one half and truncated towards zero.
        """
        return raster[tuple(int(p + 0.5) for p in position)]


class Periodic:
    """Periodic (wrap-around) boundary conditions."""

    def at(self, raster: Any, position: Sequence[int]) -> Any:
        """Get the value at the position taken modulo the shape."""
        shape = raster.shape()
        return raster[tuple(p % s for p, s in zip(_integral(position), shape))]


def _split_last(position: Sequence[float]) -> tuple[int, float, tuple[float, ...]]:
    last = position[-1]
    front = math.floor(last)
    return front, last - front, tuple(position[:-1])


class Linear:
    """Multilinear interpolation."""

    def interpolate(self, raster: Any, position: Sequence[float]) -> Any:
        """Compute the interpolated value at a non-integral position."""
        if not position:
            raise ValueError("Cannot interpolate at a position of dimension 0")
        return self._interpolate(raster, tuple(position), ())

    def _interpolate(self, raster: Any, position: tuple[float, ...], indices: tuple[int, ...]) -> Any:
        front, delta, rest = _split_last(position)

        def sample(i: int) -> Any:
            if rest:
                return self._interpolate(raster, rest, (i,) + indices)
            return raster[(i,) + indices]

        previous = sample(front)
        if delta == 0:
            return previous + 0.0
        following = sample(front + 1)
        return delta * (following - previous) + previous


class Cubic:
    """Multicubic interpolation."""

    def interpolate(self, raster: Any, position: Sequence[float]) -> Any:
        """Compute the interpolated value at a non-integral position."""
        if not position:
            raise ValueError("Cannot interpolate at a position of dimension 0")
        return self._interpolate(raster, tuple(position), ())

    def _interpolate(self, raster: Any, position: tuple[float, ...], indices: tuple[int, ...]) -> Any:
        front, d, rest = _split_last(position)

        def sample(i: int) -> Any:
            if rest:
                return self._interpolate(raster, rest, (i,) + indices)
            return raster[(i,) + indices]

        p = sample(front)
        if d == 0:
            return p + 0.0
        pp = sample(front - 1)
        n = sample(front + 1)
        nn = sample(front + 2)
        return p + 0.5 * (
            d * (-pp + n)
            + d * d * (2 * pp - 5 * p + 4 * n - nn)
            + d * d * d * (-pp + 3 * p - 3 * n + nn)
        )


class Interpolation:
    """Decorate a raster or an extrapolator with an interpolation method.

    Integral positions are read through ``[]``; non-integral positions through a call.
    If the parent is a raster, no bound checking is performed.
    """

    def __init__(self, parent: Any, method: Any = None) -> None:
        self.parent = parent
        self.method = Nearest() if method is None else method

    def shape(self) -> tuple[int, ...]:
        """Get the shape of the decorated data."""
        return self.parent.shape()

    def domain(self) -> Box:
        """Get the domain of the decorated data."""
        return self.parent.domain()

    def __getitem__(self, position: Any) -> Any:
        return self.parent[position]

    def __call__(self, position: Sequence[float]) -> Any:
        return self.method.interpolate(self.parent, position)

    def __repr__(self) -> str:
        return f"Interpolation({self.parent!r}, {self.method!r})"


def interpolation(parent: Any, method: Any = Nearest) -> Interpolation:
    """Make an interpolator with a given method, given as an instance or a class."""
    if isinstance(method, type):
        method = method()
    return Interpolation(parent, method)
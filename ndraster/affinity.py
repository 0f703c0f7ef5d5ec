"""Affine geometrical transforms (translation, scaling, rotation) and their application to rasters."""

from __future__ import annotations

import copy
import math
import numbers
import operator
from collections.abc import Sequence
from typing import Any

import numpy as np

from .box import Box
from .exceptions import LinxError, check_size
from .interpolation import Nearest, interpolation
from .raster import Raster


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _vector(values: Any) -> np.ndarray:
    return np.asarray([float(v) for v in values], dtype=float)


class _NearestEdge:
    """Read-only view of a raster where positions outside the domain take the nearest edge value."""

    def __init__(self, raster: Raster) -> None:
        self._raster = raster
        self._method = Nearest()

    @property
    def dtype(self) -> np.dtype:
        return self._raster.dtype

    def shape(self) -> tuple[int, ...]:
        return self._raster.shape()

    def domain(self) -> Box:
        return self._raster.domain()

    def contains(self, position: Sequence[float]) -> bool:
        return self._raster.contains(position)

    def __getitem__(self, position: Any) -> Any:
        if isinstance(position, (tuple, list)):
            return self._method.at(self._raster, position)
        return self._raster[position]


def _with_edges(data: Any) -> Any:
    return _NearestEdge(data) if isinstance(data, Raster) else data


class Affinity:
    """An affine transform ``y = a * (x - c) + b + c``.

    ``a`` is a linear map (square matrix), ``b`` a translation vector and ``c`` the center
    around which the linear map is applied. The transform is built up by composition.
    """

    def __init__(self, center: Sequence[float] | None = None, *, dimension: int = 2) -> None:
        origin = np.zeros(operator.index(dimension)) if center is None else _vector(center)
        size = len(origin)
        self._map = np.identity(size)
        self._translation = np.zeros(size)
        self._center = origin

    @classmethod
    def translation(cls, vector: Sequence[float]) -> "Affinity":
        """Create a translation by a given vector."""
        out = cls(dimension=len(vector))
        out += vector
        return out

    @classmethod
    def scaling(
        cls,
        factor: float | Sequence[float],
        center: Sequence[float] | None = None,
    ) -> "Affinity":
        """Create an isotropic (scalar factor) or arbitrary (vector of factors) scaling.

        Without a center, the dimension is that of the vector of factors, or 2 for a scalar factor.
        """
        if center is not None:
            out = cls(center)
        elif _is_scalar(factor):
            out = cls()
        else:
            out = cls(dimension=len(factor))  # type: ignore[arg-type]
        out *= factor
        return out

    @classmethod
    def rotation_rad(
        cls,
        angle: float,
        from_axis: int = 0,
        to_axis: int = 1,
        center: Sequence[float] | None = None,
    ) -> "Affinity":
        """Create a rotation by an angle in radians, from an axis towards another.

        Without a center, the rotation is around the origin of the smallest space holding both axes.
        """
        if center is not None:
            out = cls(center)
        else:
            out = cls(dimension=max(2, from_axis + 1, to_axis + 1))
        return out.rotate_rad(angle, from_axis, to_axis)

    @classmethod
    def rotation_deg(
        cls,
        angle: float,
        from_axis: int = 0,
        to_axis: int = 1,
        center: Sequence[float] | None = None,
    ) -> "Affinity":
        """Create a rotation by an angle in degrees, from an axis towards another."""
        return cls.rotation_rad(math.pi / 180.0 * angle, from_axis, to_axis, center)

    def dimension(self) -> int:
        """Get the number of axes."""
        return len(self._center)

    @property
    def linear_map(self) -> np.ndarray:
        """A copy of the linear map."""
        return self._map.copy()

    @property
    def translation_vector(self) -> tuple[float, ...]:
        """The translation vector."""
        return tuple(float(v) for v in self._translation)

    @property
    def center(self) -> tuple[float, ...]:
        """The center of the linear map."""
        return tuple(float(v) for v in self._center)

    def _operand(self, other: Any) -> float | np.ndarray | None:
        if _is_scalar(other):
            return float(other)
        if isinstance(other, (np.ndarray, Sequence)) and not isinstance(other, (str, bytes)):
            vector = _vector(other)
            check_size(len(vector), self.dimension())
            return vector
        return None

    def __iadd__(self, other: Any) -> "Affinity":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self._translation = self._translation + operand
        return self

    def __isub__(self, other: Any) -> "Affinity":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self._translation = self._translation - operand
        return self

    def __imul__(self, other: Any) -> "Affinity":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        # Right-multiplication by a diagonal matrix scales the columns.
        self._map = self._map * operand
        return self

    def __itruediv__(self, other: Any) -> "Affinity":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        if np.any(np.asarray(operand) == 0):
            raise ZeroDivisionError("Cannot scale by the inverse of a zero factor")
        self._map = self._map * (1.0 / np.asarray(operand))
        return self

    def _check_axis(self, axis: int) -> int:
        axis = operator.index(axis)
        if not 0 <= axis < self.dimension():
            raise IndexError(f"Axis {axis} not in [0, {self.dimension() - 1}]")
        return axis

    def rotate_rad(self, angle: float, from_axis: int = 0, to_axis: int = 1) -> "Affinity":
        """Rotate by an angle in radians from an axis towards another."""
        source = self._check_axis(from_axis)
        target = self._check_axis(to_axis)
        if angle != 0:
            rotation = np.identity(self.dimension())
            sin = math.sin(angle)
            cos = math.cos(angle)
            rotation[source, source] = cos
            rotation[source, target] = -sin
            rotation[target, source] = sin
            rotation[target, target] = cos
            self._map = self._map @ rotation
        return self

    def rotate_deg(self, angle: float, from_axis: int = 0, to_axis: int = 1) -> "Affinity":
        """Rotate by an angle in degrees from an axis towards another."""
        return self.rotate_rad(math.pi / 180.0 * angle, from_axis, to_axis)

    def invert(self) -> "Affinity":
        """Invert the transform in place."""
        try:
            inverted = np.linalg.inv(self._map)
        except np.linalg.LinAlgError as error:
            raise LinxError("Cannot invert a singular affinity") from error
        self._map = inverted
        self._translation = -(inverted @ self._translation)
        return self

    def __call__(self, vector: Sequence[float]) -> tuple[float, ...]:
        x = _vector(vector)
        check_size(len(x), self.dimension())
        y = self._translation + self._center + self._map @ (x - self._center)
        return tuple(float(v) for v in y)

    def warp(self, data: Any, method: Any = Nearest) -> Raster:
        """Apply the transform to some data with an interpolation method.

        The output has the shape of the input. Raster positions read outside
        the input domain take the nearest edge value.
        """
        out = Raster(data.shape(), dtype=getattr(data, "dtype", float))
        self.transform(interpolation(_with_edges(data), method), out)
        return out

    def transform(self, source: Any, out: Any) -> Any:
        """Fill each position of the output domain with the source interpolated at its antecedent."""
        backward = inverse(self)
        for position in out.domain():
            out[position] = source(backward(position))
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Affinity):
            return NotImplemented
        return (
            np.array_equal(self._map, other._map)
            and np.array_equal(self._translation, other._translation)
            and np.array_equal(self._center, other._center)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Affinity(map={self._map.tolist()!r}, translation={self._translation.tolist()!r}, "
            f"center={self._center.tolist()!r})"
        )


def center(data: Any) -> tuple[float, ...]:
    """Get the center of the domain of some data."""
    domain = data.domain()
    return tuple((f + b) / 2 for f, b in zip(domain.front, domain.back))


def inverse(affinity: Affinity) -> Affinity:
    """Create the inverse transform of an affinity."""
    return copy.deepcopy(affinity).invert()


def translate(data: Any, vector: Sequence[float], method: Any = Nearest) -> Raster:
    """Translate some data by a vector."""
    return Affinity.translation(vector).warp(data, method)


def scale(data: Any, factor: float, method: Any = Nearest) -> Raster:
    """Scale some data around its center."""
    return Affinity.scaling(factor, center(data)).warp(data, method)


def upsample(data: Any, factor: float, method: Any = Nearest, axes: int = 2) -> Raster:
    """Resample the first ``axes`` axes of some data by a factor; the output shape grows accordingly."""
    shape = data.shape()
    dim = len(shape)
    axes = operator.index(axes)
    if not 0 <= axes <= dim:
        raise ValueError(f"Number of sampled axes {axes} not in [0, {dim}]")
    factors = [float(factor)] * axes + [1.0] * (dim - axes)
    out_shape = tuple(int(s * factor) if axis < axes else s for axis, s in enumerate(shape))
    out = Raster(out_shape, dtype=getattr(data, "dtype", float))
    Affinity.scaling(factors).transform(interpolation(_with_edges(data), method), out)
    return out


def downsample(data: Any, factor: float, method: Any = Nearest, axes: int = 2) -> Raster:
    """Resample the first ``axes`` axes of some data by the inverse of a factor."""
    if factor == 0:
        raise ZeroDivisionError("Cannot downsample by a zero factor")
    return upsample(data, 1.0 / factor, method, axes)


def rotate_rad(data: Any, angle: float, method: Any = Nearest, from_axis: int = 0, to_axis: int = 1) -> Raster:
    """Rotate some data around its center by an angle in radians."""
    return Affinity.rotation_rad(angle, from_axis, to_axis, center(data)).warp(data, method)


def rotate_deg(data: Any, angle: float, method: Any = Nearest, from_axis: int = 0, to_axis: int = 1) -> Raster:
    """Rotate some data around its center by an angle in degrees."""
    return Affinity.rotation_deg(angle, from_axis, to_axis, center(data)).warp(data, method)
"""Raster construction shortcuts and pixel-wise complex-to-real functions."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import numpy as np

from .raster import Raster


def rasterize(data: Any, *args: int) -> Raster:
    """Create a raster from some data and a shape given as separate lengths.

    A NumPy array is shared: the raster is a view on its values.
    Other iterables are copied.
    A raster given without a shape is returned as is.
    """
    if isinstance(data, Raster) and not args:
        return data
    if isinstance(data, np.ndarray):
        return Raster(args, data.reshape(-1), share=True)
    if not isinstance(data, (list, tuple, Raster)) and isinstance(data, Iterable):
        data = list(data)
    return Raster(args, data)


def _complex_to_real(raster: Raster, func: Callable[[np.ndarray], np.ndarray]) -> Raster:
    values = np.asarray(func(raster.data))
    return Raster(raster.shape(), values, dtype=values.dtype)


def real(raster: Raster) -> Raster:
    """Get the real part of each pixel."""
    return _complex_to_real(raster, np.real)


def imag(raster: Raster) -> Raster:
    """Get the imaginary part of each pixel."""
    return _complex_to_real(raster, np.imag)


def absolute(raster: Raster) -> Raster:
    """Get the modulus of each pixel."""
    return _complex_to_real(raster, np.abs)


def arg(raster: Raster) -> Raster:
    """Get the phase angle of each pixel, in radians."""
    return _complex_to_real(raster, np.angle)


def norm(raster: Raster) -> Raster:
    """Get the squared modulus of each pixel."""
    return _complex_to_real(raster, lambda values: np.real(values) ** 2 + np.imag(values) ** 2)
"""Axis-aligned ND boxes with inclusive bounds."""

from __future__ import annotations

import itertools
import math
import numbers
import operator
import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from .exceptions import check_size

Position = tuple[int, ...]

_INFINITY = sys.maxsize


def _to_position(values: Iterable[int]) -> Position:
    return tuple(operator.index(v) for v in values)


def _extend_position(values: Sequence[int], dimension: int, padding: Sequence[int] | None = None) -> Position:
    values = _to_position(values)
    if len(values) > dimension:
        raise ValueError(f"Cannot extend a position of dimension {len(values)} to dimension {dimension}")
    pad = (0,) * dimension if padding is None else _to_position(padding)
    check_size(len(pad), dimension)
    return values + pad[len(values):]


@dataclass(frozen=True)
class Box:
    """An ND box defined by its front and back positions, both inclusive.

    Iteration yields positions in row-major order, the first axis being the fastest.
    """

    front: Position
    back: Position

    def __post_init__(self) -> None:
        front = _to_position(self.front)
        back = _to_position(self.back)
        check_size(len(back), len(front))
        object.__setattr__(self, "front", front)
        object.__setattr__(self, "back", back)

    @classmethod
    def from_shape(cls, shape: Sequence[int], front: Sequence[int] | None = None) -> "Box":
        """Create a box from a shape and an optional front (zero by default)."""
        shape = _to_position(shape)
        start = (0,) * len(shape) if front is None else _to_position(front)
        check_size(len(start), len(shape))
        return cls(start, tuple(f + s - 1 for f, s in zip(start, shape)))

    @classmethod
    def from_center(cls, radius: int = 1, center: Sequence[int] | None = None) -> "Box":
        """Create a box from a radius and a center (2D origin by default)."""
        middle = (0, 0) if center is None else _to_position(center)
        return cls(tuple(c - radius for c in middle), tuple(c + radius for c in middle))

    @classmethod
    def whole(cls, dimension: int = 2) -> "Box":
        """Create a conventionally unlimited box, from zero to infinity along each axis."""
        return cls((0,) * dimension, (_INFINITY,) * dimension)

    def dimension(self) -> int:
        """Get the number of axes."""
        return len(self.front)

    def shape(self) -> Position:
        """Get the length along each axis."""
        return tuple(b - f + 1 for f, b in zip(self.front, self.back))

    def size(self) -> int:
        """Get the number of positions in the box."""
        lengths = self.shape()
        if any(length <= 0 for length in lengths):
            return 0
        return math.prod(lengths)

    def length(self, axis: int) -> int:
        """Get the length along a given axis."""
        return self.back[axis] - self.front[axis] + 1

    def contains(self, position: Sequence[float]) -> bool:
        """Check whether a position lies inside the box."""
        return all(f <= p <= b for p, f, b in zip(position, self.front, self.back))

    def project(self, axis: int = 0) -> "Box":
        """Flatten the box along an axis: the back coordinate is set to the front one."""
        back = list(self.back)
        back[axis] = self.front[axis]
        return Box(self.front, tuple(back))

    def grow(self, margin: "Box") -> "Box":
        """Grow the box by a margin, whose missing trailing axes are zero."""
        dim = self.dimension()
        front = _extend_position(margin.front, dim)
        back = _extend_position(margin.back, dim)
        return Box(
            tuple(a + m for a, m in zip(self.front, front)),
            tuple(a + m for a, m in zip(self.back, back)),
        )

    def shrink(self, margin: "Box") -> "Box":
        """Shrink the box by a margin, whose missing trailing axes are zero."""
        return self.grow(-margin)

    def translate(self, vector: Sequence[int]) -> "Box":
        """Translate the box by a vector, whose missing trailing axes are zero."""
        shift = _extend_position(vector, self.dimension())
        return Box(
            tuple(a + s for a, s in zip(self.front, shift)),
            tuple(a + s for a, s in zip(self.back, shift)),
        )

    def __iter__(self) -> Iterator[Position]:
        ranges = [range(f, b + 1) for f, b in zip(self.front, self.back)]
        for reversed_position in itertools.product(*reversed(ranges)):
            yield reversed_position[::-1]

    def _same_dimension(self, other: "Box") -> None:
        check_size(other.dimension(), self.dimension())

    def __and__(self, other: "Box") -> "Box":
        if not isinstance(other, Box):
            return NotImplemented
        self._same_dimension(other)
        return Box(
            tuple(map(max, self.front, other.front)),
            tuple(map(min, self.back, other.back)),
        )

    def __or__(self, other: "Box") -> "Box":
        if not isinstance(other, Box):
            return NotImplemented
        self._same_dimension(other)
        return Box(
            tuple(map(min, self.front, other.front)),
            tuple(map(max, self.back, other.back)),
        )

    def __le__(self, other: "Box") -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        self._same_dimension(other)
        return all(f >= of for f, of in zip(self.front, other.front)) and all(
            b <= ob for b, ob in zip(self.back, other.back)
        )

    def __lt__(self, other: "Box") -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        self._same_dimension(other)
        return all(f > of for f, of in zip(self.front, other.front)) and all(
            b < ob for b, ob in zip(self.back, other.back)
        )

    def __ge__(self, other: "Box") -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return other <= self

    def __gt__(self, other: "Box") -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return other < self

    def __add__(self, other: "Box | Sequence[int] | int") -> "Box":
        if isinstance(other, Box):
            return self.grow(other)
        if isinstance(other, numbers.Integral):
            return self.translate((int(other),) * self.dimension())
        return self.translate(other)

    def __radd__(self, other: int) -> "Box":
        if isinstance(other, numbers.Integral):
            return self + other
        return NotImplemented

    def __sub__(self, other: "Box | Sequence[int] | int") -> "Box":
        if isinstance(other, Box):
            return self.shrink(other)
        if isinstance(other, numbers.Integral):
            return self + (-int(other))
        return self.translate(tuple(-operator.index(v) for v in other))

    def __neg__(self) -> "Box":
        return Box(tuple(-f for f in self.front), tuple(-b for b in self.back))

    def __pos__(self) -> "Box":
        return self


class BorderedBox:
    """A box split into an inner box and the bordering boxes of a margin."""

    def __init__(self, box: Box, margin: Box) -> None:
        margin = extend(margin, box.dimension())
        self.inner = box - margin
        fronts: deque[Box] = deque()
        backs: list[Box] = []
        current_front = list(self.inner.front)
        current_back = list(self.inner.back)
        for axis, (low, high) in enumerate(zip(margin.front, margin.back)):
            if low < 0:
                before_front, before_back = list(current_front), list(current_back)
                before_back[axis] = current_front[axis] - 1
                current_front[axis] += low
                before_front[axis] = current_front[axis]
                before = Box(tuple(before_front), tuple(before_back))
                if before.size() > 0:
                    fronts.appendleft(before)
            if high > 0:
                after_front, after_back = list(current_front), list(current_back)
                after_front[axis] = current_back[axis] + 1
                current_back[axis] += high
                after_back[axis] = current_back[axis]
                after = Box(tuple(after_front), tuple(after_back))
                if after.size() > 0:
                    backs.append(after)
        self.fronts: tuple[Box, ...] = tuple(fronts)
        self.backs: tuple[Box, ...] = tuple(backs)

    def apply_inner_border(
        self, inner_func: Callable[[Box], object], border_func: Callable[[Box], object]
    ) -> None:
        """Call ``border_func`` on the front borders, ``inner_func`` on the inner box, then on the back borders."""
        for region in self.fronts:
            border_func(region)
        if self.inner.size() > 0:
            inner_func(self.inner)
        for region in self.backs:
            border_func(region)


def clamp(position: Sequence[float], box: Box) -> tuple:
    """Clamp a position inside a box."""
    check_size(len(position), box.dimension())
    return tuple(min(max(p, f), b) for p, f, b in zip(position, box.front, box.back))


def clamp_to_shape(position: Sequence[float], shape: Sequence[int]) -> tuple:
    """Clamp a position inside the domain of a given shape."""
    check_size(len(position), len(shape))
    return tuple(min(max(p, 0), s - 1) for p, s in zip(position, shape))


def extend(box: Box, dimension: int, padding: Sequence[int] | None = None) -> Box:
    """Create a box of higher dimension, new axes being taken from ``padding`` (zero by default)."""
    return Box(_extend_position(box.front, dimension, padding), _extend_position(box.back, dimension, padding))


def _check_axis(axis: int, limit: int) -> None:
    if not 0 <= axis < limit:
        raise IndexError(f"Axis {axis} not in [0, {limit - 1}]")


def erase(box: Box, axis: int) -> Box:
    """Remove an axis."""
    _check_axis(axis, box.dimension())
    return Box(box.front[:axis] + box.front[axis + 1:], box.back[:axis] + box.back[axis + 1:])


def insert(box: Box, axis: int, front: int, back: int) -> Box:
    """Insert an axis with given front and back bounds."""
    _check_axis(axis, box.dimension() + 1)
    return Box(
        box.front[:axis] + (operator.index(front),) + box.front[axis:],
        box.back[:axis] + (operator.index(back),) + box.back[axis:],
    )
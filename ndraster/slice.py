"""Linear index spacing."""

from __future__ import annotations

from collections.abc import Iterator


def _truncated_division(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class Slice:
    """Indices from an included front to an included back, spaced by a step.

    The back given at construction is rounded towards the front
    to the last index reached by the step.
    """

    __slots__ = ("_front", "_step", "_size")

    def __init__(self, front: int, back: int, step: int = 1) -> None:
        if step == 0:
            raise ValueError("Slice step must not be zero")
        size = _truncated_division(back - front, step) + 1
        if size < 0:
            raise ValueError(f"Back index {back} cannot be reached from {front} with step {step}")
        self._front = front
        self._step = step
        self._size = size

    @classmethod
    def from_size(cls, front: int, size: int, step: int = 1) -> "Slice":
        """Make a slice from a front index, a number of indices and a step."""
        if size < 0:
            raise ValueError(f"Slice size must not be negative, got {size}")
        return cls(front, front + step * (size - 1), step)

    @property
    def front(self) -> int:
        """The included front index."""
        return self._front

    @property
    def step(self) -> int:
        """The distance between two consecutive indices."""
        return self._step

    def back(self) -> int:
        """Get the included back index."""
        return self._front + self._step * (self._size - 1)

    def size(self) -> int:
        """Get the number of indices."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter(range(self._front, self._front + self._step * self._size, self._step))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return (self._front, self._size, self._step) == (other._front, other._size, other._step)

    def __hash__(self) -> int:
        return hash((self._front, self._size, self._step))

    def __repr__(self) -> str:
        return f"Slice({self._front}, {self.back()}, {self._step})"
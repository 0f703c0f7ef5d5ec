"""Error types raised by the package and helpers that raise them."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


class LinxError(Exception):
    """Base of all errors raised directly by the package.

    The message is of the form ``"<prefix>: <message>"``.
    """

    def __init__(self, message: str, prefix: str = "Linx error") -> None:
        self.prefix = prefix
        self._text = f"{prefix}: {message}"
        super().__init__(self._text)

    def __str__(self) -> str:
        return self._text

    def append(self, line: str, indent: int = 0) -> "LinxError":
        """Append a line to the message, indented by two spaces per level."""
        self._text += "\n" + "  " * indent + line
        self.args = (self._text,)
        return self


class NullPtrError(LinxError, ValueError):
    """Raised when a required value is missing."""

    def __init__(self, message: str) -> None:
        super().__init__(message, prefix="Null pointer error")


class OutOfBoundsError(LinxError, IndexError):
    """Raised when a value lies outside given inclusive bounds.

    The message is of the form ``"<name><value> not in [<min>, <max>]"``.
    """

    def __init__(self, name: str, value: Any, bounds: tuple[Any, Any]) -> None:
        low, high = bounds
        self.name = name
        self.value = value
        self.bounds = (low, high)
        super().__init__(f"{name}{value} not in [{low}, {high}]", prefix="Out of bounds error")


class SizeError(LinxError, ValueError):
    """Raised when a size differs from the expected one."""

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"Expected {expected}, got {actual}", prefix="Size error")


def check_not_null(value: T | None, message: str) -> T:
    """Return ``value``, or raise `NullPtrError` if it is ``None``."""
    if value is None:
        raise NullPtrError(message)
    return value


def check_bounds(name: str, value: T, bounds: tuple[T, T]) -> T:
    """Return ``value``, or raise `OutOfBoundsError` if it lies outside the inclusive bounds."""
    low, high = bounds
    if value < low or value > high:  # type: ignore[operator]
        raise OutOfBoundsError(name, value, bounds)
    return value


def check_size(actual: int, expected: int) -> int:
    """Return ``actual``, or raise `SizeError` if it differs from ``expected``."""
    if actual != expected:
        raise SizeError(actual, expected)
    return actual
"""Integer arithmetic helpers with C-style division semantics."""

from __future__ import annotations

__all__ = ["add", "sub", "mul", "div"]


def add(x: int, y: int) -> int:
    """Return ``x + y``."""
    return x + y


def sub(x: int, y: int) -> int:
    """Return ``x - y``."""
    return x - y


def mul(x: int, y: int) -> int:
    """Return ``x * y``."""
    return x * y


def div(x: int, y: int) -> int:
    """Return ``x / y`` truncated toward zero.

    Raises ZeroDivisionError when ``y`` is zero.
    """
    if y == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient
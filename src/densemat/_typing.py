"""
densemat Type Definitions and Protocols.

The element type of a ``Matrix`` is any Python object. The arithmetic
methods additionally need ``+ - * /`` between two elements, which is
expressed by the ``SupportsArithmetic`` protocol. ``int``, ``float``,
``complex``, ``fractions.Fraction``, ``decimal.Decimal`` and NumPy
scalars all satisfy it.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Iterable,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    runtime_checkable,
)


# =============================================================================
# Protocol Definitions
# =============================================================================

@runtime_checkable
class SupportsArithmetic(Protocol):
    """Protocol for element types usable with the arithmetic methods."""

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __truediv__(self, other: Any) -> Any:
        ...


# =============================================================================
# Type Variables
# =============================================================================

T = TypeVar("T")
R = TypeVar("R")


# =============================================================================
# Type Aliases
# =============================================================================

Shape = Tuple[int, int]
Row = Tuple[T, ...]
RowsInput = Sequence[Iterable[T]]
Transform = Callable[[T], R]


def is_arithmetic(value: Any) -> bool:
    """
    Check whether ``value`` is a scalar supporting ``+ - * /``.

    Array-likes with ``ndim > 0`` (NumPy arrays and the like) implement the
    operators too but are not scalars, so they are rejected. NumPy scalars
    have ``ndim == 0`` and pass.
    """
    if getattr(value, "ndim", 0) != 0:
        return False
    return isinstance(value, SupportsArithmetic)


__all__ = [
    "SupportsArithmetic",
    "T",
    "R",
    "Shape",
    "Row",
    "RowsInput",
    "Transform",
    "is_arithmetic",
]

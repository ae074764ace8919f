"""
Error handling for densemat.

Every failure raised by the library derives from ``MatrixError`` and carries
a numeric code from the table below. Shape mismatches in ``matrix_add`` and
``matrix_multiply`` are NOT errors: those return ``None``. Only the operator
forms (``+``, ``-``, ``@``) raise ``ShapeMismatchError``.
"""

from __future__ import annotations

from numbers import Integral
from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

MATRIX_OK = 0

# General errors (1-9)
MATRIX_ERROR_UNKNOWN = 1

# Shape errors (10-19)
MATRIX_ERROR_INVALID_SHAPE = 10
MATRIX_ERROR_SHAPE_MISMATCH = 11
MATRIX_ERROR_EMPTY_ROWS = 12
MATRIX_ERROR_RAGGED_ROWS = 13

# Access errors (20-29)
MATRIX_ERROR_INDEX_OUT_OF_BOUNDS = 20
MATRIX_ERROR_UNINITIALIZED = 21


_ERROR_MESSAGES = {
    MATRIX_OK: "Success",
    MATRIX_ERROR_UNKNOWN: "Unknown error",
    MATRIX_ERROR_INVALID_SHAPE: "Invalid shape",
    MATRIX_ERROR_SHAPE_MISMATCH: "Shape mismatch",
    MATRIX_ERROR_EMPTY_ROWS: "Cannot build a matrix from an empty row sequence",
    MATRIX_ERROR_RAGGED_ROWS: "Rows have unequal lengths",
    MATRIX_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
    MATRIX_ERROR_UNINITIALIZED: "Matrix storage has not been allocated",
}


# =============================================================================
# Exception Classes
# =============================================================================

class MatrixError(Exception):
    """
    Base exception for all densemat errors.

    Subclasses fix ``default_code``; the message defaults to the entry in the
    code table when none is given.
    """

    default_code = MATRIX_ERROR_UNKNOWN

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        if code is None:
            code = self.default_code
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(message)

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MatrixError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return _CODE_TO_CLASS.get(code, cls)(msg, code)


class InvalidShapeError(MatrixError, ValueError):
    """Shape is negative or not an integer."""
    default_code = MATRIX_ERROR_INVALID_SHAPE


class ShapeMismatchError(MatrixError, ValueError):
    """Operands of a matrix operator have incompatible shapes."""
    default_code = MATRIX_ERROR_SHAPE_MISMATCH


class EmptyRowsError(MatrixError, ValueError):
    """``from_rows`` was given no rows."""
    default_code = MATRIX_ERROR_EMPTY_ROWS


class RaggedRowsError(MatrixError, ValueError):
    """``from_rows`` was given rows of different lengths."""
    default_code = MATRIX_ERROR_RAGGED_ROWS


class OutOfBoundsError(MatrixError, IndexError):
    """Write or read-modify-write outside the matrix."""
    default_code = MATRIX_ERROR_INDEX_OUT_OF_BOUNDS


class UninitializedMatrixError(MatrixError, RuntimeError):
    """Element access on a matrix created with ``Matrix.unfilled``."""
    default_code = MATRIX_ERROR_UNINITIALIZED


_CODE_TO_CLASS = {
    MATRIX_ERROR_INVALID_SHAPE: InvalidShapeError,
    MATRIX_ERROR_SHAPE_MISMATCH: ShapeMismatchError,
    MATRIX_ERROR_EMPTY_ROWS: EmptyRowsError,
    MATRIX_ERROR_RAGGED_ROWS: RaggedRowsError,
    MATRIX_ERROR_INDEX_OUT_OF_BOUNDS: OutOfBoundsError,
    MATRIX_ERROR_UNINITIALIZED: UninitializedMatrixError,
}


# =============================================================================
# Checking Functions
# =============================================================================

def check_shape(rows: int, cols: int) -> None:
    """
    Validate a (rows, cols) pair.

    Raises:
        InvalidShapeError: If either dimension is negative or not an integer
    """
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidShapeError(
                f"{name} must be an integer, got {type(value).__name__}"
            )
        if value < 0:
            raise InvalidShapeError(f"{name} must be non-negative, got {value}")


__all__ = [
    "MATRIX_OK",
    "MATRIX_ERROR_UNKNOWN",
    "MATRIX_ERROR_INVALID_SHAPE",
    "MATRIX_ERROR_SHAPE_MISMATCH",
    "MATRIX_ERROR_EMPTY_ROWS",
    "MATRIX_ERROR_RAGGED_ROWS",
    "MATRIX_ERROR_INDEX_OUT_OF_BOUNDS",
    "MATRIX_ERROR_UNINITIALIZED",
    "MatrixError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "EmptyRowsError",
    "RaggedRowsError",
    "OutOfBoundsError",
    "UninitializedMatrixError",
    "check_shape",
]

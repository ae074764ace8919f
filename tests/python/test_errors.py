"""
Tests for the error hierarchy.
"""

import pytest

from densemat import (
    EmptyRowsError,
    InvalidShapeError,
    MatrixError,
    OutOfBoundsError,
    RaggedRowsError,
    ShapeMismatchError,
    UninitializedMatrixError,
)
from densemat._errors import (
    MATRIX_ERROR_INDEX_OUT_OF_BOUNDS,
    MATRIX_ERROR_RAGGED_ROWS,
    MATRIX_ERROR_UNKNOWN,
    check_shape,
)


class TestMatrixError:
    """Test error codes and messages."""

    @pytest.mark.parametrize("cls,base", [
        (InvalidShapeError, ValueError),
        (ShapeMismatchError, ValueError),
        (EmptyRowsError, ValueError),
        (RaggedRowsError, ValueError),
        (OutOfBoundsError, IndexError),
        (UninitializedMatrixError, RuntimeError),
    ])
    def test_hierarchy(self, cls, base):
        """Test every error is a MatrixError and a builtin error."""
        err = cls()
        assert isinstance(err, MatrixError)
        assert isinstance(err, base)

    def test_default_message(self):
        """Test the message comes from the code table."""
        err = OutOfBoundsError()
        assert err.code == MATRIX_ERROR_INDEX_OUT_OF_BOUNDS
        assert err.message == "Index out of bounds"
        assert str(err) == "Index out of bounds"

    def test_custom_message(self):
        """Test an explicit message keeps the class code."""
        err = RaggedRowsError("row 3 is short")
        assert err.code == MATRIX_ERROR_RAGGED_ROWS
        assert str(err) == "row 3 is short"

    def test_from_code(self):
        """Test from_code picks the matching subclass."""
        err = MatrixError.from_code(MATRIX_ERROR_INDEX_OUT_OF_BOUNDS, "set")
        assert isinstance(err, OutOfBoundsError)
        assert err.message == "set: Index out of bounds"

    def test_from_unknown_code(self):
        """Test unknown codes fall back to the base class."""
        err = MatrixError.from_code(999)
        assert type(err) is MatrixError
        assert err.code == 999
        assert err.message == "Unknown error"

    def test_base_default_code(self):
        """Test the base class code."""
        assert MatrixError().code == MATRIX_ERROR_UNKNOWN


class TestCheckShape:
    """Test shape validation."""

    def test_valid(self):
        """Test valid shapes pass."""
        check_shape(0, 0)
        check_shape(3, 4)

    def test_negative(self):
        """Test negative dimensions name the axis."""
        with pytest.raises(InvalidShapeError, match="cols must be non-negative"):
            check_shape(1, -2)

    def test_non_integer(self):
        """Test float dimensions are rejected."""
        with pytest.raises(InvalidShapeError, match="rows must be an integer"):
            check_shape(2.0, 1)

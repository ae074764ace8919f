"""
Dense Matrix Storage

``Matrix`` keeps its cells in one flat Python list laid out row-major: the
cell at ``(row, col)`` lives at offset ``row * cols + col``. Every matrix
owns its list; no two matrices ever share one.

A matrix is in one of two states:

    filled    len(buffer) == rows * cols, every cell readable and writable
    unfilled  shape declared, buffer is None (see ``Matrix.unfilled``)

Any element access on an unfilled matrix raises
``UninitializedMatrixError``. ``fill()`` moves it to the filled state.

Example:
    >>> m = Matrix.from_rows([[1, 2], [3, 4]])
    >>> m.get(0, 1)
    2
    >>> m.set(1, 1, 10).get(1, 1)
    10
    >>> str(m)
    '\\n[  1  2 ]\\n[  3 10 ]\\n'
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple

from ._arithmetic import ArithmeticMixin
from ._config import config
from ._errors import (
    EmptyRowsError,
    OutOfBoundsError,
    RaggedRowsError,
    UninitializedMatrixError,
    check_shape,
)
from ._render import render
from ._typing import R, Row, RowsInput, Shape, T, Transform

logger = logging.getLogger("densemat.matrix")

_MISSING = object()

__all__ = ["Matrix"]


class Matrix(ArithmeticMixin, Generic[T]):
    """
    Fixed-shape dense matrix over a flat row-major buffer.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        default: Zero value of the element type; used for filling and
            for ``get_or_default``
    """

    __slots__ = ("_rows", "_cols", "_data", "_default")

    # Opt out of NumPy ufunc dispatch so a NumPy scalar on the left falls
    # back to the reflected operators instead of broadcasting over us.
    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int, default: Any = 0):
        """
        Allocate a ``rows x cols`` matrix with every cell set to ``default``.

        Args:
            rows: Number of rows (>= 0)
            cols: Number of columns (>= 0)
            default: Value of every cell; treated as immutable

        Raises:
            InvalidShapeError: If rows or cols is negative or not an integer
        """
        check_shape(rows, cols)
        self._rows = rows
        self._cols = cols
        self._default = default
        self._data: Optional[List[T]] = [default] * (rows * cols)

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def filled(cls, rows: int, cols: int, default: Any = 0) -> "Matrix[T]":
        """Create a ready-to-use matrix with every cell set to ``default``."""
        return cls(rows, cols, default)

    @classmethod
    def unfilled(cls, rows: int, cols: int, default: Any = 0) -> "Matrix[T]":
        """
        Declare a shape without allocating storage.

        The result cannot be read, written, iterated or rendered until
        ``fill()`` is called. Use ``filled`` for a usable zero matrix.
        """
        check_shape(rows, cols)
        logger.debug("declared unfilled %dx%d matrix", rows, cols)
        return cls._from_buffer(rows, cols, None, default)

    @classmethod
    def from_rows(cls, rows: RowsInput[T], default: Any = 0) -> "Matrix[T]":
        """
        Build a matrix from a sequence of rows.

        The row count is the length of ``rows`` and the column count the
        length of the first row. The values are copied in order.

        Raises:
            EmptyRowsError: If ``rows`` is empty
            RaggedRowsError: If any row length differs from the first

        Example:
            >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).shape
            (2, 3)
        """
        materialized = [list(row) for row in rows]
        if not materialized:
            raise EmptyRowsError()

        ncols = len(materialized[0])
        for i, row in enumerate(materialized):
            if len(row) != ncols:
                raise RaggedRowsError(
                    f"Row {i} has {len(row)} values, expected {ncols}"
                )

        data = [value for row in materialized for value in row]
        return cls._from_buffer(len(materialized), ncols, data, default)

    @classmethod
    def _from_buffer(
        cls, rows: int, cols: int, data: Optional[List[Any]], default: Any
    ) -> "Matrix[Any]":
        # Internal: takes ownership of ``data`` without validation.
        mat = cls.__new__(cls)
        mat._rows = rows
        mat._cols = cols
        mat._data = data
        mat._default = default
        return mat

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def shape(self) -> Shape:
        """Matrix dimensions (rows, cols)."""
        return (self._rows, self._cols)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def nrows(self) -> int:
        """Alias for ``rows``."""
        return self._rows

    @property
    def ncols(self) -> int:
        """Alias for ``cols``."""
        return self._cols

    @property
    def size(self) -> int:
        """Total number of cells (rows * cols)."""
        return self._rows * self._cols

    @property
    def default(self) -> Any:
        """Zero value used for filling and missing cells."""
        return self._default

    @property
    def is_filled(self) -> bool:
        """Whether storage has been allocated."""
        return self._data is not None

    # =========================================================================
    # Indexing
    # =========================================================================

    def offset(self, row: int, col: int) -> int:
        """Linear buffer offset of ``(row, col)``. Performs no validation."""
        return row * self._cols + col

    def bounds_check(self, row: int, col: int) -> bool:
        """Whether ``0 <= row < rows`` and ``0 <= col < cols``."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _buffer(self) -> List[T]:
        if self._data is None:
            raise UninitializedMatrixError(
                f"{self._rows}x{self._cols} matrix has no storage; call fill() first"
            )
        return self._data

    def _locate(self, row: int, col: int) -> Optional[int]:
        data = self._buffer()
        if config.strict:
            if not self.bounds_check(row, col):
                return None
            return self.offset(row, col)

        # FLAT mode: only the buffer length is consulted
        idx = self.offset(row, col)
        if 0 <= idx < len(data):
            return idx
        return None

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, row: int, col: int) -> Optional[T]:
        """Value at ``(row, col)``, or ``None`` if the cell does not exist."""
        idx = self._locate(row, col)
        if idx is None:
            return None
        return self._data[idx]

    def get_or_default(self, row: int, col: int) -> T:
        """Value at ``(row, col)``, or ``default`` if the cell does not exist."""
        idx = self._locate(row, col)
        if idx is None:
            return self._default
        return self._data[idx]

    def set(self, row: int, col: int, value: T) -> "Matrix[T]":
        """
        Write ``value`` at ``(row, col)``.

        Returns:
            self, so writes can be chained

        Raises:
            OutOfBoundsError: If the cell does not exist
        """
        idx = self._locate(row, col)
        if idx is None:
            raise OutOfBoundsError()
        self._data[idx] = value
        return self

    def apply(self, row: int, col: int, transform: Callable[[T], T]) -> "Matrix[T]":
        """
        Replace the value at ``(row, col)`` with ``transform(value)``.

        Raises:
            OutOfBoundsError: If the cell does not exist
        """
        idx = self._locate(row, col)
        if idx is None:
            raise OutOfBoundsError()
        self._data[idx] = transform(self._data[idx])
        return self

    def fill(self, value: Any = _MISSING) -> "Matrix[T]":
        """
        Set every cell to ``value`` (``default`` when omitted), in place.

        Allocates storage for an unfilled matrix.
        """
        if value is _MISSING:
            value = self._default
        if self._data is None:
            logger.debug("allocating storage for %dx%d matrix", self._rows, self._cols)
        self._data = [value] * self.size
        return self

    def __getitem__(self, key: Tuple[int, int]) -> T:
        """Get element at (row, col)."""
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Index must be (row, col) tuple")
        idx = self._locate(*key)
        if idx is None:
            raise OutOfBoundsError()
        return self._data[idx]

    def __setitem__(self, key: Tuple[int, int], value: T) -> None:
        """Set element at (row, col)."""
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Index must be (row, col) tuple")
        self.set(key[0], key[1], value)

    # =========================================================================
    # Transformation
    # =========================================================================

    def map(self, transform: Transform[T, R], default: Any = _MISSING) -> "Matrix[R]":
        """
        New matrix of the same shape holding ``transform(x)`` for every cell.

        Args:
            transform: Applied to each value in buffer order
            default: Zero value of the result; inherited from ``self`` when
                omitted. Pass it when ``transform`` changes the element type.
        """
        data = [transform(value) for value in self._buffer()]
        if default is _MISSING:
            default = self._default
        return type(self)._from_buffer(self._rows, self._cols, data, default)

    def copy(self) -> "Matrix[T]":
        """Shallow copy: a new buffer holding the same element objects."""
        data = None if self._data is None else list(self._data)
        return type(self)._from_buffer(self._rows, self._cols, data, self._default)

    # =========================================================================
    # Row Iteration
    # =========================================================================

    def iter_rows(self) -> Iterator[Row[T]]:
        """
        Iterate over the rows in order, each as a tuple of ``cols`` values.

        Every call returns a fresh iterator over exactly ``rows`` rows.
        """
        return self._iter_rows(self._buffer())

    def _iter_rows(self, data: List[T]) -> Iterator[Row[T]]:
        cols = self._cols
        for r in range(self._rows):
            start = r * cols
            yield tuple(data[start:start + cols])

    def row_at(self, i: int) -> Optional[Row[T]]:
        """Row ``i`` as a tuple, or ``None`` if it does not exist."""
        data = self._buffer()
        if not 0 <= i < self._rows:
            return None
        start = i * self._cols
        return tuple(data[start:start + self._cols])

    def tolist(self) -> List[List[T]]:
        """Rows as a list of lists."""
        return [list(row) for row in self.iter_rows()]

    def __iter__(self) -> Iterator[Row[T]]:
        return self.iter_rows()

    def __len__(self) -> int:
        return self._rows

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        if self._data is None:
            return f"Matrix(shape={self.shape}, unfilled)"
        return f"Matrix(shape={self.shape}, data={self.tolist()})"

    def __str__(self) -> str:
        return render(self)

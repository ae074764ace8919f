"""
Arithmetic on matrices.

Scalar operations go through ``Matrix.map`` and always succeed. The
matrix-to-matrix operations return ``None`` when the shapes do not fit;
the operator forms (``+``, ``-``, ``@``) raise ``ShapeMismatchError``
instead. Every result is a new matrix with its own storage.

The element type must support ``+ - * /`` (see ``SupportsArithmetic``).
"""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Any, Callable, Optional

from ._config import MultiplyGuard, config
from ._errors import ShapeMismatchError
from ._typing import is_arithmetic

if TYPE_CHECKING:
    from ._matrix import Matrix

logger = logging.getLogger("densemat.ops")

__all__ = ["ArithmeticMixin"]


class ArithmeticMixin:
    """Scalar and matrix arithmetic for ``Matrix``."""

    __slots__ = ()

    # =========================================================================
    # Scalar Operations
    # =========================================================================

    def add_scalar(self, value: Any) -> "Matrix":
        """Add ``value`` to every cell."""
        return self.map(lambda x: x + value)

    def sub_scalar(self, value: Any) -> "Matrix":
        """Subtract ``value`` from every cell."""
        return self.map(lambda x: x - value)

    def mul_scalar(self, value: Any) -> "Matrix":
        """Multiply every cell by ``value``."""
        return self.map(lambda x: x * value)

    def div_scalar(self, value: Any) -> "Matrix":
        """Divide every cell by ``value``."""
        return self.map(lambda x: x / value)

    # =========================================================================
    # Matrix Operations
    # =========================================================================

    def matrix_add(self, other: "Matrix") -> Optional["Matrix"]:
        """Elementwise sum, or ``None`` if the shapes differ."""
        return self._elementwise(other, operator.add, "add")

    def matrix_sub(self, other: "Matrix") -> Optional["Matrix"]:
        """Elementwise difference, or ``None`` if the shapes differ."""
        return self._elementwise(other, operator.sub, "subtract")

    def _elementwise(
        self, other: "Matrix", op: Callable[[Any, Any], Any], name: str
    ) -> Optional["Matrix"]:
        if self.shape != other.shape:
            logger.debug("cannot %s %s and %s matrices", name, self.shape, other.shape)
            return None
        data = [op(x, y) for x, y in zip(self._buffer(), other._buffer())]
        return type(self)._from_buffer(self.rows, self.cols, data, self.default)

    def matrix_multiply(self, other: "Matrix") -> Optional["Matrix"]:
        """
        Matrix product ``self x other``, or ``None`` if the shapes do not fit.

        With ``MultiplyGuard.STANDARD`` (default) the product needs
        ``self.cols == other.rows`` and has shape ``(self.rows, other.cols)``.
        With ``MultiplyGuard.EQUAL_SHAPE`` both operands must have the same
        shape; the inner loop runs over ``other.rows`` and cells that do not
        exist in ``self`` read as ``default``.

        Example:
            >>> a = Matrix.from_rows([[1, 2, 3]])
            >>> b = Matrix.from_rows([[1], [1], [1]])
            >>> a.matrix_multiply(b).tolist()
            [[6]]
        """
        if config.multiply.guard == MultiplyGuard.STANDARD:
            if self.cols != other.rows:
                logger.debug("cannot multiply %s by %s matrix", self.shape, other.shape)
                return None
        elif self.shape != other.shape:
            logger.debug(
                "cannot multiply %s by %s matrix (equal shapes required)",
                self.shape, other.shape,
            )
            return None

        # Unfilled operands fail here, before any allocation
        self._buffer()
        other._buffer()

        result = type(self).filled(self.rows, other.cols, self.default)
        for i in range(self.rows):
            for j in range(other.cols):
                for k in range(other.rows):
                    prod = self.get_or_default(i, k) * other.get_or_default(k, j)
                    result.apply(i, j, lambda acc: acc + prod)
        return result

    # =========================================================================
    # Operators
    # =========================================================================

    def _check_result(self, result: Optional["Matrix"], other: "Matrix", symbol: str) -> "Matrix":
        if result is None:
            raise ShapeMismatchError(
                f"operands could not be combined with '{symbol}': "
                f"{self.shape} and {other.shape}"
            )
        return result

    def __add__(self, other: Any) -> "Matrix":
        if isinstance(other, ArithmeticMixin):
            return self._check_result(self.matrix_add(other), other, "+")
        if is_arithmetic(other):
            return self.add_scalar(other)
        return NotImplemented

    def __radd__(self, other: Any) -> "Matrix":
        if is_arithmetic(other):
            return self.map(lambda x: other + x)
        return NotImplemented

    def __sub__(self, other: Any) -> "Matrix":
        if isinstance(other, ArithmeticMixin):
            return self._check_result(self.matrix_sub(other), other, "-")
        if is_arithmetic(other):
            return self.sub_scalar(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> "Matrix":
        if is_arithmetic(other):
            return self.map(lambda x: other - x)
        return NotImplemented

    def __mul__(self, other: Any) -> "Matrix":
        # Matrix * Matrix is undefined; products use ``@``.
        if isinstance(other, ArithmeticMixin) or not is_arithmetic(other):
            return NotImplemented
        return self.mul_scalar(other)

    def __rmul__(self, other: Any) -> "Matrix":
        if isinstance(other, ArithmeticMixin) or not is_arithmetic(other):
            return NotImplemented
        return self.map(lambda x: other * x)

    def __truediv__(self, other: Any) -> "Matrix":
        if isinstance(other, ArithmeticMixin) or not is_arithmetic(other):
            return NotImplemented
        return self.div_scalar(other)

    def __matmul__(self, other: Any) -> "Matrix":
        if not isinstance(other, ArithmeticMixin):
            return NotImplemented
        return self._check_result(self.matrix_multiply(other), other, "@")

    def __neg__(self) -> "Matrix":
        return self.map(operator.neg)

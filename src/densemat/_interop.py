"""
Conversion between ``Matrix`` and NumPy / SciPy.

Conversions always copy: a ``Matrix`` never shares storage with an array.
NumPy and SciPy are optional (``pip install densemat[interop]``) and are
imported only when a conversion is called.

Example:
    >>> import numpy as np
    >>> m = from_numpy(np.arange(6).reshape(2, 3))
    >>> m.shape
    (2, 3)
    >>> to_numpy(m).sum()
    15
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ._matrix import Matrix

if TYPE_CHECKING:
    import numpy as np

__all__ = ["from_numpy", "to_numpy", "from_scipy", "to_scipy"]


def from_numpy(arr: Any, default: Any = 0) -> Matrix:
    """
    Create a Matrix from a NumPy array (or anything ``np.asarray`` accepts).

    1D input is treated as an (n, 1) column vector.

    Raises:
        ValueError: If the array has more than 2 dimensions
    """
    try:
        import numpy as np
    except ImportError:
        raise ImportError("numpy required for from_numpy()")

    arr = np.asarray(arr)
    if arr.ndim == 1:
        rows, cols = arr.shape[0], 1
    elif arr.ndim == 2:
        rows, cols = arr.shape
    else:
        raise ValueError(f"Expected 1D or 2D array, got {arr.ndim}D")

    return Matrix._from_buffer(rows, cols, arr.reshape(-1).tolist(), default)


def to_numpy(matrix: Matrix, dtype: Optional[Any] = None) -> "np.ndarray":
    """Copy a Matrix into a 2D NumPy array of shape ``matrix.shape``."""
    try:
        import numpy as np
    except ImportError:
        raise ImportError("numpy required for to_numpy()")

    return np.array(matrix.tolist(), dtype=dtype).reshape(matrix.shape)


def from_scipy(mat: Any, default: Any = 0) -> Matrix:
    """
    Create a dense Matrix from any ``scipy.sparse`` matrix or array.

    Raises:
        TypeError: If ``mat`` is not a scipy sparse object
    """
    try:
        import scipy.sparse as sp
    except ImportError:
        raise ImportError("scipy required for from_scipy()")

    if not sp.issparse(mat):
        raise TypeError(f"Expected a scipy.sparse matrix, got {type(mat).__name__}")
    return from_numpy(mat.toarray(), default)


def to_scipy(matrix: Matrix, format: str = "csr") -> Any:
    """
    Convert a Matrix to a scipy sparse matrix.

    Args:
        matrix: Source matrix
        format: 'csr' or 'csc'

    Returns:
        scipy.sparse.csr_matrix or csc_matrix
    """
    try:
        import scipy.sparse as sp
    except ImportError:
        raise ImportError("scipy required for to_scipy()")

    if format == "csr":
        return sp.csr_matrix(to_numpy(matrix))
    if format == "csc":
        return sp.csc_matrix(to_numpy(matrix))
    raise ValueError(f"format must be 'csr' or 'csc', got {format!r}")

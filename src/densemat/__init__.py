"""
densemat - Lightweight Dense Matrices

A small generic dense-matrix container for callers that need a numeric
grid without pulling in a full linear-algebra library:

- Fixed-shape row-major storage with bounds-checked element access
- Functional ``map`` and in-place ``apply``
- Scalar arithmetic, elementwise addition and matrix multiplication
- Aligned text rendering
- NumPy / SciPy conversion

Example:
    >>> import densemat
    >>> a = densemat.Matrix.from_rows([[1, 2], [3, 4]])
    >>> (a @ a).tolist()
    [[7, 10], [15, 22]]
    >>> a.matrix_add(densemat.Matrix(3, 2)) is None
    True
"""

__version__ = '0.1.0'

from ._config import (
    Align,
    IndexingConfig,
    IndexingMode,
    MatrixConfig,
    MultiplyConfig,
    MultiplyGuard,
    RenderConfig,
    config,
    get_config,
    set_indexing,
    set_multiply_guard,
)
from ._errors import (
    EmptyRowsError,
    InvalidShapeError,
    MatrixError,
    OutOfBoundsError,
    RaggedRowsError,
    ShapeMismatchError,
    UninitializedMatrixError,
)
from ._interop import from_numpy, from_scipy, to_numpy, to_scipy
from ._matrix import Matrix
from ._render import render
from ._typing import SupportsArithmetic

__all__ = [
    # Version
    '__version__',
    # Core
    'Matrix',
    'render',
    'SupportsArithmetic',
    # Conversion
    'from_numpy',
    'to_numpy',
    'from_scipy',
    'to_scipy',
    # Errors
    'MatrixError',
    'InvalidShapeError',
    'ShapeMismatchError',
    'EmptyRowsError',
    'RaggedRowsError',
    'OutOfBoundsError',
    'UninitializedMatrixError',
    # Config
    'config',
    'get_config',
    'set_indexing',
    'set_multiply_guard',
    'MatrixConfig',
    'IndexingConfig',
    'IndexingMode',
    'MultiplyConfig',
    'MultiplyGuard',
    'RenderConfig',
    'Align',
]

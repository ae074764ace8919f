"""
Text rendering for matrices.

The output starts with a newline and has one bracketed line per row. Every
value is padded to the width of the longest value in the whole matrix:

    [   1  20 ]
    [ 300   4 ]

A matrix with no rows renders as a single newline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._config import Align, config

if TYPE_CHECKING:
    from ._matrix import Matrix

__all__ = ["render"]


def render(matrix: "Matrix") -> str:
    """
    Render ``matrix`` as an aligned text grid.

    Raises:
        UninitializedMatrixError: If the matrix has no storage
    """
    cfg = config.render
    cells = [[str(value) for value in row] for row in matrix.iter_rows()]
    width = max((len(text) for row in cells for text in row), default=0)
    pad = str.rjust if cfg.align == Align.RIGHT else str.ljust

    parts = ["\n"]
    for row in cells:
        body = "".join(f"{pad(text, width)} " for text in row)
        parts.append(f"{cfg.open} {body}{cfg.close}\n")
    return "".join(parts)

"""
Pytest configuration and shared fixtures for densemat tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from densemat import Matrix, config  # noqa: E402


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts and ends with default configuration."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def square():
    """2x2 matrix.

    Matrix:
    [[1, 2],
     [3, 4]]
    """
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def wide():
    """2x3 matrix.

    Matrix:
    [[1, 2, 3],
     [4, 5, 6]]
    """
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def tall():
    """3x2 matrix.

    Matrix:
    [[ 7,  8],
     [ 9, 10],
     [11, 12]]
    """
    return Matrix.from_rows([[7, 8], [9, 10], [11, 12]])


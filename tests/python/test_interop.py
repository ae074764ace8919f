"""
Tests for NumPy / SciPy conversion.
"""

import sys

import pytest

try:
    import numpy as np
    HAS_NUMPY = True
except ImportError:
    HAS_NUMPY = False

try:
    import scipy.sparse as sp
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False

import densemat._interop as interop
from densemat import Matrix, UninitializedMatrixError, from_numpy, from_scipy, to_numpy, to_scipy


requires_numpy = pytest.mark.skipif(not HAS_NUMPY, reason="numpy not available")
requires_scipy = pytest.mark.skipif(not HAS_SCIPY, reason="scipy not available")


class TestOptionalDependencies:
    """Test NumPy and SciPy are only needed by the conversion functions."""

    def test_numpy_not_bound_at_import(self):
        """Test the module does not import NumPy when loaded."""
        assert "np" not in vars(interop)

    def test_from_numpy_without_numpy(self, monkeypatch):
        """Test a clear ImportError when NumPy is missing."""
        monkeypatch.setitem(sys.modules, "numpy", None)
        with pytest.raises(ImportError, match="numpy required for from_numpy"):
            from_numpy([[1, 2]])

    def test_to_numpy_without_numpy(self, monkeypatch, square):
        """Test a clear ImportError when NumPy is missing."""
        monkeypatch.setitem(sys.modules, "numpy", None)
        with pytest.raises(ImportError, match="numpy required for to_numpy"):
            to_numpy(square)

    def test_to_scipy_without_scipy(self, monkeypatch, square):
        """Test a clear ImportError when SciPy is missing."""
        monkeypatch.setitem(sys.modules, "scipy.sparse", None)
        with pytest.raises(ImportError, match="scipy required for to_scipy"):
            to_scipy(square)

    def test_matrix_works_without_numpy(self, monkeypatch, square):
        """Test core operations never touch NumPy."""
        monkeypatch.setitem(sys.modules, "numpy", None)
        assert (square @ square).tolist() == [[7, 10], [15, 22]]
        assert str(square) == "\n[ 1 2 ]\n[ 3 4 ]\n"


@requires_numpy
class TestNumpyConversion:
    """Test NumPy conversion."""

    def test_from_numpy_2d(self):
        """Test a 2D array keeps its shape and values."""
        mat = from_numpy(np.arange(6).reshape(2, 3))
        assert mat.shape == (2, 3)
        assert mat.tolist() == [[0, 1, 2], [3, 4, 5]]

    def test_from_numpy_gives_python_scalars(self):
        """Test cells are Python numbers, not NumPy scalars."""
        mat = from_numpy(np.array([[1.5]]))
        assert type(mat.get(0, 0)) is float

    def test_from_numpy_1d_is_column(self):
        """Test a 1D array becomes an (n, 1) matrix."""
        mat = from_numpy(np.array([1, 2, 3]))
        assert mat.shape == (3, 1)

    def test_from_numpy_3d(self):
        """Test 3D input is rejected."""
        with pytest.raises(ValueError):
            from_numpy(np.zeros((2, 2, 2)))

    def test_from_numpy_copies(self):
        """Test the matrix does not share memory with the array."""
        arr = np.zeros((2, 2))
        mat = from_numpy(arr, default=0.0)
        arr[0, 0] = 5.0
        assert mat.get(0, 0) == 0.0

    def test_to_numpy(self, wide):
        """Test export keeps shape and values."""
        arr = to_numpy(wide)
        assert arr.shape == (2, 3)
        np.testing.assert_array_equal(arr, [[1, 2, 3], [4, 5, 6]])

    def test_to_numpy_dtype(self, square):
        """Test explicit dtype."""
        assert to_numpy(square, dtype=np.float32).dtype == np.float32

    def test_to_numpy_empty(self):
        """Test shapes with a zero dimension survive export."""
        assert to_numpy(Matrix(0, 3)).shape == (0, 3)
        assert to_numpy(Matrix(2, 0)).shape == (2, 0)

    def test_to_numpy_unfilled(self):
        """Test export needs storage."""
        with pytest.raises(UninitializedMatrixError):
            to_numpy(Matrix.unfilled(1, 1))

    def test_product_matches_numpy(self, wide, tall):
        """Test the product agrees with NumPy after conversion."""
        np.testing.assert_array_equal(to_numpy(wide @ tall), to_numpy(wide) @ to_numpy(tall))


@requires_numpy
@requires_scipy
class TestScipyConversion:
    """Test SciPy conversion."""

    def test_from_scipy(self):
        """Test a sparse matrix is densified."""
        mat = from_scipy(sp.csr_matrix([[1, 0, 2], [0, 3, 0]]))
        assert mat.tolist() == [[1, 0, 2], [0, 3, 0]]

    def test_from_scipy_rejects_dense(self):
        """Test dense arrays are rejected."""
        with pytest.raises(TypeError):
            from_scipy(np.zeros((2, 2)))

    def test_to_scipy_csr(self, square):
        """Test CSR export."""
        out = to_scipy(square)
        assert out.format == "csr"
        assert out.shape == (2, 2)
        np.testing.assert_array_equal(out.toarray(), [[1, 2], [3, 4]])

    def test_to_scipy_csc(self):
        """Test CSC export stores only non-zeros."""
        out = to_scipy(Matrix.from_rows([[0, 1], [0, 0]]), format="csc")
        assert out.format == "csc"
        assert out.nnz == 1

    def test_to_scipy_bad_format(self, square):
        """Test unknown formats are rejected."""
        with pytest.raises(ValueError):
            to_scipy(square, format="coo")

"""
Tests for packed Cholesky factorization.

Validates:
    - Positive definite matrices factor, and L L' reconstructs them
    - Non positive definite matrices yield None (not an exception)
    - LAPACK status convention of pptrf_status
    - Errors-only entry path rejects non-positive errors up front
    - CholeskyFactor.transform for single and batched deviates
"""

import numpy as np
import pytest

from pylikely.core.compute.linalg.cholesky import (
    CholeskyFactor,
    cholesky_from_errors,
    cholesky_packed,
    pptrf_status,
)
from pylikely.core.compute.linalg.packed import PackedSymmetricMatrix


# ═══════════════════════════════════════════════════════════════════════
# Successful factorization
# ═══════════════════════════════════════════════════════════════════════


class TestPositiveDefinite:

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
    def test_identity(self, n):
        matrix = PackedSymmetricMatrix.from_dense(np.eye(n))
        factor = cholesky_packed(matrix)
        assert isinstance(factor, CholeskyFactor)
        assert factor.n == n
        np.testing.assert_allclose(factor.lower(), np.eye(n))
        np.testing.assert_allclose(factor.reconstruct().to_dense(), np.eye(n))

    def test_known_factor(self):
        matrix = PackedSymmetricMatrix.from_dense([[4.0, 2.0], [2.0, 3.0]])
        factor = cholesky_packed(matrix)
        expected = np.array([[2.0, 0.0], [1.0, np.sqrt(2.0)]])
        np.testing.assert_allclose(factor.lower(), expected, rtol=1e-14)

    def test_random_spd_reconstructs(self, spd_matrix):
        matrix = PackedSymmetricMatrix.from_dense(spd_matrix)
        factor = cholesky_packed(matrix)
        L = factor.lower()
        assert np.allclose(np.triu(L, 1), 0.0)
        np.testing.assert_allclose(L @ L.T, spd_matrix, rtol=1e-12, atol=1e-12)
        np.testing.assert_allclose(
            factor.reconstruct().packed, matrix.packed, rtol=1e-12, atol=1e-12
        )

    def test_matches_numpy(self, spd_matrix):
        factor = cholesky_packed(PackedSymmetricMatrix.from_dense(spd_matrix))
        np.testing.assert_allclose(factor.lower(), np.linalg.cholesky(spd_matrix), rtol=1e-12)

    def test_input_not_modified(self, spd_matrix):
        matrix = PackedSymmetricMatrix.from_dense(spd_matrix)
        before = matrix.copy_packed()
        cholesky_packed(matrix)
        np.testing.assert_array_equal(matrix.packed, before)

    def test_factor_is_read_only(self):
        factor = cholesky_packed(PackedSymmetricMatrix.from_dense(np.eye(2)))
        with pytest.raises(ValueError):
            factor.packed[0] = 3.0

    def test_empty_matrix(self):
        factor = cholesky_packed(PackedSymmetricMatrix([]))
        assert factor is not None
        assert factor.n == 0


# ═══════════════════════════════════════════════════════════════════════
# Failed factorization
# ═══════════════════════════════════════════════════════════════════════


class TestNotPositiveDefinite:

    def test_negative_diagonal_returns_none(self):
        matrix = PackedSymmetricMatrix.from_dense(np.diag([1.0, -1.0]))
        assert cholesky_packed(matrix) is None

    def test_zero_matrix_returns_none(self):
        assert cholesky_packed(PackedSymmetricMatrix(np.zeros(6))) is None

    def test_indefinite_returns_none(self):
        matrix = PackedSymmetricMatrix.from_dense([[1.0, 2.0], [2.0, 1.0]])
        assert cholesky_packed(matrix) is None

    def test_status_reports_failing_minor(self):
        _, info = pptrf_status(np.array([1.0, 0.0, -1.0]), 2)
        assert info == 2

    def test_status_zero_on_success(self):
        buffer, info = pptrf_status(np.array([4.0, 2.0, 3.0]), 2)
        assert info == 0
        np.testing.assert_allclose(buffer, [2.0, 1.0, np.sqrt(2.0)])


# ═══════════════════════════════════════════════════════════════════════
# Errors-only path
# ═══════════════════════════════════════════════════════════════════════


class TestFromErrors:

    def test_positive_errors(self):
        factor = cholesky_from_errors([0.5, 2.0, 3.0])
        np.testing.assert_allclose(factor.lower(), np.diag([0.5, 2.0, 3.0]))

    @pytest.mark.parametrize("errors", [[1.0, 0.0], [1.0, -2.0], [-1.0, -1.0]])
    def test_non_positive_rejected(self, errors):
        assert cholesky_from_errors(errors) is None

    def test_rejected_before_factorization(self, monkeypatch):
        import pylikely.core.compute.linalg.cholesky as chol

        def fail(*args, **kwargs):
            raise AssertionError("factorization must not run")

        monkeypatch.setattr(chol, "cholesky_packed", fail)
        assert chol.cholesky_from_errors([1.0, 0.0, 2.0]) is None


# ═══════════════════════════════════════════════════════════════════════
# Transform
# ═══════════════════════════════════════════════════════════════════════


class TestTransform:

    def test_single_deviate(self, spd_matrix, rng):
        factor = cholesky_packed(PackedSymmetricMatrix.from_dense(spd_matrix))
        g = rng.standard_normal(4)
        np.testing.assert_allclose(factor.transform(g), factor.lower() @ g)

    def test_batch_matches_rows(self, spd_matrix, rng):
        factor = cholesky_packed(PackedSymmetricMatrix.from_dense(spd_matrix))
        g = rng.standard_normal((5, 4))
        batch = factor.transform(g)
        assert batch.shape == (5, 4)
        for k in range(5):
            np.testing.assert_allclose(batch[k], factor.transform(g[k]))

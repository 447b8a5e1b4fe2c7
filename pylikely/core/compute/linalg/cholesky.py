"""
Cholesky factorization of packed symmetric matrices.

The factorization itself is delegated to LAPACK's packed routine
(?pptrf, upper storage) through scipy. A successful factorization both
certifies that the matrix is positive definite and provides the lower
triangular L with L L' = A that turns independent standard normals into
correlated draws.

Failure is an expected outcome: the functions here return None rather
than raising when the matrix is not positive definite. Callers decide
whether that is fatal.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import lapack

from pylikely.core.compute.linalg.packed import (
    PackedSymmetricMatrix,
    packed_positions,
)
from pylikely.core.validation import check_1d, check_array, check_finite


def pptrf_status(
    packed: NDArray[np.floating[Any]],
    n: int,
) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Run LAPACK ?pptrf on a copy of an upper packed matrix.

    Args:
        packed: Upper packed matrix of length n*(n+1)/2
        n: Matrix dimension

    Returns:
        (buffer, info) with the LAPACK convention: info == 0 means the
        buffer holds the factor U (A = U'U, upper packed); info > 0 is the
        1-based order of the first leading minor that is not positive
        definite, and the buffer contents must be discarded.
    """
    ap = np.array(packed, dtype=np.float64, copy=True)
    if n == 0:
        return ap, 0
    pptrf, = lapack.get_lapack_funcs(('pptrf',), (ap,))
    ul, info = pptrf(n, ap, lower=0)
    return ul, int(info)


class CholeskyFactor:
    """
    Lower triangular Cholesky factor L of a packed symmetric matrix.

    Stored with the same offsets as the matrix it factors: the entry at
    packed_index(i, j), i <= j, is L[j, i]. Only produced by a successful
    factorization.
    """

    __slots__ = ('_packed', '_n')

    def __init__(self, packed: NDArray[np.floating[Any]], n: int):
        data = np.array(packed, dtype=np.float64, copy=True)
        data.flags.writeable = False
        self._packed = data
        self._n = n

    @property
    def n(self) -> int:
        return self._n

    @property
    def packed(self) -> NDArray[np.floating[Any]]:
        return self._packed

    def lower(self) -> NDArray[np.floating[Any]]:
        """Dense lower triangular L."""
        L = np.zeros((self._n, self._n))
        rows, cols = packed_positions(self._n)
        L[rows, cols] = self._packed
        return L

    def transform(self, gauss: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Apply L to standard normal deviates.

        Args:
            gauss: shape (n,) for one deviate or (m, n) for m deviates

        Returns:
            L @ g for each deviate, same shape as the input
        """
        g = np.asarray(gauss, dtype=np.float64)
        L = self.lower()
        if g.ndim == 1:
            return L @ g
        return g @ L.T

    def reconstruct(self) -> PackedSymmetricMatrix:
        """L L' in packed form; equals the factored matrix up to rounding."""
        L = self.lower()
        return PackedSymmetricMatrix.from_dense(_symmetrize(L @ L.T), name="L L'")

    def __repr__(self) -> str:
        return f"CholeskyFactor(n={self._n})"


def _symmetrize(a: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    return 0.5 * (a + a.T)


def cholesky_packed(matrix: PackedSymmetricMatrix) -> CholeskyFactor | None:
    """
    Factorize a packed symmetric matrix.

    No tolerance is applied: the LAPACK status alone decides success.

    Returns:
        The factor, or None if the matrix is not positive definite.
    """
    buffer, info = pptrf_status(matrix.packed, matrix.n)
    if info != 0:
        return None
    return CholeskyFactor(buffer, matrix.n)


def cholesky_from_errors(errors: ArrayLike) -> CholeskyFactor | None:
    """
    Factorize the diagonal covariance implied by per-parameter errors.

    Any error <= 0 rejects the whole vector before factorization.

    Returns:
        The factor, or None if some error is not strictly positive.
    """
    sigma = check_array(errors, "errors")
    check_1d(sigma, "errors")
    check_finite(sigma, "errors")
    if np.any(sigma <= 0):
        return None
    return cholesky_packed(PackedSymmetricMatrix.from_errors(sigma))


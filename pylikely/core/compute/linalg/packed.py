"""
Packed storage for symmetric matrices.

A symmetric N x N matrix is stored as its upper triangle in column-major
packed order, the layout LAPACK calls 'U' packed storage:

    offset(i, j) = i + j*(j+1)/2    for 0 <= i <= j < N

so a packed vector always has N*(N+1)/2 elements. The same layout, read
as the transposed (lower) triangle, holds a Cholesky factor.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylikely.core.exceptions import DimensionError, ValidationError
from pylikely.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_finite,
    check_square,
    check_symmetric,
)


def packed_size(n: int) -> int:
    """Number of stored elements for an n x n symmetric matrix."""
    if n < 0:
        raise ValidationError(f"n: must be >= 0, got {n}")
    return n * (n + 1) // 2


def packed_index(i: int, j: int) -> int:
    """
    Offset of element (i, j) in packed storage.

    The matrix is symmetric, so (i, j) and (j, i) share one offset.
    """
    if i > j:
        i, j = j, i
    return i + j * (j + 1) // 2


def dimension_from_packed_length(length: int) -> int:
    """
    Recover N from a packed length N*(N+1)/2.

    Raises:
        DimensionError: If no non-negative integer N matches the length
    """
    if length < 0:
        raise DimensionError(f"packed length must be >= 0, got {length}", actual=length)
    n = (math.isqrt(8 * length + 1) - 1) // 2
    if packed_size(n) != length:
        raise DimensionError(
            f"packed length {length} is not N*(N+1)/2 for any integer N "
            f"(nearest: N={n} -> {packed_size(n)}, N={n + 1} -> {packed_size(n + 1)})",
            actual=length,
        )
    return n


def packed_positions(n: int) -> tuple[NDArray[np.intp], NDArray[np.intp]]:
    # Row-major traversal of the lower triangle visits (j, i) in the same
    # order as the column-major upper packed layout visits (i, j).
    return np.tril_indices(n)


class PackedSymmetricMatrix:
    """
    Immutable symmetric matrix held in packed upper-triangle storage.

    The data is always copied on construction and the internal buffer is
    marked read-only, so no two objects ever alias mutable storage.

    Attributes:
        n: Matrix dimension
        packed: Read-only packed vector of length n*(n+1)/2
    """

    __slots__ = ('_packed', '_n')

    def __init__(self, packed: ArrayLike, name: str = "packed"):
        data = check_array(packed, name)
        check_1d(data, name)
        check_finite(data, name)
        self._n = dimension_from_packed_length(data.shape[0])
        data.flags.writeable = False
        self._packed = data

    @classmethod
    def from_dense(cls, matrix: ArrayLike, name: str = "matrix") -> PackedSymmetricMatrix:
        """
        Pack a square, symmetric dense matrix.

        Rounding-level asymmetry is accepted and averaged out; anything
        larger raises ValidationError.
        """
        dense = check_array(matrix, name)
        check_2d(dense, name)
        check_square(dense, name)
        check_finite(dense, name)
        check_symmetric(dense, name)
        # Enforce exact symmetry (avoid floating point drift)
        dense = (dense + dense.T) / 2
        rows, cols = packed_positions(dense.shape[0])
        return cls(dense[cols, rows], name=name)

    @classmethod
    def from_errors(cls, errors: ArrayLike, name: str = "errors") -> PackedSymmetricMatrix:
        """Diagonal matrix with the squared errors on the diagonal."""
        sigma = check_array(errors, name)
        check_1d(sigma, name)
        check_finite(sigma, name)
        n = sigma.shape[0]
        packed = np.zeros(packed_size(n))
        packed[diagonal_offsets(n)] = sigma * sigma
        return cls(packed, name=name)

    @property
    def n(self) -> int:
        return self._n

    @property
    def packed(self) -> NDArray[np.floating[Any]]:
        return self._packed

    def __len__(self) -> int:
        return self._packed.shape[0]

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        if not (0 <= i < self._n and 0 <= j < self._n):
            raise IndexError(f"index ({i}, {j}) out of range for {self._n}x{self._n} matrix")
        return float(self._packed[packed_index(i, j)])

    def diagonal(self) -> NDArray[np.floating[Any]]:
        """Copy of the diagonal entries."""
        return self._packed[diagonal_offsets(self._n)].copy()

    def to_dense(self) -> NDArray[np.floating[Any]]:
        """Full symmetric n x n matrix."""
        dense = np.zeros((self._n, self._n))
        rows, cols = packed_positions(self._n)
        dense[rows, cols] = self._packed
        dense[cols, rows] = self._packed
        return dense

    def copy_packed(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the packed buffer."""
        return self._packed.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackedSymmetricMatrix):
            return NotImplemented
        return np.array_equal(self._packed, other._packed)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PackedSymmetricMatrix(n={self._n})"


def diagonal_offsets(n: int) -> NDArray[np.intp]:
    """Packed offsets of the diagonal entries (i, i), i.e. i*(i+3)/2."""
    i = np.arange(n)
    return i * (i + 3) // 2

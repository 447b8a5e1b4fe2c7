"""
Linear algebra kernels for pylikely.

Packed symmetric storage and the one factorization the library needs.

Conventions:
    - Matrices are stored packed, upper triangle, column-major (LAPACK 'U')
    - The factorization is delegated to LAPACK through scipy
    - A matrix that is not positive definite yields None, not an exception

Submodules:
    packed: Packed storage, index arithmetic, PackedSymmetricMatrix
    cholesky: Packed Cholesky factorization and CholeskyFactor
"""

from pylikely.core.compute.linalg.packed import (
    PackedSymmetricMatrix,
    diagonal_offsets,
    dimension_from_packed_length,
    packed_index,
    packed_size,
)
from pylikely.core.compute.linalg.cholesky import (
    CholeskyFactor,
    cholesky_from_errors,
    cholesky_packed,
    pptrf_status,
)

__all__ = [
    # Packed storage
    "PackedSymmetricMatrix",
    "diagonal_offsets",
    "dimension_from_packed_length",
    "packed_index",
    "packed_size",
    # Cholesky
    "CholeskyFactor",
    "cholesky_from_errors",
    "cholesky_packed",
    "pptrf_status",
]

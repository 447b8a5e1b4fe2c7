"""
Core infrastructure for pylikely.

Shared abstractions and utilities used by all domain-specific submodules
(minimum, random, fitparams, interpolate, binning).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, packed matrices, Cholesky factorization
"""

from pylikely.core.result import Result
from pylikely.core.exceptions import (
    LikelyError,
    ValidationError,
    DimensionError,
    BinningError,
    NumericalError,
    NotPositiveDefiniteError,
    MissingCovarianceError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "LikelyError",
    "ValidationError",
    "DimensionError",
    "BinningError",
    "NumericalError",
    "NotPositiveDefiniteError",
    "MissingCovarianceError",
]
